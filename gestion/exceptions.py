import logging

from django.db import DatabaseError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class EntityNotFound(exceptions.APIException):
    """A write targeted an id that does not exist (answered with 400)."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'record not found'
    default_code = 'not_found'


class DependentRecordsExist(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'record has dependent records'
    default_code = 'has_dependents'

    def __init__(self, detail=None, dependents=None):
        super().__init__(detail)
        self.details = dependents or {}


class BedUnavailable(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'bed is not available for the requested dates'
    default_code = 'bed_unavailable'

    def __init__(self, detail=None, conflicts=None):
        super().__init__(detail)
        self.details = {'conflicts': list(conflicts or [])}


class StoreUnavailable(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'storage backend unavailable'
    default_code = 'store_error'


def _error(code, message, http_status, details=None):
    body = {'code': code, 'message': message}
    if details:
        body['details'] = details
    return Response({'ok': False, 'error': body}, status=http_status)


def api_exception_handler(exc, context):
    if isinstance(exc, DatabaseError):
        logger.error('database error in %s', context.get('view'), exc_info=exc)
        exc = StoreUnavailable()
    elif isinstance(exc, Http404):
        exc = exceptions.NotFound()

    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.error('unhandled error in %s', context.get('view'), exc_info=exc)
        set_rollback()
        return _error('server_error', 'internal server error', status.HTTP_500_INTERNAL_SERVER_ERROR)

    # normalize response
    if isinstance(exc, exceptions.ValidationError):
        return _error('invalid', 'validation failed', resp.status_code, resp.data)
    message = exc.detail if isinstance(exc, exceptions.APIException) else resp.data
    code = exc.get_codes() if isinstance(exc, exceptions.APIException) else 'api_error'
    if not isinstance(code, str):
        code = 'api_error'
    return _error(code, str(message), resp.status_code, getattr(exc, 'details', None))
