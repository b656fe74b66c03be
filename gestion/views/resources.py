"""
Generic CRUD views.

Every collection of the API follows the same contract, so the views are
generated from a :class:`Resource` description instead of being written
by hand for each model:

* ``GET /<plural>`` lists all records, optionally narrowed by one
  equality filter.  Filters are tried in declaration order and the first
  query parameter present wins.
* ``POST /<plural>`` validates the payload with the resource serializer
  and answers 201 with the stored record.
* ``GET /<plural>/<id>`` answers 404 for an unknown id.
* ``PUT`` and ``PATCH /<plural>/<id>`` both merge the payload into the
  stored record and re-validate it.  An unknown id is a 400.
* ``DELETE /<plural>/<id>`` goes through the delete guard and answers 204.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Tuple

from django.db.models import QuerySet
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from ..services.guards import get_for_write, guarded_delete

logger = logging.getLogger(__name__)

Filter = Tuple[Sequence[str], str]


class Resource:
    def __init__(self, name: str, model, serializer, filters: Iterable[Filter] = (),
                 detail_serializer=None, ordering: Sequence[str] = ('-created_at',)):
        self.name = name
        self.model = model
        self.serializer = serializer
        self.detail_serializer = detail_serializer or serializer
        self.filters = list(filters)
        self.ordering = ordering

    def queryset(self, params) -> QuerySet:
        qs = self.model._default_manager.all().order_by(*self.ordering)
        lookup, value = self.active_filter(params)
        if lookup:
            qs = qs.filter(**{lookup: value})
        return qs

    def active_filter(self, params) -> Tuple[Optional[str], Optional[str]]:
        for names, lookup in self.filters:
            for name in names:
                value = params.get(name)
                if value:
                    return lookup, value
        return None, None


def collection_view(resource: Resource):
    def collection(request):
        if request.method == 'GET':
            qs = resource.queryset(request.query_params)
            return Response(resource.serializer(qs, many=True).data)
        serializer = resource.serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        obj = serializer.save()
        logger.info('created %s %s', resource.model._meta.verbose_name, obj.pk)
        return Response(resource.serializer(obj).data, status=status.HTTP_201_CREATED)

    collection.__name__ = f'{resource.name}_list'
    return api_view(['GET', 'POST'])(collection)


def detail_view(resource: Resource):
    def detail(request, pk: str):
        if request.method == 'GET':
            obj = get_object_or_404(resource.model, pk=pk)
            return Response(resource.detail_serializer(obj).data)
        obj = get_for_write(resource.model, pk)
        if request.method == 'DELETE':
            guarded_delete(obj)
            return Response(status=status.HTTP_204_NO_CONTENT)
        # PUT 与 PATCH 行为一致：合并后重新校验
        serializer = resource.serializer(obj, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        obj = serializer.save()
        logger.info('updated %s %s', resource.model._meta.verbose_name, obj.pk)
        return Response(resource.serializer(obj).data)

    detail.__name__ = f'{resource.name}_detail'
    return api_view(['GET', 'PUT', 'PATCH', 'DELETE'])(detail)
