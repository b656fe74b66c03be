"""
Bed availability.

A bed is free over ``[start, end]`` when none of its reservations
intersects that range.  Both boundaries are inclusive, so a reservation
ending on the day another one starts is a conflict.
"""
import logging
from datetime import datetime
from typing import Optional

from django.db import DatabaseError
from django.db.models import Q, QuerySet
from rest_framework.exceptions import ValidationError

from ..exceptions import StoreUnavailable
from ..models import BedReservation

logger = logging.getLogger(__name__)


def conflicting_reservations(bed_id: str, start: datetime, end: datetime,
                             exclude_id: Optional[str] = None) -> QuerySet:
    if not bed_id:
        raise ValidationError({'litId': 'bed id required'})
    qs = BedReservation.objects.filter(bed_id=bed_id).filter(
        # start falls inside an existing reservation
        Q(arrival_date__lte=start, departure_date__gte=start)
        # end falls inside an existing reservation
        | Q(arrival_date__lte=end, departure_date__gte=end)
        # the requested range contains an existing reservation
        | Q(arrival_date__gte=start, departure_date__lte=end)
    )
    if exclude_id:
        qs = qs.exclude(pk=exclude_id)
    return qs


def check_availability(bed_id: str, start: datetime, end: datetime,
                       exclude_id: Optional[str] = None) -> bool:
    """Return True when no other reservation of ``bed_id`` overlaps ``[start, end]``.

    ``exclude_id`` leaves out the reservation being edited.  A storage
    failure is raised as :class:`StoreUnavailable`, never reported as an
    unavailable bed.
    """
    try:
        return not conflicting_reservations(bed_id, start, end, exclude_id).exists()
    except DatabaseError as exc:
        logger.error('availability check failed for bed %s', bed_id, exc_info=True)
        raise StoreUnavailable() from exc
