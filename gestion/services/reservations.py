import logging

from django.conf import settings
from django.db import transaction

from ..exceptions import BedUnavailable
from ..models import Bed, BedReservation
from .availability import conflicting_reservations

logger = logging.getLogger(__name__)


def _ensure_bed_free(bed, arrival, departure, exclude_id=None):
    if not getattr(settings, 'RESERVATION_ENFORCE_AVAILABILITY', True):
        return
    # 锁住床位行，串行化同一张床的并发预约
    Bed.objects.select_for_update().filter(pk=bed.pk).first()
    conflicts = list(
        conflicting_reservations(bed.pk, arrival, departure, exclude_id).values_list('pk', flat=True)
    )
    if conflicts:
        logger.warning('bed %s unavailable %s~%s, conflicts=%s', bed.pk, arrival, departure, conflicts)
        raise BedUnavailable(conflicts=conflicts)


def create_reservation(data: dict) -> BedReservation:
    with transaction.atomic():
        _ensure_bed_free(data['bed'], data['arrival_date'], data['departure_date'])
        reservation = BedReservation.objects.create(**data)
    logger.info('reservation %s created for bed %s', reservation.pk, reservation.bed_id)
    return reservation


def update_reservation(reservation: BedReservation, data: dict) -> BedReservation:
    with transaction.atomic():
        for field, value in data.items():
            setattr(reservation, field, value)
        _ensure_bed_free(reservation.bed, reservation.arrival_date, reservation.departure_date,
                         exclude_id=reservation.pk)
        reservation.save()
    logger.info('reservation %s updated', reservation.pk)
    return reservation
