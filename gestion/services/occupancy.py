from django.db.models import Count, Q

from ..models import Bed, Service


def _rate(part: int, total: int) -> float:
    return round(part * 100 / total, 1) if total else 0.0


def service_occupancy(service: Service) -> dict:
    """Bed counts of a service by status, with occupancy percentages."""
    counts = service.beds.aggregate(
        total=Count('id'),
        available=Count('id', filter=Q(status=Bed.STATUS_AVAILABLE)),
        occupied=Count('id', filter=Q(status__iexact=Bed.STATUS_OCCUPIED)),
        maintenance=Count('id', filter=Q(status=Bed.STATUS_MAINTENANCE)),
    )
    total = counts['total']
    return {
        'serviceId': service.pk,
        'total': total,
        'available': counts['available'],
        'occupied': counts['occupied'],
        'maintenance': counts['maintenance'],
        'occupancyRate': _rate(counts['occupied'], total),
        'availabilityRate': _rate(counts['available'], total),
    }
