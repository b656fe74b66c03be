from django.shortcuts import get_object_or_404
from rest_framework.decorators import api_view
from rest_framework.response import Response

from ..models import Service
from ..services.occupancy import service_occupancy


@api_view(['GET'])
def service_occupation(request, pk: str):
    """Bed occupancy of one service: counts per status and rates in percent."""
    service = get_object_or_404(Service, pk=pk)
    return Response(service_occupancy(service))
