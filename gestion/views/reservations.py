from rest_framework.decorators import api_view
from rest_framework.response import Response

from ..serializers.reservation import AvailabilityQuerySerializer
from ..services.availability import check_availability


@api_view(['GET'])
def check_bed_availability(request):
    """Tell whether a bed is free over ``[startDate, endDate]``.

    Advisory only: the answer may be stale by the time a reservation is
    posted.  ``reservationId`` leaves the reservation being edited out
    of the comparison.
    """
    q = AvailabilityQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    data = q.validated_data
    available = check_availability(
        data['litId'], data['startDate'], data['endDate'], data.get('reservationId') or None
    )
    return Response({'available': available})
