from rest_framework import serializers

from ..models import Bed, BedReservation, Establishment, Patient
from ..services.reservations import create_reservation, update_reservation
from .common import RECORD_FIELDS, RecordSerializer, reference, timestamp


class BedReservationSerializer(RecordSerializer):
    """Bed reservation.

    Writes go through :mod:`gestion.services.reservations`, which refuses a
    reservation overlapping another one of the same bed.  Dates are checked
    here against the stored values so a partial update cannot invert the
    interval.
    """
    aliases = {
        'litId': 'bedId',
        'dateArrivee': 'arrivalDate',
        'dateDepart': 'departureDate',
        'etablissementDestinationId': 'destinationEstablishmentId',
    }

    bedId = reference(
        'bed', Bed.objects.all(), required=True,
        error_messages={'required': 'bed id required', 'null': 'bed id required'},
    )
    patientId = reference('patient', Patient.objects.all())
    arrivalDate = timestamp('arrival_date', required=True)
    departureDate = timestamp('departure_date', required=True)
    destinationEstablishmentId = reference('destination_establishment', Establishment.objects.all())

    class Meta:
        model = BedReservation
        fields = RECORD_FIELDS + (
            'bedId', 'patientId', 'arrivalDate', 'departureDate', 'destinationEstablishmentId',
        )

    def validate(self, attrs):
        arrival = attrs.get('arrival_date', getattr(self.instance, 'arrival_date', None))
        departure = attrs.get('departure_date', getattr(self.instance, 'departure_date', None))
        if arrival and departure and arrival > departure:
            raise serializers.ValidationError({'departureDate': 'departure date must not precede arrival date'})
        return attrs

    def create(self, validated_data):
        return create_reservation(validated_data)

    def update(self, instance, validated_data):
        return update_reservation(instance, validated_data)


class AvailabilityQuerySerializer(serializers.Serializer):
    litId = serializers.CharField(max_length=64, error_messages={'required': 'bed id required', 'blank': 'bed id required'})
    startDate = serializers.DateTimeField()
    endDate = serializers.DateTimeField()
    reservationId = serializers.CharField(max_length=64, required=False, allow_blank=True)

    def validate(self, attrs):
        if attrs['startDate'] > attrs['endDate']:
            raise serializers.ValidationError({'endDate': 'end date must not precede start date'})
        return attrs
