from rest_framework import serializers

from ..models import Bed, Establishment, Patient, Personnel, Service
from .common import RECORD_FIELDS, RecordSerializer, reference, text


class EstablishmentSerializer(RecordSerializer):
    name = text(required=True, max_length=255)
    address = text(required=True, max_length=255)
    capacity = serializers.IntegerField(required=False, min_value=0)
    phone = text(max_length=32)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    website = serializers.URLField(required=False, allow_blank=True, allow_null=True)
    postalCode = text('postal_code', max_length=16)
    city = text(max_length=128)
    country = text(max_length=128, allow_null=False)
    status = text(max_length=32)
    typology = text(max_length=64)

    class Meta:
        model = Establishment
        fields = RECORD_FIELDS + (
            'name', 'address', 'capacity', 'phone', 'email', 'website',
            'postalCode', 'city', 'country', 'status', 'typology',
        )


class ServiceSerializer(RecordSerializer):
    name = text(required=True, max_length=255)
    description = text()
    establishmentId = reference(
        'establishment', Establishment.objects.all(), required=True,
        error_messages={'required': 'establishment id required', 'null': 'establishment id required'},
    )
    floor = text(max_length=32)
    wing = text(max_length=32)
    capacity = serializers.IntegerField(required=False, min_value=0)
    status = text(max_length=32)
    specialty = text(max_length=128)
    managerId = reference('manager', Personnel.objects.all())

    class Meta:
        model = Service
        fields = RECORD_FIELDS + (
            'name', 'description', 'establishmentId', 'floor', 'wing',
            'capacity', 'status', 'specialty', 'managerId',
        )


class EstablishmentDetailSerializer(EstablishmentSerializer):
    """Establishment with its services embedded (detail endpoint)."""
    services = ServiceSerializer(many=True, read_only=True)

    class Meta(EstablishmentSerializer.Meta):
        fields = EstablishmentSerializer.Meta.fields + ('services',)


class BedSerializer(RecordSerializer):
    bedNumber = text('bed_number', required=True, max_length=32)
    serviceId = reference(
        'service', Service.objects.all(), required=True,
        error_messages={'required': 'service id required', 'null': 'service id required'},
    )
    type = text(max_length=64)
    status = text(max_length=32)
    room = text(max_length=32)
    floor = text(max_length=32)
    patientId = reference('patient', Patient.objects.all())

    class Meta:
        model = Bed
        fields = RECORD_FIELDS + (
            'bedNumber', 'serviceId', 'type', 'status', 'room', 'floor', 'patientId',
        )
