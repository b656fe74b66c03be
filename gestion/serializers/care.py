from rest_framework import serializers

from ..models import CareAssignment, Establishment, Patient, Personnel, Service, Transfer
from .common import RECORD_FIELDS, RecordSerializer, reference, text, timestamp


class CareAssignmentSerializer(RecordSerializer):
    personnelId = reference(
        'personnel', Personnel.objects.all(), required=True,
        error_messages={'required': 'personnel id required', 'null': 'personnel id required'},
    )
    patientId = reference(
        'patient', Patient.objects.all(), required=True,
        error_messages={'required': 'patient id required', 'null': 'patient id required'},
    )
    startDate = timestamp('start_date', allow_null=False)
    endDate = timestamp('end_date')
    description = text()
    diagnosis = text()
    treatment = text()
    notes = text()

    class Meta:
        model = CareAssignment
        fields = RECORD_FIELDS + (
            'personnelId', 'patientId', 'startDate', 'endDate',
            'description', 'diagnosis', 'treatment', 'notes',
        )

    def validate(self, attrs):
        start = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end = attrs.get('end_date', getattr(self.instance, 'end_date', None))
        if start and end and end < start:
            raise serializers.ValidationError({'endDate': 'end date must not precede start date'})
        return attrs


class TransferSerializer(RecordSerializer):
    patientId = reference(
        'patient', Patient.objects.all(), required=True,
        error_messages={'required': 'patient id required', 'null': 'patient id required'},
    )
    departureServiceId = reference(
        'departure_service', Service.objects.all(), required=True,
        error_messages={'required': 'departure service id required', 'null': 'departure service id required'},
    )
    arrivalServiceId = reference(
        'arrival_service', Service.objects.all(), required=True,
        error_messages={'required': 'arrival service id required', 'null': 'arrival service id required'},
    )
    reason = text()
    date = timestamp(allow_null=False)
    status = text(max_length=32)
    authorizedBy = text('authorized_by', max_length=128)
    performedBy = text('performed_by', max_length=128)
    departureEstablishmentId = reference('departure_establishment', Establishment.objects.all())
    arrivalEstablishmentId = reference('arrival_establishment', Establishment.objects.all())

    class Meta:
        model = Transfer
        fields = RECORD_FIELDS + (
            'patientId', 'departureServiceId', 'arrivalServiceId', 'reason', 'date', 'status',
            'authorizedBy', 'performedBy', 'departureEstablishmentId', 'arrivalEstablishmentId',
        )
