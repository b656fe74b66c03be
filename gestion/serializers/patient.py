from rest_framework import serializers

from ..models import Patient, Personnel, Service
from .common import RECORD_FIELDS, RecordSerializer, reference, sanitize, text, timestamp


class PersonnelSerializer(RecordSerializer):
    lastName = text('last_name', required=True, max_length=128)
    firstName = text('first_name', required=True, max_length=128)
    birthDate = timestamp('birth_date')
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    phone = text(max_length=32)
    profession = text(required=True, max_length=128)
    specialty = text(max_length=128)
    staffNumber = text('staff_number', max_length=64)
    serviceId = reference('service', Service.objects.all())
    hireDate = timestamp('hire_date')
    status = text(max_length=32)

    class Meta:
        model = Personnel
        fields = RECORD_FIELDS + (
            'lastName', 'firstName', 'birthDate', 'email', 'phone', 'profession',
            'specialty', 'staffNumber', 'serviceId', 'hireDate', 'status',
        )


class PatientSerializer(RecordSerializer):
    lastName = text('last_name', required=True, max_length=128)
    firstName = text('first_name', required=True, max_length=128)
    birthDate = timestamp('birth_date', required=True)
    address = text(max_length=255)
    phone = text(max_length=32)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    socialSecurityNumber = text('social_security_number', max_length=32)
    bloodGroup = text('blood_group', max_length=8)
    allergies = text()
    medicalHistory = text('medical_history')
    admissionDate = timestamp('admission_date')
    dischargeDate = timestamp('discharge_date')
    status = text(max_length=32)

    class Meta:
        model = Patient
        fields = RECORD_FIELDS + (
            'lastName', 'firstName', 'birthDate', 'address', 'phone', 'email',
            'socialSecurityNumber', 'bloodGroup', 'allergies', 'medicalHistory',
            'admissionDate', 'dischargeDate', 'status',
        )

    def validate(self, attrs):
        admission = attrs.get('admission_date', getattr(self.instance, 'admission_date', None))
        discharge = attrs.get('discharge_date', getattr(self.instance, 'discharge_date', None))
        if admission and discharge and discharge < admission:
            raise serializers.ValidationError({'dischargeDate': 'discharge date must not precede admission date'})
        return attrs


class PatientSearchQuerySerializer(serializers.Serializer):
    query = serializers.CharField(max_length=128)

    def validate_query(self, v):
        v = sanitize((v or '').strip())
        if not v:
            raise serializers.ValidationError('query is required')
        return v
