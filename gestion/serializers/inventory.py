from rest_framework import serializers

from ..models import Document, Material, Medication, Patient, Personnel, Service
from .common import RECORD_FIELDS, RecordSerializer, reference, text, timestamp


class MaterialSerializer(RecordSerializer):
    name = text(required=True, max_length=255)
    description = text()
    quantity = serializers.IntegerField(required=False, min_value=1)
    type = text(max_length=64)
    brand = text(max_length=128)
    model = text(max_length=128)
    serialNumber = text('serial_number', max_length=128)
    purchaseDate = timestamp('purchase_date')
    maintenanceDate = timestamp('maintenance_date')
    status = text(max_length=32)
    serviceId = reference('service', Service.objects.all())

    class Meta:
        model = Material
        fields = RECORD_FIELDS + (
            'name', 'description', 'quantity', 'type', 'brand', 'model', 'serialNumber',
            'purchaseDate', 'maintenanceDate', 'status', 'serviceId',
        )


class MedicationSerializer(RecordSerializer):
    name = text(required=True, max_length=255)
    dosage = text(max_length=64)
    description = text()
    category = text(max_length=128)
    manufacturer = text(max_length=128)
    currentStock = serializers.IntegerField(source='current_stock', required=False, min_value=0)
    minimumStock = serializers.IntegerField(source='minimum_stock', required=False, min_value=0)
    expiryDate = timestamp('expiry_date')

    class Meta:
        model = Medication
        fields = RECORD_FIELDS + (
            'name', 'dosage', 'description', 'category', 'manufacturer',
            'currentStock', 'minimumStock', 'expiryDate',
        )


class DocumentSerializer(RecordSerializer):
    title = text(required=True, max_length=255)
    documentType = text('document_type', required=True, max_length=64)
    content = text()
    url = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=512)
    patientId = reference('patient', Patient.objects.all())
    personnelId = reference('personnel', Personnel.objects.all())
    serviceId = reference('service', Service.objects.all())

    class Meta:
        model = Document
        fields = RECORD_FIELDS + (
            'title', 'documentType', 'content', 'url', 'patientId', 'personnelId', 'serviceId',
        )
