"""
CRUD endpoints of every entity, built from :mod:`gestion.views.resources`.
"""
from ..models import (
    Bed,
    BedReservation,
    CareAssignment,
    Document,
    Establishment,
    Material,
    Medication,
    Patient,
    Personnel,
    Service,
    Transfer,
)
from ..serializers.care import CareAssignmentSerializer, TransferSerializer
from ..serializers.facilities import (
    BedSerializer,
    EstablishmentDetailSerializer,
    EstablishmentSerializer,
    ServiceSerializer,
)
from ..serializers.inventory import DocumentSerializer, MaterialSerializer, MedicationSerializer
from ..serializers.patient import PatientSerializer, PersonnelSerializer
from ..serializers.reservation import BedReservationSerializer
from .resources import Resource, collection_view, detail_view

ESTABLISHMENTS = Resource(
    'establishments', Establishment, EstablishmentSerializer,
    detail_serializer=EstablishmentDetailSerializer,
)
SERVICES = Resource(
    'services', Service, ServiceSerializer,
    filters=[(('etablissementId', 'establishmentId'), 'establishment_id')],
)
PERSONNEL = Resource(
    'personnel', Personnel, PersonnelSerializer,
    filters=[
        (('etablissementId', 'establishmentId'), 'service__establishment'),
        (('serviceId',), 'service_id'),
    ],
)
PATIENTS = Resource('patients', Patient, PatientSerializer, ordering=('last_name', 'first_name'))
BEDS = Resource(
    'beds', Bed, BedSerializer,
    filters=[(('serviceId',), 'service_id'), (('statut', 'status'), 'status')],
    ordering=('bed_number',),
)
RESERVATIONS = Resource(
    'reservations', BedReservation, BedReservationSerializer,
    filters=[(('patientId',), 'patient_id'), (('litId', 'bedId'), 'bed_id')],
    ordering=('arrival_date',),
)
CARE_ASSIGNMENTS = Resource(
    'care_assignments', CareAssignment, CareAssignmentSerializer,
    filters=[(('personnelId',), 'personnel_id'), (('patientId',), 'patient_id')],
)
TRANSFERS = Resource(
    'transfers', Transfer, TransferSerializer,
    filters=[(('patientId',), 'patient_id')],
    ordering=('-date',),
)
MATERIALS = Resource(
    'materials', Material, MaterialSerializer,
    filters=[(('serviceId',), 'service_id')],
)
MEDICATIONS = Resource('medications', Medication, MedicationSerializer, ordering=('name',))
DOCUMENTS = Resource(
    'documents', Document, DocumentSerializer,
    filters=[
        (('patientId',), 'patient_id'),
        (('personnelId',), 'personnel_id'),
        (('serviceId',), 'service_id'),
    ],
)

establishments_list = collection_view(ESTABLISHMENTS)
establishment_detail = detail_view(ESTABLISHMENTS)
services_list = collection_view(SERVICES)
service_detail = detail_view(SERVICES)
personnel_list = collection_view(PERSONNEL)
personnel_detail = detail_view(PERSONNEL)
patients_list = collection_view(PATIENTS)
patient_detail = detail_view(PATIENTS)
beds_list = collection_view(BEDS)
bed_detail = detail_view(BEDS)
reservations_list = collection_view(RESERVATIONS)
reservation_detail = detail_view(RESERVATIONS)
care_assignments_list = collection_view(CARE_ASSIGNMENTS)
care_assignment_detail = detail_view(CARE_ASSIGNMENTS)
transfers_list = collection_view(TRANSFERS)
transfer_detail = detail_view(TRANSFERS)
materials_list = collection_view(MATERIALS)
material_detail = detail_view(MATERIALS)
medications_list = collection_view(MEDICATIONS)
medication_detail = detail_view(MEDICATIONS)
documents_list = collection_view(DOCUMENTS)
document_detail = detail_view(DOCUMENTS)
