"""
URL mappings for the hospital administration API.

Collection names keep the plural French paths the front-end calls
(``/etablissements``, ``/reservationsLit``...).  Trailing slashes are
deliberately omitted.  Fixed sub-paths such as
``/reservationsLit/check-availability`` must be declared before the
``<str:pk>`` detail route of the same collection.
"""
from django.urls import path

from .views import collections as c
from .views import health
from .views.facilities import service_occupation
from .views.patients import search_patients
from .views.reservations import check_bed_availability


urlpatterns = [
    path('healthz', health.healthz),
    # Establishments & services
    path('etablissements', c.establishments_list),
    path('etablissements/<str:pk>', c.establishment_detail),
    path('services', c.services_list),
    path('services/<str:pk>/occupation', service_occupation),
    path('services/<str:pk>', c.service_detail),
    # Staff
    path('personnels', c.personnel_list),
    path('personnels/<str:pk>', c.personnel_detail),
    # Patients
    path('patients', c.patients_list),
    path('patients/search', search_patients),
    path('patients/<str:pk>', c.patient_detail),
    # Beds & reservations
    path('lits', c.beds_list),
    path('lits/<str:pk>', c.bed_detail),
    path('reservationsLit', c.reservations_list),
    path('reservationsLit/check-availability', check_bed_availability),
    path('reservationsLit/<str:pk>', c.reservation_detail),
    # Patient care
    path('prisesEnCharge', c.care_assignments_list),
    path('prisesEnCharge/<str:pk>', c.care_assignment_detail),
    path('transferts', c.transfers_list),
    path('transferts/<str:pk>', c.transfer_detail),
    # Inventory & documents
    path('materiels', c.materials_list),
    path('materiels/<str:pk>', c.material_detail),
    path('medicaments', c.medications_list),
    path('medicaments/<str:pk>', c.medication_detail),
    path('documents', c.documents_list),
    path('documents/<str:pk>', c.document_detail),
]
