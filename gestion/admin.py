"""
Django admin registrations for the gestion models.

Every entity of the API is browsable under ``/admin/`` so that
superusers can inspect and correct data by hand during development.
"""

from django.contrib import admin

from .models import (
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


@admin.register(Establishment)
class EstablishmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'city', 'capacity', 'status', 'created_at')
    list_filter = ('status', 'typology')
    search_fields = ('id', 'name', 'city')


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'establishment', 'capacity', 'status')
    list_filter = ('status', 'establishment')
    search_fields = ('id', 'name', 'specialty')


@admin.register(Personnel)
class PersonnelAdmin(admin.ModelAdmin):
    list_display = ('id', 'last_name', 'first_name', 'profession', 'service', 'status')
    list_filter = ('profession', 'status')
    search_fields = ('last_name', 'first_name', 'staff_number')


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'last_name', 'first_name', 'birth_date', 'status')
    list_filter = ('status',)
    search_fields = ('last_name', 'first_name', 'social_security_number')


@admin.register(Bed)
class BedAdmin(admin.ModelAdmin):
    list_display = ('id', 'bed_number', 'service', 'room', 'status', 'patient')
    list_filter = ('status', 'service')
    search_fields = ('id', 'bed_number', 'room')


@admin.register(BedReservation)
class BedReservationAdmin(admin.ModelAdmin):
    list_display = ('id', 'bed', 'patient', 'arrival_date', 'departure_date')
    list_filter = ('bed__service',)
    search_fields = ('id', 'bed__bed_number', 'patient__last_name')


@admin.register(CareAssignment)
class CareAssignmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'personnel', 'start_date', 'end_date')
    search_fields = ('patient__last_name', 'personnel__last_name', 'diagnosis')


@admin.register(Transfer)
class TransferAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'departure_service', 'arrival_service', 'date', 'status')
    list_filter = ('status',)
    search_fields = ('patient__last_name', 'reason')


@admin.register(Material)
class MaterialAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'quantity', 'status', 'service')
    list_filter = ('status', 'type')
    search_fields = ('name', 'serial_number')


@admin.register(Medication)
class MedicationAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'dosage', 'current_stock', 'minimum_stock', 'expiry_date')
    list_filter = ('category',)
    search_fields = ('name', 'manufacturer')


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'document_type', 'patient', 'created_at')
    list_filter = ('document_type',)
    search_fields = ('title',)
