"""
Database models for the hospital administration backend.

Every record carries an opaque string identifier generated at creation
time.  References that a record cannot exist without are declared with
``on_delete=PROTECT``: they are what the delete guard counts before a
record may be removed (see :mod:`gestion.services.guards`).  Optional
references use ``SET_NULL`` and are simply cleared when their target
disappears.
"""
from __future__ import annotations

import uuid

from django.db import models
from django.utils import timezone


def new_id() -> str:
    return uuid.uuid4().hex


class Record(models.Model):
    """Common columns shared by every entity."""
    id = models.CharField(max_length=64, primary_key=True, default=new_id, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Establishment(Record):
    """A hospital, clinic or any other care facility."""
    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    capacity = models.PositiveIntegerField(default=0)
    phone = models.CharField(max_length=32, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    website = models.URLField(blank=True, null=True)
    postal_code = models.CharField(max_length=16, blank=True, null=True)
    city = models.CharField(max_length=128, blank=True, null=True)
    country = models.CharField(max_length=128, default='France')
    status = models.CharField(max_length=32, blank=True, null=True, default='Actif')
    typology = models.CharField(max_length=64, blank=True, null=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


class Service(Record):
    """A department of an establishment (cardiologie, urgences...)."""
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    establishment = models.ForeignKey(
        Establishment, on_delete=models.PROTECT, related_name='services'
    )
    floor = models.CharField(max_length=32, blank=True, null=True)
    wing = models.CharField(max_length=32, blank=True, null=True)
    capacity = models.PositiveIntegerField(default=0)
    status = models.CharField(max_length=32, blank=True, null=True, default='Actif')
    specialty = models.CharField(max_length=128, blank=True, null=True)
    manager = models.ForeignKey(
        'Personnel', null=True, blank=True, on_delete=models.SET_NULL, related_name='managed_services'
    )

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


class Personnel(Record):
    """A staff member attached to a service."""
    last_name = models.CharField(max_length=128)
    first_name = models.CharField(max_length=128)
    birth_date = models.DateTimeField(blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    phone = models.CharField(max_length=32, blank=True, null=True)
    profession = models.CharField(max_length=128)
    specialty = models.CharField(max_length=128, blank=True, null=True)
    staff_number = models.CharField(max_length=64, blank=True, null=True)
    service = models.ForeignKey(
        Service, null=True, blank=True, on_delete=models.SET_NULL, related_name='personnel'
    )
    hire_date = models.DateTimeField(blank=True, null=True)
    status = models.CharField(max_length=32, blank=True, null=True, default='Actif')

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.profession})"


class Patient(Record):
    last_name = models.CharField(max_length=128, db_index=True)
    first_name = models.CharField(max_length=128, db_index=True)
    birth_date = models.DateTimeField()
    address = models.CharField(max_length=255, blank=True, null=True)
    phone = models.CharField(max_length=32, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    social_security_number = models.CharField(max_length=32, blank=True, null=True)
    blood_group = models.CharField(max_length=8, blank=True, null=True)
    allergies = models.TextField(blank=True, null=True)
    medical_history = models.TextField(blank=True, null=True)
    admission_date = models.DateTimeField(blank=True, null=True)
    discharge_date = models.DateTimeField(blank=True, null=True)
    status = models.CharField(max_length=32, blank=True, null=True, default='Hospitalisé')

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Bed(Record):
    """A bed of a service.  ``status`` drives the occupancy figures."""
    STATUS_AVAILABLE = 'Disponible'
    STATUS_OCCUPIED = 'Occupé'
    STATUS_MAINTENANCE = 'Maintenance'

    bed_number = models.CharField(max_length=32)
    type = models.CharField(max_length=64, blank=True, null=True)
    # 占用统计按状态过滤，加索引
    status = models.CharField(max_length=32, blank=True, null=True, default=STATUS_AVAILABLE, db_index=True)
    service = models.ForeignKey(Service, on_delete=models.PROTECT, related_name='beds')
    room = models.CharField(max_length=32, blank=True, null=True)
    floor = models.CharField(max_length=32, blank=True, null=True)
    patient = models.ForeignKey(
        Patient, null=True, blank=True, on_delete=models.SET_NULL, related_name='beds'
    )

    def __str__(self) -> str:
        return f"Lit {self.bed_number} ({self.id})"


class BedReservation(Record):
    """Occupation of a bed over ``[arrival_date, departure_date]``.

    Both boundaries are inclusive: a reservation leaving on the 15th and
    another arriving on the 15th collide.  The patient may still be
    unknown when the bed is booked for an incoming transfer.
    """
    bed = models.ForeignKey(Bed, on_delete=models.PROTECT, related_name='reservations')
    patient = models.ForeignKey(
        Patient, null=True, blank=True, on_delete=models.SET_NULL, related_name='reservations'
    )
    arrival_date = models.DateTimeField()
    departure_date = models.DateTimeField()
    destination_establishment = models.ForeignKey(
        Establishment, null=True, blank=True, on_delete=models.SET_NULL, related_name='incoming_reservations'
    )

    class Meta:
        indexes = [
            models.Index(fields=['bed', 'arrival_date', 'departure_date']),
        ]

    def __str__(self) -> str:
        return f"Reservation(bed={self.bed_id}, {self.arrival_date:%F}~{self.departure_date:%F})"


class CareAssignment(Record):
    """A patient taken in charge by a staff member ("prise en charge")."""
    personnel = models.ForeignKey(Personnel, on_delete=models.PROTECT, related_name='care_assignments')
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name='care_assignments')
    start_date = models.DateTimeField(default=timezone.now)
    end_date = models.DateTimeField(blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    diagnosis = models.TextField(blank=True, null=True)
    treatment = models.TextField(blank=True, null=True)
    notes = models.TextField(blank=True, null=True)

    def __str__(self) -> str:
        return f"Care(p={self.patient_id}, staff={self.personnel_id})"


class Transfer(Record):
    """Movement of a patient from one service to another."""
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name='transfers')
    departure_service = models.ForeignKey(
        Service, on_delete=models.PROTECT, related_name='outgoing_transfers'
    )
    arrival_service = models.ForeignKey(
        Service, on_delete=models.PROTECT, related_name='incoming_transfers'
    )
    reason = models.TextField(blank=True, null=True)
    date = models.DateTimeField(default=timezone.now)
    status = models.CharField(max_length=32, blank=True, null=True, default='Planifié')
    authorized_by = models.CharField(max_length=128, blank=True, null=True)
    performed_by = models.CharField(max_length=128, blank=True, null=True)
    departure_establishment = models.ForeignKey(
        Establishment, null=True, blank=True, on_delete=models.SET_NULL, related_name='outgoing_transfers'
    )
    arrival_establishment = models.ForeignKey(
        Establishment, null=True, blank=True, on_delete=models.SET_NULL, related_name='incoming_transfers'
    )

    def __str__(self) -> str:
        return f"Transfer(p={self.patient_id}, {self.departure_service_id} → {self.arrival_service_id})"


class Material(Record):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    quantity = models.PositiveIntegerField(default=1)
    type = models.CharField(max_length=64, blank=True, null=True)
    brand = models.CharField(max_length=128, blank=True, null=True)
    model = models.CharField(max_length=128, blank=True, null=True)
    serial_number = models.CharField(max_length=128, blank=True, null=True)
    purchase_date = models.DateTimeField(blank=True, null=True)
    maintenance_date = models.DateTimeField(blank=True, null=True)
    status = models.CharField(max_length=32, blank=True, null=True, default='En Service')
    service = models.ForeignKey(
        Service, null=True, blank=True, on_delete=models.SET_NULL, related_name='materials'
    )

    def __str__(self) -> str:
        return f"{self.name} x{self.quantity}"


class Medication(Record):
    name = models.CharField(max_length=255)
    dosage = models.CharField(max_length=64, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    category = models.CharField(max_length=128, blank=True, null=True)
    manufacturer = models.CharField(max_length=128, blank=True, null=True)
    current_stock = models.PositiveIntegerField(default=0)
    minimum_stock = models.PositiveIntegerField(default=5)
    expiry_date = models.DateTimeField(blank=True, null=True)

    def __str__(self) -> str:
        return f"{self.name} {self.dosage or ''}".strip()


class Document(Record):
    title = models.CharField(max_length=255)
    document_type = models.CharField(max_length=64)
    content = models.TextField(blank=True, null=True)
    url = models.CharField(max_length=512, blank=True, null=True)
    patient = models.ForeignKey(
        Patient, null=True, blank=True, on_delete=models.SET_NULL, related_name='documents'
    )
    personnel = models.ForeignKey(
        Personnel, null=True, blank=True, on_delete=models.SET_NULL, related_name='documents'
    )
    service = models.ForeignKey(
        Service, null=True, blank=True, on_delete=models.SET_NULL, related_name='documents'
    )

    def __str__(self) -> str:
        return f"{self.title} ({self.document_type})"
