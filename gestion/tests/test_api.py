"""
Integration tests for the hospital administration API.

These tests exercise the reservation workflow end to end (creation,
advisory availability check, refused overlaps, edits) together with the
generic CRUD contract shared by every collection: filters, partial
updates, not-found handling and the error envelope.  The tests use
Django REST Framework's APIClient within the APITestCase base class.

To run the tests:

```
pytest -q gestion/tests
```
"""
from datetime import datetime
from unittest import mock

from django.db import DatabaseError
from django.test import override_settings
from django.utils import timezone
from rest_framework.test import APITestCase, APIClient
from rest_framework import status

from ..models import Bed, BedReservation, Establishment, Patient, Personnel, Service


class ReservationAPITests(APITestCase):
    def setUp(self) -> None:
        """Create an establishment with one service, two beds and a patient."""
        self.client = APIClient()
        self.establishment = Establishment.objects.create(name='CHU Saint-Louis', address='1 avenue Claude Vellefaux')
        self.service = Service.objects.create(name='Cardiologie', establishment=self.establishment)
        self.bed = Bed.objects.create(bed_number='101', service=self.service)
        self.other_bed = Bed.objects.create(bed_number='102', service=self.service)
        self.patient = Patient.objects.create(
            last_name='Roux', first_name='Chloé', birth_date=timezone.make_aware(datetime(1990, 3, 4))
        )

    def reserve(self, arrival, departure, bed=None, **extra):
        payload = {
            'litId': (bed or self.bed).id,
            'patientId': self.patient.id,
            'dateArrivee': arrival,
            'dateDepart': departure,
            **extra,
        }
        return self.client.post('/reservationsLit', payload, format='json')

    def check(self, start, end, bed=None, **extra):
        params = {'litId': (bed or self.bed).id, 'startDate': start, 'endDate': end, **extra}
        return self.client.get('/reservationsLit/check-availability', params)

    def test_reservation_roundtrip_and_overlap(self):
        r = self.reserve('2024-01-10', '2024-01-15')
        self.assertEqual(r.status_code, status.HTTP_201_CREATED)
        reservation_id = r.data['id']
        self.assertTrue(reservation_id)
        self.assertEqual(r.data['bedId'], self.bed.id)
        self.assertEqual(r.data['patientId'], self.patient.id)

        r = self.check('2024-01-12', '2024-01-18')
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.assertEqual(r.data, {'available': False})

        r = self.reserve('2024-01-12', '2024-01-18')
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(r.data['ok'])
        self.assertEqual(r.data['error']['code'], 'bed_unavailable')
        self.assertEqual(r.data['error']['details']['conflicts'], [reservation_id])
        self.assertEqual(BedReservation.objects.count(), 1)

    def test_advisory_check_before_second_booking(self):
        bed = Bed.objects.create(id='bed-1', bed_number='103', service=self.service)
        pat = Patient.objects.create(id='pat-1', last_name='Petit', first_name='Jules',
                                     birth_date=timezone.make_aware(datetime(2001, 9, 9)))
        r = self.client.post('/reservationsLit', {'bedId': bed.id, 'patientId': pat.id,
                                                  'arrivalDate': '2024-03-01', 'departureDate': '2024-03-05'},
                             format='json')
        self.assertEqual(r.status_code, status.HTTP_201_CREATED)
        self.assertTrue(BedReservation.objects.filter(pk=r.data['id'], bed_id='bed-1').exists())
        r = self.client.get('/reservationsLit/check-availability',
                            {'litId': 'bed-1', 'startDate': '2024-03-03', 'endDate': '2024-03-07'})
        self.assertEqual(r.data, {'available': False})

    def test_check_availability_boundaries(self):
        self.reserve('2024-01-10', '2024-01-15')
        self.assertEqual(self.check('2024-01-15', '2024-01-20').data, {'available': False})
        self.assertEqual(self.check('2024-01-16', '2024-01-20').data, {'available': True})
        self.assertEqual(self.check('2024-01-10', '2024-01-15', bed=self.other_bed).data, {'available': True})

    def test_check_availability_excludes_edited_reservation(self):
        reservation_id = self.reserve('2024-01-10', '2024-01-15').data['id']
        r = self.check('2024-01-11', '2024-01-16', reservationId=reservation_id)
        self.assertEqual(r.data, {'available': True})

    def test_check_availability_requires_parameters(self):
        r = self.client.get('/reservationsLit/check-availability', {'startDate': '2024-01-10', 'endDate': '2024-01-12'})
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('litId', r.data['error']['details'])
        r = self.client.get('/reservationsLit/check-availability', {'litId': self.bed.id, 'startDate': '2024-01-10'})
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        r = self.check('not-a-date', '2024-01-12')
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        r = self.check('2024-01-12', '2024-01-10')
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)

    def test_check_availability_store_failure(self):
        with mock.patch('gestion.services.availability.conflicting_reservations',
                        side_effect=DatabaseError('connection lost')):
            r = self.check('2024-01-10', '2024-01-12')
        self.assertEqual(r.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(r.data['error']['code'], 'store_error')
        self.assertNotIn('available', r.data)

    @override_settings(RESERVATION_ENFORCE_AVAILABILITY=False)
    def test_overlap_accepted_when_enforcement_disabled(self):
        self.reserve('2024-01-10', '2024-01-15')
        r = self.reserve('2024-01-12', '2024-01-18')
        self.assertEqual(r.status_code, status.HTTP_201_CREATED)
        self.assertEqual(self.check('2024-01-11', '2024-01-11').data, {'available': False})

    def test_create_requires_bed(self):
        r = self.client.post('/reservationsLit', {'dateArrivee': '2024-01-10', 'dateDepart': '2024-01-12'}, format='json')
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(r.data['error']['details']['bedId'], ['bed id required'])
        r = self.client.post('/reservationsLit', {'bedId': '', 'arrivalDate': '2024-01-10',
                                                  'departureDate': '2024-01-12'}, format='json')
        self.assertEqual(r.data['error']['details']['bedId'], ['bed id required'])

    def test_create_rejects_unknown_bed_and_inverted_dates(self):
        r = self.client.post('/reservationsLit', {'bedId': 'ghost', 'arrivalDate': '2024-01-10',
                                                  'departureDate': '2024-01-12'}, format='json')
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('bedId', r.data['error']['details'])
        r = self.reserve('2024-01-12', '2024-01-10')
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('departureDate', r.data['error']['details'])

    def test_reservation_without_patient(self):
        r = self.client.post('/reservationsLit', {'bedId': self.bed.id, 'arrivalDate': '2024-02-01T10:00:00Z',
                                                  'departureDate': '2024-02-03T10:00:00Z'}, format='json')
        self.assertEqual(r.status_code, status.HTTP_201_CREATED)
        self.assertIsNone(r.data['patientId'])

    def test_patch_and_put_merge_and_revalidate(self):
        reservation_id = self.reserve('2024-01-10', '2024-01-15').data['id']
        r = self.client.patch(f'/reservationsLit/{reservation_id}', {'dateDepart': '2024-01-17'}, format='json')
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.assertTrue(r.data['departureDate'].startswith('2024-01-17'))
        r = self.client.put(f'/reservationsLit/{reservation_id}', {'departureDate': '2024-01-09'}, format='json')
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        # moving the stay inside its own interval does not conflict with itself
        r = self.client.put(f'/reservationsLit/{reservation_id}', {'arrivalDate': '2024-01-11'}, format='json')
        self.assertEqual(r.status_code, status.HTTP_200_OK)

    def test_update_into_another_reservation_is_refused(self):
        self.reserve('2024-01-10', '2024-01-15')
        second = self.reserve('2024-01-20', '2024-01-25').data['id']
        r = self.client.patch(f'/reservationsLit/{second}', {'arrivalDate': '2024-01-14'}, format='json')
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(r.data['error']['code'], 'bed_unavailable')

    def test_update_and_delete_unknown_reservation(self):
        r = self.client.patch('/reservationsLit/missing', {'dateDepart': '2024-01-17'}, format='json')
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(r.data['error']['code'], 'not_found')
        r = self.client.delete('/reservationsLit/missing')
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        r = self.client.get('/reservationsLit/missing')
        self.assertEqual(r.status_code, status.HTTP_404_NOT_FOUND)

    def test_list_filters_patient_first(self):
        other_patient = Patient.objects.create(last_name='Girard', first_name='Manon',
                                               birth_date=timezone.make_aware(datetime(1975, 1, 1)))
        self.reserve('2024-01-10', '2024-01-15')
        self.reserve('2024-01-10', '2024-01-15', bed=self.other_bed, patientId=other_patient.id)
        self.assertEqual(len(self.client.get('/reservationsLit').data), 2)
        r = self.client.get('/reservationsLit', {'litId': self.other_bed.id})
        self.assertEqual([x['patientId'] for x in r.data], [other_patient.id])
        # patientId takes precedence over litId
        r = self.client.get('/reservationsLit', {'patientId': self.patient.id, 'litId': self.other_bed.id})
        self.assertEqual([x['bedId'] for x in r.data], [self.bed.id])

    def test_delete_reservation(self):
        reservation_id = self.reserve('2024-01-10', '2024-01-15').data['id']
        r = self.client.delete(f'/reservationsLit/{reservation_id}')
        self.assertEqual(r.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(BedReservation.objects.exists())


class EntityAPITests(APITestCase):
    def setUp(self) -> None:
        self.client = APIClient()
        self.north = Establishment.objects.create(name='CHU Nord', address='1 rue Nord')
        self.south = Establishment.objects.create(name='CHU Sud', address='1 rue Sud')
        self.cardio = Service.objects.create(name='Cardiologie', establishment=self.north)
        self.urgences = Service.objects.create(name='Urgences', establishment=self.south)

    def test_create_establishment_and_embedded_services(self):
        r = self.client.post('/etablissements', {'name': 'Clinique <b>du Parc</b>', 'address': '3 quai Sud',
                                                 'capacity': 120}, format='json')
        self.assertEqual(r.status_code, status.HTTP_201_CREATED)
        self.assertEqual(r.data['name'], 'Clinique du Parc')
        self.assertEqual(r.data['country'], 'France')
        self.assertEqual(r.data['status'], 'Actif')
        r = self.client.get(f'/etablissements/{self.north.id}')
        self.assertEqual([s['name'] for s in r.data['services']], ['Cardiologie'])

    def test_create_validation_errors(self):
        r = self.client.post('/etablissements', {'name': 'Sans adresse', 'email': 'nope'}, format='json')
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(r.data['error']['code'], 'invalid')
        self.assertIn('address', r.data['error']['details'])
        self.assertIn('email', r.data['error']['details'])

    def test_client_cannot_choose_id(self):
        r = self.client.post('/medicaments', {'id': 'forced', 'name': 'Paracétamol'}, format='json')
        self.assertEqual(r.status_code, status.HTTP_201_CREATED)
        self.assertNotEqual(r.data['id'], 'forced')
        self.assertEqual(r.data['minimumStock'], 5)

    def test_services_filtered_by_establishment(self):
        r = self.client.get('/services', {'etablissementId': self.south.id})
        self.assertEqual([s['id'] for s in r.data], [self.urgences.id])

    def test_personnel_filter_precedence(self):
        a = Personnel.objects.create(last_name='Martin', first_name='Claire', profession='Médecin', service=self.cardio)
        b = Personnel.objects.create(last_name='Simon', first_name='Louis', profession='Médecin', service=self.urgences)
        r = self.client.get('/personnels', {'etablissementId': self.north.id, 'serviceId': self.urgences.id})
        self.assertEqual([p['id'] for p in r.data], [a.id])
        r = self.client.get('/personnels', {'serviceId': self.urgences.id})
        self.assertEqual([p['id'] for p in r.data], [b.id])

    def test_beds_filtered_by_service_and_status(self):
        Bed.objects.create(bed_number='1', service=self.cardio, status=Bed.STATUS_OCCUPIED)
        Bed.objects.create(bed_number='2', service=self.cardio)
        Bed.objects.create(bed_number='3', service=self.urgences)
        self.assertEqual(len(self.client.get('/lits', {'serviceId': self.cardio.id}).data), 2)
        r = self.client.get('/lits', {'statut': Bed.STATUS_AVAILABLE})
        self.assertEqual(sorted(b['bedNumber'] for b in r.data), ['2', '3'])

    def test_service_occupation(self):
        for number, bed_status in enumerate([Bed.STATUS_OCCUPIED, Bed.STATUS_AVAILABLE,
                                             Bed.STATUS_AVAILABLE, Bed.STATUS_MAINTENANCE]):
            Bed.objects.create(bed_number=str(number), service=self.cardio, status=bed_status)
        r = self.client.get(f'/services/{self.cardio.id}/occupation')
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.assertEqual(r.data['total'], 4)
        self.assertEqual(r.data['occupied'], 1)
        self.assertEqual(r.data['maintenance'], 1)
        self.assertEqual(r.data['occupancyRate'], 25.0)
        self.assertEqual(r.data['availabilityRate'], 50.0)
        r = self.client.get(f'/services/{self.urgences.id}/occupation')
        self.assertEqual(r.data['occupancyRate'], 0.0)
        self.assertEqual(self.client.get('/services/missing/occupation').status_code, status.HTTP_404_NOT_FOUND)

    def test_patient_search(self):
        birth = timezone.make_aware(datetime(1980, 1, 1))
        Patient.objects.create(last_name='Dupont', first_name='Marie', birth_date=birth)
        Patient.objects.create(last_name='Durand', first_name='Paul', birth_date=birth)
        r = self.client.get('/patients/search', {'query': 'dup'})
        self.assertEqual([p['lastName'] for p in r.data], ['Dupont'])
        r = self.client.get('/patients/search', {'query': 'PAUL'})
        self.assertEqual([p['firstName'] for p in r.data], ['Paul'])
        self.assertEqual(self.client.get('/patients/search').status_code, status.HTTP_400_BAD_REQUEST)

    def test_transfer_and_care_assignment_guards(self):
        patient = Patient.objects.create(last_name='Bonnet', first_name='Arthur',
                                         birth_date=timezone.make_aware(datetime(1960, 6, 6)))
        r = self.client.post('/transferts', {'patientId': patient.id, 'departureServiceId': self.cardio.id,
                                             'arrivalServiceId': self.urgences.id}, format='json')
        self.assertEqual(r.status_code, status.HTTP_201_CREATED)
        self.assertEqual(r.data['status'], 'Planifié')
        r = self.client.delete(f'/services/{self.urgences.id}')
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(r.data['error']['details'], {'incoming_transfers': 1})
        r = self.client.delete(f'/patients/{patient.id}')
        self.assertEqual(r.data['error']['code'], 'has_dependents')

    def test_list_store_failure(self):
        with mock.patch('gestion.views.resources.Resource.queryset', side_effect=DatabaseError('down')):
            r = self.client.get('/lits')
        self.assertEqual(r.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(r.data['error']['code'], 'store_error')

    def test_healthz(self):
        r = self.client.get('/healthz')
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.assertEqual(r.json(), {'ok': True, 'db': True})

    def test_free_text_keeps_special_characters(self):
        r = self.client.post('/etablissements', {'name': 'Hôpital Saint-Jean & Sainte-Marie',
                                                 'address': '1 rue A < B'}, format='json')
        self.assertEqual(r.status_code, status.HTTP_201_CREATED)
        establishment_id = r.data['id']
        r = self.client.get(f'/etablissements/{establishment_id}')
        self.assertEqual(r.data['name'], 'Hôpital Saint-Jean & Sainte-Marie')
        self.assertEqual(r.data['address'], '1 rue A < B')
        # a read-then-write cycle leaves the stored value unchanged
        r = self.client.put(f'/etablissements/{establishment_id}',
                            {'name': r.data['name'], 'address': r.data['address']}, format='json')
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.assertEqual(Establishment.objects.get(pk=establishment_id).name, 'Hôpital Saint-Jean & Sainte-Marie')

    def test_document_url_is_stored_verbatim(self):
        url = 'https://files.example/doc?id=1&v=2'
        r = self.client.post('/documents', {'title': 'Compte rendu', 'documentType': 'CR', 'url': url},
                             format='json')
        self.assertEqual(r.status_code, status.HTTP_201_CREATED)
        r = self.client.get(f"/documents/{r.data['id']}")
        self.assertEqual(r.data['url'], url)

    def test_patient_search_with_ampersand(self):
        Patient.objects.create(last_name='Martin & Fils', first_name='Paul',
                               birth_date=timezone.make_aware(datetime(1980, 1, 1)))
        r = self.client.get('/patients/search', {'query': 'Martin & F'})
        self.assertEqual([p['lastName'] for p in r.data], ['Martin & Fils'])
