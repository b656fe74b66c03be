"""
Management command to populate the database with demo data.
"""
from django.core.management.base import BaseCommand
from django.utils import timezone
from datetime import timedelta
import random
from gestion.models import (
    Establishment, Service, Personnel, Patient, Bed, BedReservation,
    CareAssignment, Transfer, Material, Medication,
)


class Command(BaseCommand):
    help = 'Populate database with demo data'

    def add_arguments(self, parser):
        parser.add_argument('--seed', type=int, default=None, help='random seed for reproducible data')

    def handle(self, *args, **options):
        if options.get('seed') is not None:
            random.seed(options['seed'])
        self.stdout.write('Création des données de démonstration...')

        # 机构与科室
        establishments = self.create_establishments()
        services = self.create_services(establishments)

        # 床位
        beds = self.create_beds(services)

        # 人员与患者
        personnel = self.create_personnel(services)
        patients = self.create_patients()

        self.create_care_assignments(personnel, patients)
        self.create_reservations(beds, patients)
        self.create_transfers(services, patients)
        self.create_inventory(services)

        self.stdout.write(self.style.SUCCESS('Données de démonstration créées !'))

    def create_establishments(self):
        establishments_data = [
            {'id': 'etab-1', 'name': 'CHU Saint-Louis', 'address': '1 avenue Claude Vellefaux',
             'city': 'Paris', 'postal_code': '75010', 'capacity': 650, 'typology': 'CHU'},
            {'id': 'etab-2', 'name': 'Clinique du Parc', 'address': '155 boulevard de Stalingrad',
             'city': 'Lyon', 'postal_code': '69006', 'capacity': 180, 'typology': 'Clinique'},
        ]
        establishments = []
        for data in establishments_data:
            establishment, created = Establishment.objects.get_or_create(id=data['id'], defaults=data)
            establishments.append(establishment)
            self.stdout.write(f'Établissement : {establishment.name}')
        return establishments

    def create_services(self, establishments):
        names = ['Cardiologie', 'Urgences', 'Pédiatrie', 'Neurologie']
        services = []
        for e_index, establishment in enumerate(establishments, start=1):
            for s_index, name in enumerate(names, start=1):
                service, created = Service.objects.get_or_create(
                    id=f'srv-{e_index}-{s_index}',
                    defaults={
                        'name': name,
                        'establishment': establishment,
                        'floor': str(s_index),
                        'capacity': 20,
                        'specialty': name,
                    },
                )
                services.append(service)
        self.stdout.write(f'{len(services)} services')
        return services

    def create_beds(self, services):
        statuses = [Bed.STATUS_AVAILABLE] * 3 + [Bed.STATUS_OCCUPIED] * 2 + [Bed.STATUS_MAINTENANCE]
        beds = []
        for service in services:
            for number in range(1, 7):
                bed, created = Bed.objects.get_or_create(
                    id=f'lit-{service.id}-{number}',
                    defaults={
                        'bed_number': f'{service.floor}{number:02d}',
                        'service': service,
                        'room': f'{service.floor}{(number + 1) // 2:02d}',
                        'type': random.choice(['Standard', 'Soins intensifs', 'Pédiatrique']),
                        'status': random.choice(statuses),
                    },
                )
                beds.append(bed)
        self.stdout.write(f'{len(beds)} lits')
        return beds

    def create_personnel(self, services):
        people = [
            ('Martin', 'Claire', 'Médecin'), ('Bernard', 'Hugo', 'Infirmier'),
            ('Dubois', 'Emma', 'Médecin'), ('Laurent', 'Lucas', 'Aide-soignant'),
            ('Moreau', 'Léa', 'Infirmier'), ('Simon', 'Louis', 'Médecin'),
        ]
        personnel = []
        for index, (last_name, first_name, profession) in enumerate(people, start=1):
            member, created = Personnel.objects.get_or_create(
                id=f'pers-{index}',
                defaults={
                    'last_name': last_name,
                    'first_name': first_name,
                    'profession': profession,
                    'service': random.choice(services),
                    'staff_number': f'M{index:04d}',
                    'hire_date': timezone.now() - timedelta(days=random.randint(100, 3000)),
                },
            )
            personnel.append(member)
        self.stdout.write(f'{len(personnel)} membres du personnel')
        return personnel

    def create_patients(self):
        names = [
            ('Petit', 'Jules'), ('Roux', 'Chloé'), ('Fournier', 'Nathan'),
            ('Girard', 'Manon'), ('Bonnet', 'Arthur'), ('Lambert', 'Inès'),
            ('Fontaine', 'Tom'), ('Rousseau', 'Jade'),
        ]
        patients = []
        for index, (last_name, first_name) in enumerate(names, start=1):
            patient, created = Patient.objects.get_or_create(
                id=f'pat-{index}',
                defaults={
                    'last_name': last_name,
                    'first_name': first_name,
                    'birth_date': timezone.now() - timedelta(days=365 * random.randint(5, 90)),
                    'blood_group': random.choice(['A+', 'A-', 'B+', 'O+', 'O-', 'AB+']),
                    'admission_date': timezone.now() - timedelta(days=random.randint(0, 10)),
                },
            )
            patients.append(patient)
        self.stdout.write(f'{len(patients)} patients')
        return patients

    def create_care_assignments(self, personnel, patients):
        for index, patient in enumerate(patients, start=1):
            CareAssignment.objects.get_or_create(
                id=f'pec-{index}',
                defaults={
                    'patient': patient,
                    'personnel': random.choice(personnel),
                    'diagnosis': random.choice(['Pneumopathie', 'Fracture du poignet', 'Insuffisance cardiaque']),
                    'start_date': timezone.now() - timedelta(days=random.randint(0, 5)),
                },
            )

    def create_reservations(self, beds, patients):
        # 每张床的预约按周错开，互不重叠
        today = timezone.now().replace(hour=0, minute=0, second=0, microsecond=0)
        for index, patient in enumerate(patients):
            bed = beds[index % len(beds)]
            week = index // len(beds)
            arrival = today + timedelta(days=7 * week + 1)
            BedReservation.objects.get_or_create(
                id=f'res-{index + 1}',
                defaults={
                    'bed': bed,
                    'patient': patient,
                    'arrival_date': arrival,
                    'departure_date': arrival + timedelta(days=random.randint(1, 5)),
                },
            )

    def create_transfers(self, services, patients):
        for index, patient in enumerate(patients[:3], start=1):
            departure, arrival = random.sample(services, 2)
            Transfer.objects.get_or_create(
                id=f'trf-{index}',
                defaults={
                    'patient': patient,
                    'departure_service': departure,
                    'arrival_service': arrival,
                    'departure_establishment': departure.establishment,
                    'arrival_establishment': arrival.establishment,
                    'reason': 'Prise en charge spécialisée',
                },
            )

    def create_inventory(self, services):
        for index, name in enumerate(['Moniteur cardiaque', 'Pousse-seringue', 'Défibrillateur'], start=1):
            Material.objects.get_or_create(
                id=f'mat-{index}',
                defaults={'name': name, 'quantity': random.randint(1, 10), 'service': random.choice(services)},
            )
        for index, (name, dosage) in enumerate([('Paracétamol', '1 g'), ('Amoxicilline', '500 mg')], start=1):
            Medication.objects.get_or_create(
                id=f'med-{index}',
                defaults={'name': name, 'dosage': dosage, 'current_stock': random.randint(0, 200)},
            )
