"""
Shared pytest fixtures: users for each role and record factories.
"""
import itertools
from datetime import date

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

User = get_user_model()

_sequence = itertools.count(1)


@pytest.fixture
def api_client():
    """API client for making requests."""
    return APIClient()


@pytest.fixture
def veterinarian(db):
    """Veterinarian assigned to Gasabo / Remera."""
    return User.objects.create_user(
        username='vet_remera',
        email='vet@test.rw',
        password='testpass123',
        first_name='Aline',
        last_name='Uwase',
        phone='+250788000001',
        license_number='VET-0001',
        role='veterinarian',
        province='Kigali City',
        district='Gasabo',
        sector='Remera',
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        username='district_admin',
        email='admin@test.rw',
        password='testpass123',
        role='admin',
    )


@pytest.fixture
def super_admin(db):
    return User.objects.create_user(
        username='superadmin',
        email='superadmin@test.rw',
        password='testpass123',
        first_name='Super',
        last_name='Admin',
        role='super_admin',
    )


@pytest.fixture
def make_animal(db):
    """Factory for saved animals. Location defaults to Gasabo / Remera."""
    from livestock.models import Animal

    def _make(**overrides):
        number = next(_sequence)
        values = {
            'animal_id': f'ANM9{number:05d}',
            'species': 'cattle',
            'breed': 'Ankole',
            'age': 24,
            'sex': 'female',
            'owner_name': f'Owner {number}',
            'owner_contact': '+250788123456',
            'province': 'Kigali City',
            'district': 'Gasabo',
            'sector': 'Remera',
            'health_status': 'healthy',
        }
        values.update(overrides)
        return Animal.objects.create(**values)

    return _make


@pytest.fixture
def make_case(db):
    """
    Factory for saved disease cases reported against an animal.

    The location snapshot is copied from the animal unless overridden.
    """
    from livestock.models import DiseaseCase

    def _make(animal, **overrides):
        number = next(_sequence)
        case = DiseaseCase(
            report_id=f'DIS9{number:05d}',
            animal=animal,
            disease_name='Foot and Mouth Disease',
            disease_type='viral',
            symptoms=['fever', 'blisters'],
            severity='moderate',
            diagnosis_date=date.today(),
            reported_date=timezone.now(),
        )
        case.snapshot_location_from(animal)
        for name, value in overrides.items():
            setattr(case, name, value)
        case.save()
        return case

    return _make
