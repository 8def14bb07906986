"""
Tests for identifier generation in animal registration and case reporting.
"""
from datetime import date
from unittest import mock

import pytest
from django.db import IntegrityError

from livestock.models import Animal, DiseaseCase
from livestock.services import registration

pytestmark = pytest.mark.django_db


ANIMAL_DATA = {
    'species': 'goats',
    'breed': 'Boer',
    'age': 12,
    'sex': 'male',
    'owner_name': 'Jean Bosco',
    'owner_contact': '+250788555111',
    'province': 'Kigali City',
    'district': 'Gasabo',
    'sector': 'Remera',
}

CASE_DATA = {
    'disease_name': 'Peste des Petits Ruminants',
    'disease_type': 'viral',
    'symptoms': ['fever'],
    'severity': 'severe',
    'diagnosis_date': date(2025, 3, 1),
}


class TestIdentifiers:

    def test_sequential_tag_skips_taken(self, make_animal):
        make_animal(animal_id='ANM000002')
        assert registration.next_animal_tag() == 'ANM000003'

    def test_register_animal(self, veterinarian):
        animal = registration.register_animal(veterinarian, ANIMAL_DATA)
        assert animal.animal_id == 'ANM000001'
        assert animal.health_status == 'healthy'
        assert animal.registered_by == veterinarian


class TestConcurrentIdentifiers:
    """Another writer takes the generated identifier between lookup and insert."""

    def test_animal_tag_collision_retried(self, veterinarian, make_animal):
        taken = make_animal()
        with mock.patch.object(
            registration, 'next_animal_tag', side_effect=[taken.animal_id, 'ANM555555'],
        ):
            animal = registration.register_animal(veterinarian, ANIMAL_DATA)

        assert animal.animal_id == 'ANM555555'
        assert Animal.objects.count() == 2

    def test_report_id_collision_retried(self, veterinarian, make_animal, make_case):
        animal = make_animal()
        taken = make_case(animal)
        with mock.patch.object(
            registration, 'next_report_id', side_effect=[taken.report_id, 'DIS555555'],
        ):
            case = registration.report_disease_case(veterinarian, animal.pk, CASE_DATA)

        assert case.report_id == 'DIS555555'
        assert case.sector == animal.sector
        assert DiseaseCase.objects.count() == 2

    def test_collision_on_every_attempt_raises(self, veterinarian, make_animal):
        taken = make_animal()
        with mock.patch.object(registration, 'next_animal_tag', return_value=taken.animal_id):
            with pytest.raises(IntegrityError):
                registration.register_animal(veterinarian, ANIMAL_DATA)

        assert Animal.objects.count() == 1
