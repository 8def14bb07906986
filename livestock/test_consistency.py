"""
Tests for case reporting and the case outcome -> animal health status sync.
"""
import uuid
from datetime import date

import pytest

from core.exceptions import RecordNotFound
from livestock.models import Animal, DiseaseCase
from livestock.services.consistency import (
    apply_case_outcome,
    health_status_for_outcome,
)
from livestock.services.registration import (
    add_vaccination,
    next_animal_tag,
    register_animal,
    report_disease_case,
)


# =============================================================================
# MAPPING TABLE
# =============================================================================

class TestHealthStatusMapping:

    @pytest.mark.parametrize('outcome,expected', [
        ('recovered', 'recovered'),
        ('deceased', 'deceased'),
        ('under_treatment', 'under_treatment'),
        ('ongoing', 'sick'),
        ('quarantined', 'sick'),
        ('', 'sick'),
        (None, 'sick'),
    ])
    def test_outcome_to_health_status(self, outcome, expected):
        assert health_status_for_outcome(outcome) == expected


# =============================================================================
# REGISTRATION & REPORTING
# =============================================================================

CASE_DATA = {
    'disease_name': 'East Coast Fever',
    'disease_type': 'parasitic',
    'symptoms': ['fever', 'swollen lymph nodes'],
    'severity': 'severe',
    'diagnosis_date': date(2025, 3, 1),
}


@pytest.mark.django_db
class TestRegistration:

    def test_register_animal_starts_healthy(self, veterinarian):
        animal = register_animal(veterinarian, {
            'species': 'goats',
            'sex': 'male',
            'owner_name': 'Marie Mukamana',
            'province': 'Kigali City',
            'district': 'Gasabo',
            'sector': 'Remera',
        })
        assert animal.animal_id == 'ANM000001'
        assert animal.health_status == Animal.HealthStatus.HEALTHY
        assert animal.registered_by == veterinarian

    def test_tags_are_sequential_and_skip_taken(self, make_animal):
        make_animal(animal_id='ANM000002')
        assert next_animal_tag() == 'ANM000003'

    def test_case_defaults(self, veterinarian, make_animal):
        animal = make_animal()
        case = report_disease_case(veterinarian, animal.pk, CASE_DATA)

        assert case.report_id == 'DIS000001'
        assert case.outcome == DiseaseCase.Outcome.ONGOING
        assert case.is_outbreak is False
        assert case.affected_animals_count == 1
        assert case.reported_by == veterinarian

    def test_case_copies_animal_location(self, veterinarian, make_animal):
        animal = make_animal(cell='Rukiri I', village='Amahoro', latitude='-1.955000', longitude='30.105000')
        animal.refresh_from_db()
        case = report_disease_case(veterinarian, animal.pk, CASE_DATA)

        for field in DiseaseCase.LOCATION_FIELDS:
            assert getattr(case, field) == getattr(animal, field)

    def test_case_location_survives_animal_move(self, veterinarian, make_animal):
        animal = make_animal(sector='Remera')
        case = report_disease_case(veterinarian, animal.pk, CASE_DATA)

        animal.district, animal.sector = 'Kicukiro', 'Kanombe'
        animal.save()

        case.refresh_from_db()
        assert (case.district, case.sector) == ('Gasabo', 'Remera')

    def test_reporting_marks_animal_sick(self, veterinarian, make_animal):
        animal = make_animal()
        report_disease_case(veterinarian, animal.pk, CASE_DATA)
        animal.refresh_from_db()
        assert animal.health_status == 'sick'

    def test_reporting_under_treatment_marks_animal_under_treatment(self, veterinarian, make_animal):
        animal = make_animal()
        report_disease_case(veterinarian, animal.pk, {**CASE_DATA, 'outcome': 'under_treatment'})
        animal.refresh_from_db()
        assert animal.health_status == 'under_treatment'

    def test_reporting_for_missing_animal(self, veterinarian):
        with pytest.raises(RecordNotFound):
            report_disease_case(veterinarian, uuid.uuid4(), CASE_DATA)
        assert DiseaseCase.objects.count() == 0

    def test_vaccinations_are_ordered(self, make_animal):
        animal = make_animal()
        add_vaccination(animal.pk, {
            'vaccine_name': 'Anthrax', 'date_administered': date(2025, 5, 1), 'administered_by': 'Dr. A',
        })
        add_vaccination(animal.pk, {
            'vaccine_name': 'FMD', 'date_administered': date(2025, 1, 1), 'administered_by': 'Dr. B',
        })
        names = [entry.vaccine_name for entry in animal.vaccination_history.all()]
        assert names == ['FMD', 'Anthrax']


# =============================================================================
# OUTCOME UPDATES
# =============================================================================

@pytest.mark.django_db
class TestApplyCaseOutcome:

    def test_recovered(self, make_animal, make_case):
        animal = make_animal()
        case = make_case(animal)

        apply_case_outcome(case.pk, 'recovered')

        animal.refresh_from_db()
        case.refresh_from_db()
        assert case.outcome == 'recovered'
        assert animal.health_status == 'recovered'

    def test_lifecycle(self, make_animal, make_case):
        animal = make_animal()
        case = make_case(animal)

        apply_case_outcome(case.pk, 'under_treatment', treatment_provided='Oxytetracycline')
        animal.refresh_from_db()
        assert animal.health_status == 'under_treatment'

        apply_case_outcome(case.pk, 'deceased')
        animal.refresh_from_db()
        assert animal.health_status == 'deceased'

    def test_unrecognised_outcome_marks_sick(self, make_animal, make_case):
        animal = make_animal()
        case = make_case(animal, outcome='recovered')
        animal.refresh_from_db()
        assert animal.health_status == 'recovered'

        apply_case_outcome(case.pk, 'quarantined')

        animal.refresh_from_db()
        assert animal.health_status == 'sick'

    def test_same_outcome_resyncs(self, make_animal, make_case):
        animal = make_animal()
        case = make_case(animal, outcome='recovered')
        Animal.objects.filter(pk=animal.pk).update(health_status='healthy')

        apply_case_outcome(case.pk, 'recovered')

        animal.refresh_from_db()
        assert animal.health_status == 'recovered'

    def test_other_fields_written_with_outcome(self, make_animal, make_case):
        case = make_case(make_animal())
        apply_case_outcome(case.pk, 'under_treatment', notes='Isolated from herd')
        case.refresh_from_db()
        assert case.notes == 'Isolated from herd'

    def test_missing_case(self):
        with pytest.raises(RecordNotFound):
            apply_case_outcome(uuid.uuid4(), 'recovered')

    def test_case_without_animal(self, make_animal, make_case):
        animal = make_animal()
        case = make_case(animal)
        animal.delete()

        with pytest.raises(RecordNotFound):
            apply_case_outcome(case.pk, 'recovered')

        case.refresh_from_db()
        assert case.outcome == 'ongoing'

    def test_non_outcome_edit_leaves_animal_alone(self, make_animal, make_case):
        from livestock import records
        animal = make_animal()
        case = make_case(animal)
        Animal.objects.filter(pk=animal.pk).update(health_status='healthy')

        records.update_disease_case(case.pk, {'notes': 'Follow-up visit'})

        animal.refresh_from_db()
        assert animal.health_status == 'healthy'
