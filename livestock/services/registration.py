"""
Animal registration and disease case reporting.
"""

import logging

from django.db import IntegrityError, transaction

from livestock import records
from livestock.models import Animal, DiseaseCase, VaccinationRecord

logger = logging.getLogger(__name__)

ANIMAL_TAG_PREFIX = 'ANM'
REPORT_ID_PREFIX = 'DIS'

# Concurrent writers may pick the same next number; the loser retries
IDENTIFIER_ATTEMPTS = 5


def _next_identifier(model, field, prefix):
    """Sequential identifier like ANM000001, skipping any already taken."""
    number = model.objects.count() + 1
    while True:
        candidate = f"{prefix}{number:06d}"
        if not model.objects.filter(**{field: candidate}).exists():
            return candidate
        number += 1


def next_animal_tag():
    return _next_identifier(Animal, 'animal_id', ANIMAL_TAG_PREFIX)


def next_report_id():
    return _next_identifier(DiseaseCase, 'report_id', REPORT_ID_PREFIX)


def _save_with_identifier(model, field, generate, save):
    """
    Run ``save(identifier)`` in a savepoint with a freshly generated identifier.

    An IntegrityError caused by another writer taking the identifier first
    is retried with the next free one. Any other IntegrityError, or a
    collision on the last attempt, propagates.
    """
    for attempt in range(1, IDENTIFIER_ATTEMPTS + 1):
        identifier = generate()
        try:
            with transaction.atomic():
                return save(identifier)
        except IntegrityError:
            taken = model.objects.filter(**{field: identifier}).exists()
            if not taken or attempt == IDENTIFIER_ATTEMPTS:
                raise
            logger.warning(
                f"{model.__name__} identifier {identifier} taken concurrently, "
                f"retrying (attempt {attempt}/{IDENTIFIER_ATTEMPTS})"
            )


@transaction.atomic
def register_animal(user, data):
    """
    Register a new animal.

    Args:
        user: registering user (may be None for imports)
        data: validated model field values, location included

    Returns:
        The saved Animal, health status 'healthy'.
    """
    def save(tag):
        return Animal.objects.create(
            animal_id=tag,
            health_status=Animal.HealthStatus.HEALTHY,
            registered_by=user,
            **data,
        )

    animal = _save_with_identifier(Animal, 'animal_id', next_animal_tag, save)
    logger.info(
        f"Animal {animal.animal_id} ({animal.species}) registered in "
        f"{animal.province}/{animal.district}/{animal.sector} by {user or 'system'}"
    )
    return animal


@transaction.atomic
def report_disease_case(user, animal_pk, data):
    """
    Report a disease case against an existing animal.

    The animal's current location is copied onto the case as an immutable
    snapshot. Defaults: outcome 'ongoing', not an outbreak, one affected
    animal. Saving the case updates the animal's health status in the
    same transaction.

    Raises:
        RecordNotFound: no animal with ``animal_pk``
    """
    animal = records.get_animal(animal_pk, for_update=True)

    data = dict(data)
    if not data.get('outcome'):
        data['outcome'] = DiseaseCase.Outcome.ONGOING
    data.setdefault('is_outbreak', False)
    data.setdefault('affected_animals_count', 1)

    def save(report_id):
        case = DiseaseCase(report_id=report_id, animal=animal, reported_by=user, **data)
        case.snapshot_location_from(animal)
        case.save()
        return case

    case = _save_with_identifier(DiseaseCase, 'report_id', next_report_id, save)

    logger.info(
        f"Disease case {case.report_id} ({case.disease_name}, {case.severity}) "
        f"reported for animal {animal.animal_id}"
        f"{' [OUTBREAK]' if case.is_outbreak else ''}"
    )
    return case


@transaction.atomic
def add_vaccination(animal_pk, data):
    """Append a vaccination entry to an animal's history."""
    animal = records.get_animal(animal_pk, for_update=True)
    entry = VaccinationRecord.objects.create(animal=animal, **data)
    records.update_animal(animal.pk, {})
    logger.info(f"Vaccination '{entry.vaccine_name}' recorded for animal {animal.animal_id}")
    return entry
