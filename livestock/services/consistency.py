"""
Cross-Entity Consistency Updater

Keeps an animal's health status in line with the outcome of its most
recently updated disease case.

Outcome lifecycle:
    ongoing -> under_treatment -> recovered | deceased
    ongoing -> recovered | deceased

Every outcome write, creation included, maps onto the animal:
    recovered       -> recovered
    deceased        -> deceased
    under_treatment -> under_treatment
    anything else   -> sick

The case write and the animal write share one database transaction; a
failed animal write rolls the case write back.
"""

import logging

from django.db import transaction
from rest_framework.exceptions import ValidationError

from core.exceptions import RecordNotFound
from livestock import records
from livestock.models import Animal, DiseaseCase

logger = logging.getLogger(__name__)


HEALTH_STATUS_FOR_OUTCOME = {
    DiseaseCase.Outcome.RECOVERED: Animal.HealthStatus.RECOVERED,
    DiseaseCase.Outcome.DECEASED: Animal.HealthStatus.DECEASED,
    DiseaseCase.Outcome.UNDER_TREATMENT: Animal.HealthStatus.UNDER_TREATMENT,
}


def health_status_for_outcome(outcome):
    """Animal health status implied by a case outcome. Unmapped values mean sick."""
    status = HEALTH_STATUS_FOR_OUTCOME.get(outcome)
    if status is not None:
        return status.value
    if outcome not in (None, '', DiseaseCase.Outcome.ONGOING):
        logger.warning(f"Unrecognised case outcome '{outcome}', marking animal as sick")
    return Animal.HealthStatus.SICK.value


def sync_animal_health(case):
    """
    Write the health status implied by ``case.outcome`` onto its animal.

    Returns the updated animal, or None when the case has no linked animal.
    """
    if case.animal_id is None:
        logger.warning(f"Disease case {case.report_id} has no linked animal, health sync skipped")
        return None

    status = health_status_for_outcome(case.outcome)
    animal = records.update_animal(case.animal_id, {'health_status': status})
    logger.info(
        f"Animal {animal.animal_id} health status set to '{status}' "
        f"from case {case.report_id} outcome '{case.outcome}'"
    )
    return animal


@transaction.atomic
def apply_case_outcome(case_pk, outcome, **fields):
    """
    Record a new outcome on a disease case and update the linked animal.

    Args:
        case_pk: primary key of the disease case
        outcome: new outcome value; unrecognised strings are stored as given
            and mark the animal sick
        **fields: other updatable case fields written in the same update
            (treatment_provided, notes, ...)

    Raises:
        RecordNotFound: the case, or the animal it is linked to, is absent
        ValidationError: no outcome given
    """
    if not outcome:
        raise ValidationError({'outcome': 'This field is required.'})

    case = records.get_disease_case(case_pk, for_update=True)
    if case.animal_id is None:
        raise RecordNotFound(f'Disease case {case.report_id} has no linked animal')

    previous = case.outcome
    case = records.update_disease_case(case_pk, {**fields, 'outcome': outcome})

    logger.info(f"Disease case {case.report_id} outcome: '{previous}' -> '{outcome}'")
    return case
