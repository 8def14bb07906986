"""
Record Accessor

The only way the surveillance engine reads or writes animal and disease
case records. Reads apply a caller scope plus simple filter predicates and
perform no transformation; writes go through a whitelist of updatable
fields.

Scope objects only need ``province``/``district``/``sector`` attributes;
``None`` at a level means "no restriction".
"""

import logging

from django.db import transaction

from core.exceptions import InvalidFilter, RecordNotFound
from .filters import AnimalFilter, DiseaseCaseFilter
from .models import Animal, DiseaseCase

logger = logging.getLogger(__name__)

# Sentinel query value meaning "no filter"
ALL = 'all'

SCOPE_LEVELS = ('province', 'district', 'sector')

ANIMAL_UPDATABLE_FIELDS = frozenset({
    'species', 'breed', 'age', 'sex', 'color', 'identification_marks',
    'owner_name', 'owner_contact', 'owner_address',
    'province', 'district', 'sector', 'cell', 'village', 'latitude', 'longitude',
    'health_status',
})

# Location snapshot and animal link are deliberately absent
CASE_UPDATABLE_FIELDS = frozenset({
    'outcome', 'treatment_provided', 'notes', 'is_outbreak',
    'affected_animals_count', 'symptoms', 'diagnosis_method',
})


def _clean_filters(filters):
    if not filters:
        return {}
    cleaned = {}
    for key, value in filters.items():
        if value is None:
            continue
        if isinstance(value, str):
            value = value.strip()
            if not value or value.lower() == ALL:
                continue
        cleaned[key] = value
    return cleaned


def apply_scope(queryset, scope, prefix=''):
    """Restrict a queryset to the scope's location levels."""
    if scope is None:
        return queryset
    lookups = {
        f'{prefix}{level}': getattr(scope, level, None)
        for level in SCOPE_LEVELS
        if getattr(scope, level, None)
    }
    return queryset.filter(**lookups) if lookups else queryset


def _filtered(filterset_class, queryset, filters):
    filterset = filterset_class(data=_clean_filters(filters), queryset=queryset)
    if not filterset.is_valid():
        raise InvalidFilter(filterset.errors)
    return filterset.qs


# =============================================================================
# READS
# =============================================================================

def fetch_animals(filters=None, scope=None):
    """Animals matching the scope and filter predicates (lazy queryset)."""
    queryset = apply_scope(Animal.objects.select_related('registered_by'), scope)
    return _filtered(AnimalFilter, queryset, filters)


def fetch_disease_cases(filters=None, scope=None):
    """
    Disease cases matching the scope and filter predicates (lazy queryset).

    Scope applies to the case's own location snapshot, never to the
    linked animal's current location.
    """
    queryset = apply_scope(
        DiseaseCase.objects.select_related('animal', 'reported_by'),
        scope,
    )
    return _filtered(DiseaseCaseFilter, queryset, filters)


def get_animal(animal_pk, for_update=False):
    queryset = Animal.objects.select_related('registered_by')
    if for_update:
        queryset = queryset.select_for_update(of=('self',))
    animal = queryset.filter(pk=animal_pk).first()
    if animal is None:
        raise RecordNotFound(f'Animal {animal_pk} not found')
    return animal


def get_disease_case(case_pk, for_update=False):
    queryset = DiseaseCase.objects.select_related('animal', 'reported_by')
    if for_update:
        # of=('self',) keeps the lock off the nullable joins
        queryset = queryset.select_for_update(of=('self',))
    case = queryset.filter(pk=case_pk).first()
    if case is None:
        raise RecordNotFound(f'Disease case {case_pk} not found')
    return case


# =============================================================================
# WRITES
# =============================================================================

def _check_fields(fields, allowed, record_type):
    unknown = set(fields) - allowed
    if unknown:
        raise ValueError(f"Fields not updatable on {record_type}: {', '.join(sorted(unknown))}")


@transaction.atomic
def update_animal(animal_pk, fields):
    """Apply a partial update to an animal. Always refreshes last_updated."""
    _check_fields(fields, ANIMAL_UPDATABLE_FIELDS, 'animal')
    animal = get_animal(animal_pk, for_update=True)
    for name, value in fields.items():
        setattr(animal, name, value)
    animal.save(update_fields=[*fields, 'last_updated'])
    logger.debug(f"Animal {animal.animal_id} updated: {sorted(fields)}")
    return animal


@transaction.atomic
def update_disease_case(case_pk, fields):
    """
    Apply a partial update to a disease case.

    Saving with ``outcome`` among the updated fields triggers the animal
    health sync (see livestock.signals) inside this same transaction.
    """
    _check_fields(fields, CASE_UPDATABLE_FIELDS, 'disease case')
    case = get_disease_case(case_pk, for_update=True)
    for name, value in fields.items():
        setattr(case, name, value)
    case.save(update_fields=[*fields, 'updated_at'])
    logger.debug(f"Disease case {case.report_id} updated: {sorted(fields)}")
    return case
