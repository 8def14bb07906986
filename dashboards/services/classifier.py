"""
Outbreak/Status Classifier

Stateless per-case derivations shared by the rollups and the geo feed.
Works on DiseaseCase instances or on any mapping with the same field names.
"""

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

SEVERITY_LEVELS = ('mild', 'moderate', 'severe', 'critical')

PRESENTATION_STATUSES = ('active', 'treated', 'recovered', 'deceased')

DEFAULT_PRESENTATION_STATUS = 'active'

PRESENTATION_STATUS_FOR_OUTCOME = {
    'ongoing': 'active',
    'under_treatment': 'treated',
    'recovered': 'recovered',
    'deceased': 'deceased',
}


def record_value(record, name):
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def severity_bucket(case):
    """The case's severity, used as-is as an aggregation dimension."""
    return record_value(case, 'severity')


def outbreak_contribution(case) -> int:
    return 1 if record_value(case, 'is_outbreak') else 0


def presentation_status(case) -> str:
    """ongoing -> active, under_treatment -> treated, recovered/deceased unchanged; else active."""
    outcome = record_value(case, 'outcome')
    status = PRESENTATION_STATUS_FOR_OUTCOME.get(outcome)
    if status is None:
        if outcome:
            logger.warning(f"Unrecognised case outcome '{outcome}', presenting as '{DEFAULT_PRESENTATION_STATUS}'")
        return DEFAULT_PRESENTATION_STATUS
    return status


def classify(case):
    """All three derivations for one case."""
    return {
        'severityBucket': severity_bucket(case),
        'outbreakContribution': outbreak_contribution(case),
        'presentationStatus': presentation_status(case),
    }
