"""
Livestock Signals

DiseaseCase saved with a new outcome -> linked Animal health status updated.

The animal write runs inside whatever transaction the case save runs in.
Errors propagate so that an atomic caller rolls the case write back too.
"""

import logging

from django.db.models.signals import post_save
from django.dispatch import receiver

logger = logging.getLogger(__name__)


@receiver(post_save, sender='livestock.DiseaseCase')
def sync_animal_health_on_outcome(sender, instance, created, raw=False, update_fields=None, **kwargs):
    """
    Apply the outcome -> health status table whenever an outcome is written.

    Triggers on creation, on a changed outcome, and on any save that lists
    ``outcome`` in update_fields. Fixture loading (raw saves) is skipped.
    """
    if raw:
        return

    outcome_written = created or instance.outcome_changed or (
        update_fields is not None and 'outcome' in update_fields
    )
    if not outcome_written:
        return

    # Import here to avoid circular imports
    from livestock.services.consistency import sync_animal_health

    sync_animal_health(instance)
