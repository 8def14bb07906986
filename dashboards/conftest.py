"""
Shared pytest fixtures for dashboards tests.
"""
from datetime import timedelta

import pytest
from django.utils import timezone


@pytest.fixture
def surveillance_data(make_animal, make_case):
    """
    Kigali City / Gasabo:
        Remera    - 2 healthy cattle, 1 sick goat (FMD case, outbreak, critical)
        Kimironko - 10 healthy cattle
    Northern Province / Musanze / Muhoza:
        1 sheep, recovered from a mild Anthrax case reported 400 days ago
    """
    now = timezone.now()
    remera = [make_animal(sector='Remera') for _ in range(2)]
    sick_goat = make_animal(sector='Remera', species='goats')
    kimironko = [make_animal(sector='Kimironko') for _ in range(10)]
    muhoza_sheep = make_animal(
        province='Northern Province', district='Musanze', sector='Muhoza', species='sheep'
    )

    outbreak = make_case(sick_goat, severity='critical', is_outbreak=True, reported_date=now - timedelta(days=2))
    old_case = make_case(
        muhoza_sheep,
        disease_name='Anthrax',
        disease_type='bacterial',
        severity='mild',
        outcome='recovered',
        reported_date=now - timedelta(days=400),
    )
    return {
        'remera': remera + [sick_goat],
        'kimironko': kimironko,
        'muhoza': [muhoza_sheep],
        'outbreak': outbreak,
        'old_case': old_case,
    }
