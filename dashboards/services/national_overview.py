"""
National Overview Service

Country-wide surveillance picture for super administrators:
  National → Province → District → Sector

- overview: headline totals
- provinces: nested animal/disease counts, ranked by total animals
- districts / sectors: flat drill-down rows in location order
- trends: 12-month disease series per province

All three levels are rolled up independently from the same two record
reads, so district and sector counts sum to their province's counts.
"""

import logging
from typing import Any, Dict, List

from django.conf import settings
from django.utils import timezone

from core.exceptions import ScopeDenied, Unauthenticated
from livestock import records
from .rollups import district_rollups, province_rollups, ranked, sector_rollups
from .trends import monthly_trends

logger = logging.getLogger(__name__)


class NationalOverviewService:
    """
    National rollup service. Only super administrators may use it.

    Usage:
        service = NationalOverviewService(user=request.user)
        data = service.get_overview()
    """

    def __init__(self, user=None):
        self.user = user
        self.config = settings.SURVEILLANCE
        self.now = timezone.now()

    def _check_access(self):
        if self.user is None or not getattr(self.user, 'is_authenticated', False):
            raise Unauthenticated()
        if not self.user.is_super_admin:
            raise ScopeDenied('Only super administrators can view the national overview.')

    def get_overview(self) -> Dict[str, Any]:
        self._check_access()

        animals = list(records.fetch_animals())
        cases = list(records.fetch_disease_cases())

        provinces = province_rollups(animals, cases)
        districts = district_rollups(animals, cases)
        sectors = sector_rollups(animals, cases)
        trends = monthly_trends(
            cases, self.config['NATIONAL_TREND_MONTHS'], now=self.now, by_province=True
        )

        logger.info(
            f"National overview computed for {self.user.username}: "
            f"{len(animals)} animals, {len(cases)} cases, {len(provinces)} provinces"
        )

        return {
            'overview': {
                'totalAnimals': len(animals),
                'totalDiseases': len(cases),
                'totalOutbreaks': sum(result.diseases.active_outbreaks for result in provinces),
                'totalProvinces': len(provinces),
            },
            'provinces': [self._province_entry(result) for result in provinces],
            'districts': [result.as_row() for result in districts],
            'sectors': [self._sector_row(result) for result in sectors],
            'trends': [point.as_national_dict() for point in trends],
        }

    def _province_entry(self, result) -> Dict[str, Any]:
        return {
            'province': result.key[0],
            'animals': result.animals.as_dict(),
            'diseases': result.diseases.as_dict(),
            'species': [
                {'name': name, 'count': count}
                for name, count in ranked(result.animals.species)
            ],
            'topDiseases': [
                {'name': name, 'count': count}
                for name, count in ranked(result.diseases.diseases, self.config['TOP_DISEASES_LIMIT'])
            ],
        }

    def _sector_row(self, result) -> Dict[str, Any]:
        row = result.as_row()
        # One entry per animal, as the map legend expects
        row['species'] = sorted(result.animals.species.elements())
        return row
