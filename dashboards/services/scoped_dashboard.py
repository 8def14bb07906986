"""
Scoped Dashboard Service

Headline statistics, charts and recent activity for one caller scope
(a veterinarian's sector, or whatever area an admin selects).

Everything is recomputed from the records on each call; nothing is cached.
"""

import logging
from datetime import timedelta
from typing import Any, Dict, List

from django.conf import settings
from django.utils import timezone

from livestock import records
from .classifier import SEVERITY_LEVELS
from .rollups import ranked, summary
from .scope import NATIONAL
from .trends import monthly_trends

logger = logging.getLogger(__name__)


class ScopedDashboardService:
    """
    Dashboard for a resolved scope.

    Usage:
        service = ScopedDashboardService(user=request.user, scope=scope)
        data = service.get_dashboard()
    """

    def __init__(self, user=None, scope=NATIONAL):
        self.user = user
        self.scope = scope
        self.config = settings.SURVEILLANCE
        self.now = timezone.now()

    def get_dashboard(self) -> Dict[str, Any]:
        # Each collection is read in full before anything is computed
        animals = list(records.fetch_animals(scope=self.scope))
        cases = list(records.fetch_disease_cases(scope=self.scope))

        totals = summary(animals, cases)

        logger.debug(
            f"Scoped dashboard for {self.scope.level} {self.scope}: "
            f"{len(animals)} animals, {len(cases)} cases"
        )

        return {
            'stats': self._stats(totals, cases),
            'charts': self._charts(totals, cases),
            'recentActivity': {
                'animals': self._recent_animals(animals),
                'diseases': self._recent_diseases(cases),
            },
        }

    # =========================================================================
    # SECTIONS
    # =========================================================================

    def _stats(self, totals, cases) -> Dict[str, int]:
        recent_since = self.now - timedelta(days=self.config['RECENT_CASE_DAYS'])
        return {
            'totalAnimals': totals.animals.total,
            'healthyAnimals': totals.animals.healthy,
            'sickAnimals': totals.animals.sick,
            'underTreatment': totals.animals.under_treatment,
            'totalDiseases': totals.diseases.total,
            'activeOutbreaks': totals.diseases.active_outbreaks,
            'recentDiseases': sum(1 for case in cases if case.reported_date >= recent_since),
        }

    def _charts(self, totals, cases) -> Dict[str, List[Dict]]:
        severity_counts = totals.diseases.as_dict()
        trends = monthly_trends(cases, self.config['SCOPED_TREND_MONTHS'], now=self.now)

        return {
            'animalsBySpecies': [
                {'name': name, 'value': count}
                for name, count in ranked(totals.animals.species)
            ],
            'diseasesByType': [
                {'name': name, 'value': count}
                for name, count in ranked(totals.diseases.types)
            ],
            # Severity order, only levels that occur
            'diseasesBySeverity': [
                {'name': level, 'value': severity_counts[level]}
                for level in SEVERITY_LEVELS
                if severity_counts[level]
            ],
            'diseaseTrends': [point.as_scoped_dict() for point in trends],
            'topDiseases': [
                {'name': name, 'value': count}
                for name, count in ranked(totals.diseases.diseases, self.config['TOP_DISEASES_LIMIT'])
            ],
        }

    def _recent_animals(self, animals) -> List[Dict]:
        latest = sorted(animals, key=lambda animal: animal.registered_date, reverse=True)
        return [
            {
                '_id': str(animal.id),
                'animalId': animal.animal_id,
                'species': animal.species,
                'breed': animal.breed,
                'ownerName': animal.owner_name,
                'registeredDate': animal.registered_date.isoformat(),
                'location': {
                    'province': animal.province,
                    'district': animal.district,
                    'sector': animal.sector,
                },
            }
            for animal in latest[:self.config['RECENT_ACTIVITY_LIMIT']]
        ]

    def _recent_diseases(self, cases) -> List[Dict]:
        latest = sorted(cases, key=lambda case: case.reported_date, reverse=True)
        return [
            {
                '_id': str(case.id),
                'reportId': case.report_id,
                'diseaseName': case.disease_name,
                'severity': case.severity,
                'location': {
                    'province': case.province,
                    'district': case.district,
                    'sector': case.sector,
                },
                'reportedDate': case.reported_date.isoformat(),
            }
            for case in latest[:self.config['RECENT_ACTIVITY_LIMIT']]
        ]
