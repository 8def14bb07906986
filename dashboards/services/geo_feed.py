"""
Geo Feed Builder

Disease cases for the surveillance map, each joined to a minimal summary
of its animal. Runs as two explicit phases:

1. Filter and join: select the cases matching every filter (species is
   matched on the joined animal, status on the stored outcome), keep the
   newest ones, and project each into a map entry.
2. Summarize: compute statistics by iterating the entries from phase 1.

Entries carry the case's own location snapshot, never the animal's
current location.
"""

import logging
from collections import Counter
from dataclasses import dataclass, fields
from typing import Dict, List, Optional

from django.conf import settings

from core.exceptions import InvalidFilter
from livestock import records
from livestock.models import KNOWN_SPECIES, DiseaseCase
from .classifier import PRESENTATION_STATUSES, SEVERITY_LEVELS, presentation_status

logger = logging.getLogger(__name__)

OTHER = 'other'
SPECIES_BUCKETS = KNOWN_SPECIES + (OTHER,)
DISEASE_TYPES = tuple(DiseaseCase.DiseaseType.values)

TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _query_value(params, name) -> Optional[str]:
    value = params.get(name)
    if value is None:
        return None
    value = str(value).strip()
    if not value or value.lower() == 'all':
        return None
    return value


@dataclass(frozen=True)
class GeoFeedFilter:
    species: Optional[str] = None
    severity: Optional[str] = None
    status: Optional[str] = None
    province: Optional[str] = None
    district: Optional[str] = None
    disease_type: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    coordinates_only: bool = False

    # Query parameter name for each field
    PARAMS = {
        'species': 'species',
        'severity': 'severity',
        'status': 'status',
        'province': 'province',
        'district': 'district',
        'disease_type': 'diseaseType',
        'start_date': 'startDate',
        'end_date': 'endDate',
        'coordinates_only': 'coordinatesOnly',
    }

    @classmethod
    def from_query_params(cls, params) -> 'GeoFeedFilter':
        """Build from map query parameters. ``all`` or blank means no filter."""
        values = {name: _query_value(params, param) for name, param in cls.PARAMS.items()}
        values['coordinates_only'] = (values['coordinates_only'] or '').lower() in TRUE_VALUES

        status = values['status']
        if status is not None and status not in PRESENTATION_STATUSES:
            raise InvalidFilter({'status': f"Expected one of {', '.join(PRESENTATION_STATUSES)}"})
        return cls(**values)

    def record_filters(self) -> Dict[str, object]:
        """Every set filter, as record accessor query keys."""
        pushed = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value:
                pushed[self.PARAMS[item.name]] = value
        return pushed


def _iso(value):
    return value.isoformat() if value else None


def build_entry(case) -> Dict:
    """Project one case (and its animal, if any) into a map entry."""
    animal = case.animal if case.animal_id else None
    reporter = case.reported_by

    return {
        '_id': str(case.id),
        'caseId': case.report_id,
        'animal': {
            '_id': str(animal.id),
            'tagNumber': animal.animal_id,
            'species': animal.species,
            'breed': animal.breed,
            'owner': {
                'name': animal.owner_name,
                'phone': str(animal.owner_contact) if animal.owner_contact else '',
            },
        } if animal is not None else None,
        'disease': {
            'name': case.disease_name,
            'type': case.disease_type,
            'severity': case.severity,
        },
        'location': case.location_dict(),
        'diagnosisDate': _iso(case.diagnosis_date),
        'reportedDate': _iso(case.reported_date),
        'veterinarian': {
            'name': reporter.get_full_name() if reporter else None,
            'license': (reporter.license_number or None) if reporter else None,
        },
        'symptoms': list(case.symptoms or []),
        'treatment': case.treatment_provided,
        'status': presentation_status(case),
        'isOutbreak': case.is_outbreak,
        'notes': case.notes,
    }


def species_bucket(species: Optional[str]) -> Optional[str]:
    """Known species as-is, any other set value as other, blank as None."""
    normalized = (species or '').strip().lower()
    if not normalized:
        return None
    return normalized if normalized in KNOWN_SPECIES else OTHER


def summarize(entries: List[Dict]) -> Dict:
    """Statistics over already-filtered entries; no further querying."""
    by_severity = Counter()
    by_species = Counter()
    by_status = Counter()
    by_type = Counter()
    locations = set()

    for entry in entries:
        by_severity[entry['disease']['severity']] += 1
        by_status[entry['status']] += 1
        by_type[entry['disease']['type'] if entry['disease']['type'] in DISEASE_TYPES else OTHER] += 1

        # Cases without a linked animal, or without a species, are not counted
        bucket = species_bucket(entry['animal']['species']) if entry['animal'] else None
        if bucket is not None:
            by_species[bucket] += 1

        location = entry['location']
        if location.get('sector'):
            locations.add((location.get('province'), location.get('district'), location['sector']))

    return {
        'totalCases': len(entries),
        'activeOutbreaks': sum(1 for entry in entries if entry['isOutbreak']),
        'affectedAnimals': len(entries),
        'affectedLocations': len(locations),
        'bySeverity': {level: by_severity.get(level, 0) for level in SEVERITY_LEVELS},
        'bySpecies': {bucket: by_species.get(bucket, 0) for bucket in SPECIES_BUCKETS},
        'byStatus': {status: by_status.get(status, 0) for status in PRESENTATION_STATUSES},
        'byType': {disease_type: by_type.get(disease_type, 0) for disease_type in DISEASE_TYPES},
    }


class GeoFeedBuilder:
    """
    Builds the map feed for one caller scope.

    The newest ``max_cases`` cases matching the whole filter are fetched
    and statistics cover exactly those.
    """

    def __init__(self, scope=None, max_cases: Optional[int] = None):
        self.scope = scope
        self.max_cases = max_cases or settings.SURVEILLANCE['GEO_FEED_MAX_CASES']

    def fetch_entries(self, feed_filter: GeoFeedFilter) -> List[Dict]:
        cases = records.fetch_disease_cases(feed_filter.record_filters(), self.scope)
        cases = cases.order_by('-reported_date')[:self.max_cases]
        return [build_entry(case) for case in cases]

    def build(self, feed_filter: Optional[GeoFeedFilter] = None) -> Dict:
        feed_filter = feed_filter or GeoFeedFilter()
        entries = self.fetch_entries(feed_filter)
        stats = summarize(entries)
        logger.debug(
            f"Geo feed built: {stats['totalCases']} cases, "
            f"{stats['activeOutbreaks']} outbreaks (scope={self.scope})"
        )
        return {'cases': entries, 'stats': stats}
