"""
Rollup Engine

Groups animal and disease records by an administrative location key and
counts them along health/severity dimensions.

    tally(records, key_fn, extractors)   -> {key: Tally}
    rollup(animals, cases, key_fn)       -> [RollupResult]  (outer merge)

Each granularity (province, district, sector) is computed independently
from the same record set, so child counts always sum to the parent's.
Groups seen only among animals or only among cases still appear, with the
missing side zero-filled.
"""

import logging
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from locations.hierarchy import LEVELS, district_key, province_key, sector_key
from .classifier import SEVERITY_LEVELS, outbreak_contribution, record_value, severity_bucket

logger = logging.getLogger(__name__)

HEALTH_DIMENSIONS = ('healthy', 'sick', 'under_treatment', 'recovered', 'deceased')

# Unrecognised health statuses are counted here so group sums stay intact
FALLBACK_HEALTH_DIMENSION = 'sick'

GroupKey = Tuple[str, ...]
KeyFn = Callable[[object], GroupKey]


def health_dimension(animal) -> str:
    status = record_value(animal, 'health_status')
    if status in HEALTH_DIMENSIONS:
        return status
    logger.warning(
        f"Animal {record_value(animal, 'animal_id')} has unrecognised health status "
        f"'{status}', counted as {FALLBACK_HEALTH_DIMENSION}"
    )
    return FALLBACK_HEALTH_DIMENSION


def health_rate(healthy: int, total: int) -> int:
    """Percentage of healthy animals, rounded half up; 0 for an empty group."""
    if total <= 0:
        return 0
    rate = Decimal(healthy * 100) / Decimal(total)
    return int(rate.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


ANIMAL_EXTRACTORS = {
    'health': health_dimension,
    'species': lambda animal: record_value(animal, 'species'),
}

CASE_EXTRACTORS = {
    'severity': severity_bucket,
    'outbreak': outbreak_contribution,
    'disease': lambda case: record_value(case, 'disease_name'),
    'type': lambda case: record_value(case, 'disease_type'),
}


# =============================================================================
# GENERIC TALLY
# =============================================================================

@dataclass
class Tally:
    """Record count for one group plus a Counter per dimension."""
    total: int = 0
    dimensions: Dict[str, Counter] = field(default_factory=lambda: defaultdict(Counter))

    def counter(self, name: str) -> Counter:
        return self.dimensions[name]


def tally(
    records: Iterable,
    key_fn: KeyFn,
    extractors: Mapping[str, Callable[[object], object]],
) -> Dict[GroupKey, Tally]:
    """
    Count records per group key along each extractor's dimension.

    Records whose extractor yields None are counted in the group total but
    not in that dimension.
    """
    groups: Dict[GroupKey, Tally] = defaultdict(Tally)
    for record in records:
        group = groups[key_fn(record)]
        group.total += 1
        for name, extract in extractors.items():
            value = extract(record)
            if value is not None:
                group.counter(name)[value] += 1
    return dict(groups)


def ranked(counter: Counter, limit: Optional[int] = None) -> List[Tuple[str, int]]:
    """Count descending, ties broken by name ascending."""
    items = sorted(counter.items(), key=lambda item: (-item[1], str(item[0])))
    return items[:limit] if limit is not None else items


# =============================================================================
# TYPED RESULTS
# =============================================================================

@dataclass
class AnimalCounts:
    total: int = 0
    healthy: int = 0
    sick: int = 0
    under_treatment: int = 0
    recovered: int = 0
    deceased: int = 0
    species: Counter = field(default_factory=Counter)

    @classmethod
    def from_tally(cls, group: Optional[Tally]) -> 'AnimalCounts':
        if group is None:
            return cls()
        health = group.counter('health')
        return cls(
            total=group.total,
            species=Counter(group.counter('species')),
            **{dimension: health.get(dimension, 0) for dimension in HEALTH_DIMENSIONS},
        )

    @property
    def health_rate(self) -> int:
        return health_rate(self.healthy, self.total)

    def as_dict(self):
        return {
            'total': self.total,
            'healthy': self.healthy,
            'sick': self.sick,
            'underTreatment': self.under_treatment,
            'recovered': self.recovered,
            'deceased': self.deceased,
            'healthRate': self.health_rate,
        }


@dataclass
class DiseaseCounts:
    total: int = 0
    active_outbreaks: int = 0
    mild: int = 0
    moderate: int = 0
    severe: int = 0
    critical: int = 0
    diseases: Counter = field(default_factory=Counter)
    types: Counter = field(default_factory=Counter)

    @classmethod
    def from_tally(cls, group: Optional[Tally]) -> 'DiseaseCounts':
        if group is None:
            return cls()
        severity = group.counter('severity')
        return cls(
            total=group.total,
            active_outbreaks=group.counter('outbreak').get(1, 0),
            diseases=Counter(group.counter('disease')),
            types=Counter(group.counter('type')),
            **{level: severity.get(level, 0) for level in SEVERITY_LEVELS},
        )

    def as_dict(self):
        return {
            'total': self.total,
            'activeOutbreaks': self.active_outbreaks,
            'critical': self.critical,
            'severe': self.severe,
            'moderate': self.moderate,
            'mild': self.mild,
        }


@dataclass
class RollupResult:
    key: GroupKey
    animals: AnimalCounts
    diseases: DiseaseCounts

    @property
    def location(self) -> Dict[str, str]:
        return dict(zip(LEVELS, self.key))

    def as_row(self):
        """Flat drill-down row: location columns followed by every count."""
        return {
            **self.location,
            'totalAnimals': self.animals.total,
            'healthyAnimals': self.animals.healthy,
            'sickAnimals': self.animals.sick,
            'underTreatment': self.animals.under_treatment,
            'recovered': self.animals.recovered,
            'deceased': self.animals.deceased,
            'healthRate': self.animals.health_rate,
            'totalDiseases': self.diseases.total,
            'activeOutbreaks': self.diseases.active_outbreaks,
            'critical': self.diseases.critical,
            'severe': self.diseases.severe,
            'moderate': self.diseases.moderate,
            'mild': self.diseases.mild,
        }


# =============================================================================
# ROLLUPS
# =============================================================================

def rollup(animals: Iterable, cases: Iterable, key_fn: KeyFn) -> List[RollupResult]:
    """
    One RollupResult per group seen in either record set, sorted by key.

    This is an outer merge: a group with cases but no animals (or the
    reverse) is kept with zeroed counts on the missing side.
    """
    animal_groups = tally(animals, key_fn, ANIMAL_EXTRACTORS)
    case_groups = tally(cases, key_fn, CASE_EXTRACTORS)

    return [
        RollupResult(
            key=key,
            animals=AnimalCounts.from_tally(animal_groups.get(key)),
            diseases=DiseaseCounts.from_tally(case_groups.get(key)),
        )
        for key in sorted(set(animal_groups) | set(case_groups))
    ]


def summary(animals: Iterable, cases: Iterable) -> RollupResult:
    """Single rollup over everything (the whole scope)."""
    results = rollup(animals, cases, lambda record: ())
    return results[0] if results else RollupResult((), AnimalCounts(), DiseaseCounts())


def province_rollups(animals, cases) -> List[RollupResult]:
    """Province groups ranked by total animals descending, then name."""
    results = rollup(animals, cases, province_key)
    return sorted(results, key=lambda result: (-result.animals.total, result.key))


def district_rollups(animals, cases) -> List[RollupResult]:
    return rollup(animals, cases, district_key)


def sector_rollups(animals, cases) -> List[RollupResult]:
    return rollup(animals, cases, sector_key)
