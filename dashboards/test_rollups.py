"""
Rollup engine tests. Pure computation over unsaved records, no database.
"""
import pytest

from dashboards.services.rollups import (
    HEALTH_DIMENSIONS,
    district_rollups,
    health_rate,
    province_rollups,
    ranked,
    rollup,
    sector_rollups,
    summary,
    tally,
)
from livestock.models import Animal, DiseaseCase
from locations.hierarchy import UNKNOWN_LOCATION, province_key


def animal(sector='Remera', district='Gasabo', province='Kigali City', **fields):
    fields.setdefault('species', 'cattle')
    fields.setdefault('health_status', 'healthy')
    return Animal(province=province, district=district, sector=sector, **fields)


def case(sector='Remera', district='Gasabo', province='Kigali City', **fields):
    fields.setdefault('disease_name', 'Anthrax')
    fields.setdefault('disease_type', 'bacterial')
    fields.setdefault('severity', 'mild')
    return DiseaseCase(province=province, district=district, sector=sector, **fields)


class TestHealthRate:

    @pytest.mark.parametrize('healthy,total,expected', [
        (12, 13, 92),
        (0, 0, 0),
        (1, 2, 50),
        (1, 8, 13),   # 12.5 rounds half up
        (5, 5, 100),
    ])
    def test_health_rate(self, healthy, total, expected):
        assert health_rate(healthy, total) == expected


class TestTally:

    def test_counts_per_group_and_dimension(self):
        records = [
            {'k': 'a', 'colour': 'red'},
            {'k': 'a', 'colour': 'red'},
            {'k': 'a', 'colour': None},
            {'k': 'b', 'colour': 'blue'},
        ]
        groups = tally(records, lambda r: (r['k'],), {'colour': lambda r: r['colour']})

        assert groups[('a',)].total == 3
        assert groups[('a',)].counter('colour') == {'red': 2}
        assert groups[('b',)].counter('colour') == {'blue': 1}

    def test_ranked_ties_by_name(self):
        from collections import Counter
        counts = Counter({'Rabies': 2, 'Anthrax': 2, 'Brucellosis': 5})
        assert ranked(counts) == [('Brucellosis', 5), ('Anthrax', 2), ('Rabies', 2)]
        assert ranked(counts, 1) == [('Brucellosis', 5)]


class TestProvinceScenario:
    """Sector A: 2 healthy + 1 sick; sector B: 10 healthy."""

    @pytest.fixture
    def animals(self):
        return (
            [animal('Remera'), animal('Remera'), animal('Remera', health_status='sick')]
            + [animal('Kimironko') for _ in range(10)]
        )

    def test_province_totals(self, animals):
        [kigali] = province_rollups(animals, [])
        assert kigali.key == ('Kigali City',)
        assert kigali.animals.total == 13
        assert kigali.animals.healthy == 12
        assert kigali.animals.sick == 1
        assert kigali.animals.health_rate == 92

    def test_sectors_sum_to_parent(self, animals):
        cases = [case('Remera', severity='critical', is_outbreak=True), case('Kimironko')]
        sectors = sector_rollups(animals, cases)
        [district] = district_rollups(animals, cases)

        for dimension in HEALTH_DIMENSIONS + ('total',):
            assert sum(getattr(s.animals, dimension) for s in sectors) == getattr(district.animals, dimension)
        for dimension in ('total', 'active_outbreaks', 'critical', 'mild'):
            assert sum(getattr(s.diseases, dimension) for s in sectors) == getattr(district.diseases, dimension)

    def test_dimensions_sum_to_total(self, animals):
        for result in sector_rollups(animals, []):
            assert sum(getattr(result.animals, d) for d in HEALTH_DIMENSIONS) == result.animals.total


class TestOuterMerge:

    def test_group_only_in_cases(self):
        results = district_rollups(
            [animal(district='Gasabo')],
            [case(district='Kicukiro', sector='Kanombe', severity='severe')],
        )
        by_key = {result.key: result for result in results}

        kicukiro = by_key[('Kigali City', 'Kicukiro')]
        assert kicukiro.animals.total == 0
        assert kicukiro.animals.health_rate == 0
        assert kicukiro.diseases.severe == 1

        gasabo = by_key[('Kigali City', 'Gasabo')]
        assert gasabo.diseases.as_dict() == {
            'total': 0, 'activeOutbreaks': 0, 'critical': 0, 'severe': 0, 'moderate': 0, 'mild': 0,
        }

    def test_zero_defaults_in_row(self):
        [result] = rollup([animal()], [], province_key)
        row = result.as_row()
        assert row['province'] == 'Kigali City'
        assert row['critical'] == 0
        assert row['totalDiseases'] == 0


class TestOrdering:

    def test_provinces_by_total_then_name(self):
        animals = (
            [animal(province='Western Province', district='Rubavu', sector='Gisenyi')] * 2
            + [animal(province='Eastern Province', district='Ngoma', sector='Kibungo')] * 2
            + [animal()] * 3
        )
        keys = [result.key[0] for result in province_rollups(animals, [])]
        assert keys == ['Kigali City', 'Eastern Province', 'Western Province']

    def test_sectors_lexical(self):
        animals = [animal('Remera'), animal('Gisozi'), animal('Kacyiru')]
        keys = [result.key[2] for result in sector_rollups(animals, [])]
        assert keys == ['Gisozi', 'Kacyiru', 'Remera']


class TestEdgeCases:

    def test_missing_location_grouped_as_unknown(self):
        results = sector_rollups([animal(sector=''), animal(sector=None)], [case(sector='  ')])
        assert [result.key for result in results] == [('Kigali City', 'Gasabo', UNKNOWN_LOCATION)]
        assert results[0].animals.total == 2
        assert results[0].diseases.total == 1

    def test_unrecognised_health_status_counted_sick(self):
        result = summary([animal(health_status='zombie')], [])
        assert result.animals.sick == 1
        assert result.animals.total == 1

    def test_empty_summary(self):
        result = summary([], [])
        assert result.animals.total == 0
        assert result.animals.health_rate == 0
