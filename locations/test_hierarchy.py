"""
Tests for the Rwanda location hierarchy and the drill-down endpoint.
"""
import pytest
from django.urls import reverse
from rest_framework import status

from locations.hierarchy import (
    UNKNOWN_LOCATION,
    cascade_selection,
    district_key,
    get_districts,
    get_provinces,
    get_sectors,
    location_path,
    normalize_component,
    province_key,
    sector_key,
    validate_location,
)


class TestReferenceTree:

    def test_five_provinces(self):
        assert len(get_provinces()) == 5
        assert 'Kigali City' in get_provinces()

    def test_thirty_districts(self):
        assert sum(len(get_districts(p)) for p in get_provinces()) == 30

    def test_sectors_of_district(self):
        sectors = get_sectors('Kigali City', 'Gasabo')
        assert 'Remera' in sectors
        assert 'Kimironko' in sectors

    def test_unknown_parent_has_no_children(self):
        assert get_districts('Atlantis') == []
        assert get_sectors('Kigali City', 'Musanze') == []
        assert get_sectors(None, None) == []


class TestValidateLocation:

    def test_valid_full_selection(self):
        assert validate_location('Kigali City', 'Gasabo', 'Remera') == {}

    def test_partial_selection_is_valid(self):
        assert validate_location('Kigali City') == {}
        assert validate_location(None) == {}

    def test_district_from_other_province(self):
        errors = validate_location('Kigali City', 'Musanze')
        assert 'district' in errors

    def test_sector_without_district(self):
        errors = validate_location('Kigali City', None, 'Remera')
        assert 'sector' in errors

    def test_invalid_parent_reported_once(self):
        errors = validate_location('Atlantis', 'Gasabo', 'Remera')
        assert list(errors) == ['province']

    def test_require_all(self):
        errors = validate_location('Kigali City', require_all=True)
        assert set(errors) == {'district', 'sector'}


class TestCascadeSelection:

    def test_new_province_resets_children(self):
        selection = {'province': 'Kigali City', 'district': 'Gasabo', 'sector': 'Remera'}
        result = cascade_selection(selection, 'province', 'Northern Province')
        assert result == {'province': 'Northern Province', 'district': None, 'sector': None}

    def test_new_district_keeps_province(self):
        selection = {'province': 'Kigali City', 'district': 'Gasabo', 'sector': 'Remera'}
        result = cascade_selection(selection, 'district', 'Kicukiro')
        assert result == {'province': 'Kigali City', 'district': 'Kicukiro', 'sector': None}

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            cascade_selection({}, 'village', 'x')


class TestGroupingKeys:

    def test_blank_components_become_unknown(self):
        assert normalize_component(None) == UNKNOWN_LOCATION
        assert normalize_component('   ') == UNKNOWN_LOCATION
        assert normalize_component(' Gasabo ') == 'Gasabo'

    def test_keys_from_mapping(self):
        record = {'province': 'Kigali City', 'district': 'Gasabo', 'sector': ''}
        assert province_key(record) == ('Kigali City',)
        assert district_key(record) == ('Kigali City', 'Gasabo')
        assert sector_key(record) == ('Kigali City', 'Gasabo', UNKNOWN_LOCATION)

    def test_values_outside_tree_are_kept(self):
        record = {'province': 'Kigali City', 'district': 'Old District', 'sector': 'Old Sector'}
        assert sector_key(record) == ('Kigali City', 'Old District', 'Old Sector')

    def test_invalid_depth(self):
        with pytest.raises(ValueError):
            location_path({}, 4)


@pytest.mark.django_db
class TestLocationEndpoint:

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('locations:hierarchy'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data

    def test_province_options(self, api_client, admin_user):
        api_client.force_authenticate(user=admin_user)
        response = api_client.get(reverse('locations:hierarchy'))
        assert response.status_code == status.HTTP_200_OK
        assert response.data['level'] == 'province'
        assert len(response.data['options']) == 5

    def test_sector_options(self, api_client, admin_user):
        api_client.force_authenticate(user=admin_user)
        response = api_client.get(
            reverse('locations:hierarchy'),
            {'province': 'Kigali City', 'district': 'Gasabo'}
        )
        assert response.data['level'] == 'sector'
        assert 'Remera' in response.data['options']

    def test_changed_province_cascades(self, api_client, admin_user):
        api_client.force_authenticate(user=admin_user)
        response = api_client.get(
            reverse('locations:hierarchy'),
            {'province': 'Northern Province', 'district': 'Gasabo', 'sector': 'Remera', 'changed': 'province'}
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data['selection'] == {
            'province': 'Northern Province', 'district': None, 'sector': None
        }
        assert 'Musanze' in response.data['options']

    def test_inconsistent_selection_rejected(self, api_client, admin_user):
        api_client.force_authenticate(user=admin_user)
        response = api_client.get(
            reverse('locations:hierarchy'),
            {'province': 'Northern Province', 'district': 'Gasabo'}
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Validation failed'
