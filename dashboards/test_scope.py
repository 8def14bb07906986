"""
Scope resolution tests (unsaved users, no database).
"""
import pytest
from django.contrib.auth.models import AnonymousUser

from accounts.models import User
from core.exceptions import InvalidFilter, ScopeDenied, Unauthenticated
from dashboards.services.scope import NATIONAL, Scope, resolve_scope


def vet(sector='Remera'):
    return User(
        username='vet', role='veterinarian',
        province='Kigali City', district='Gasabo', sector=sector,
    )


class TestResolveScope:

    def test_no_user(self):
        with pytest.raises(Unauthenticated):
            resolve_scope(None)
        with pytest.raises(Unauthenticated):
            resolve_scope(AnonymousUser())

    def test_veterinarian_locked_to_sector(self):
        scope = resolve_scope(vet())
        assert scope == Scope('Kigali City', 'Gasabo', 'Remera')
        assert scope.level == 'sector'

    def test_veterinarian_may_repeat_own_sector(self):
        assert resolve_scope(vet(), {'sector': 'Remera', 'province': 'all'}).sector == 'Remera'

    @pytest.mark.parametrize('requested', [
        {'sector': 'Kimironko'},
        {'district': 'Kicukiro'},
        {'province': 'Northern Province'},
    ])
    def test_veterinarian_denied_other_locations(self, requested):
        with pytest.raises(ScopeDenied):
            resolve_scope(vet(), requested)

    def test_veterinarian_without_sector_behaves_like_admin(self):
        assert resolve_scope(vet(sector=None), {'district': 'Gasabo', 'province': 'Kigali City'}) == Scope(
            'Kigali City', 'Gasabo', None
        )

    def test_admin_defaults_to_national(self):
        scope = resolve_scope(User(username='a', role='admin'))
        assert scope == NATIONAL
        assert scope.is_national
        assert scope.level == 'national'

    def test_admin_requested_scope_validated(self):
        admin = User(username='a', role='super_admin')
        assert resolve_scope(admin, {'province': 'Kigali City'}).level == 'province'
        with pytest.raises(InvalidFilter):
            resolve_scope(admin, {'province': 'Kigali City', 'district': 'Musanze'})


class TestScopeContains:

    def test_contains_records_and_mappings(self):
        scope = Scope(province='Kigali City', district='Gasabo')
        assert scope.contains({'province': 'Kigali City', 'district': 'Gasabo', 'sector': 'Remera'})
        assert not scope.contains({'province': 'Kigali City', 'district': 'Kicukiro'})
        assert NATIONAL.contains(object())
