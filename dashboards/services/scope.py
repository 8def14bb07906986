"""
Caller scope resolution.

Turns an authenticated user plus the requested province/district/sector
into an immutable Scope that the record accessor applies as a filter.
Authorization happens here, once, before any record is read.
"""

import logging
from dataclasses import dataclass
from collections.abc import Mapping
from typing import Optional

from core.exceptions import InvalidFilter, ScopeDenied, Unauthenticated
from locations.hierarchy import LEVELS, validate_location

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scope:
    province: Optional[str] = None
    district: Optional[str] = None
    sector: Optional[str] = None

    @property
    def is_national(self) -> bool:
        return not (self.province or self.district or self.sector)

    @property
    def level(self) -> str:
        """Most specific restricted level, or 'national'."""
        for level in reversed(LEVELS):
            if getattr(self, level):
                return level
        return 'national'

    def as_dict(self):
        return {level: getattr(self, level) for level in LEVELS}

    def contains(self, record) -> bool:
        """True when the record's (or location mapping's) location falls inside this scope."""
        if isinstance(record, Mapping):
            value_of = record.get
        else:
            def value_of(level):
                return getattr(record, level, None)
        return all(
            value_of(level) == getattr(self, level)
            for level in LEVELS
            if getattr(self, level)
        )


NATIONAL = Scope()


def _requested_value(requested: Mapping, level: str) -> Optional[str]:
    value = requested.get(level)
    if value is None:
        return None
    value = str(value).strip()
    if not value or value.lower() == 'all':
        return None
    return value


def resolve_scope(user, requested: Optional[Mapping] = None) -> Scope:
    """
    Resolve the scope a caller may read.

    - No authenticated user: Unauthenticated, nothing is computed.
    - Veterinarian with an assigned sector: locked to that sector. Asking
      for any other location raises ScopeDenied.
    - Everyone else: the requested location, validated against the
      hierarchy, or the whole country when nothing is requested.
    """
    if user is None or not getattr(user, 'is_authenticated', False):
        raise Unauthenticated()

    requested = requested or {}
    wanted = {level: _requested_value(requested, level) for level in LEVELS}

    if user.is_sector_restricted:
        assigned = Scope(province=user.province, district=user.district, sector=user.sector)
        for level, value in wanted.items():
            if value and value != getattr(assigned, level):
                logger.warning(
                    f"User {user.username} denied {level} '{value}' "
                    f"(assigned sector: {user.sector})"
                )
                raise ScopeDenied(f'Veterinarians can only access their assigned sector ({user.sector}).')
        return assigned

    errors = validate_location(wanted['province'], wanted['district'], wanted['sector'])
    if errors:
        raise InvalidFilter(errors)

    return Scope(**wanted)
