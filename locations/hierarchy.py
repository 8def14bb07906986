"""
Location Hierarchy Resolver

Static Province -> District -> Sector reference tree. Used to:
- validate location selections on registration and scope requests
- cascade-clear child selections when a parent level changes
- build the grouping keys for hierarchical rollups

Records whose location component is missing or blank are grouped under
UNKNOWN_LOCATION at that level. Non-blank values that are not in the
reference tree are kept as-is and never dropped.
"""

from collections.abc import Mapping
from typing import Dict, List, Optional, Tuple

from .rwanda import RWANDA_PROVINCES

UNKNOWN_LOCATION = 'Unknown'

LEVELS = ('province', 'district', 'sector')

_TREE: Dict[str, Dict[str, List[str]]] = {
    province['name']: {
        district['name']: list(district['sectors'])
        for district in province['districts']
    }
    for province in RWANDA_PROVINCES
}


def get_provinces() -> List[str]:
    return list(_TREE)


def get_districts(province: Optional[str]) -> List[str]:
    return list(_TREE.get(province or '', {}))


def get_sectors(province: Optional[str], district: Optional[str]) -> List[str]:
    return list(_TREE.get(province or '', {}).get(district or '', []))


def validate_location(
    province: Optional[str],
    district: Optional[str] = None,
    sector: Optional[str] = None,
    require_all: bool = False,
) -> Dict[str, str]:
    """
    Check a (partial) selection against the reference tree.

    Args:
        province, district, sector: the selection, top-down
        require_all: every level must be present (registration forms)

    Returns:
        Dict of level -> error message. Empty when the selection is valid.
    """
    errors = {}
    selection = {'province': province, 'district': district, 'sector': sector}

    for index, level in enumerate(LEVELS):
        value = selection[level]
        if not value:
            if require_all:
                errors[level] = 'This field is required.'
            continue

        parent_missing = [p for p in LEVELS[:index] if not selection[p]]
        if parent_missing:
            errors[level] = f'A {level} cannot be selected without a {parent_missing[0]}.'
            continue

        if level == 'province':
            options = get_provinces()
        elif level == 'district':
            options = get_districts(province)
        else:
            options = get_sectors(province, district)

        # Children of an invalid parent are reported once, on the parent
        if any(p in errors for p in LEVELS[:index]):
            continue

        if value not in options:
            parent = selection[LEVELS[index - 1]] if index else 'Rwanda'
            errors[level] = f"'{value}' is not a {level} of {parent}."

    return errors


def cascade_selection(
    selection: Mapping,
    level: str,
    value: Optional[str],
) -> Dict[str, Optional[str]]:
    """
    Set one level of a selection and reset every level below it.

    Choosing a new province always clears the previously chosen district
    and sector; choosing a district clears the sector.
    """
    if level not in LEVELS:
        raise ValueError(f"Unknown location level '{level}'. Expected one of {LEVELS}")

    index = LEVELS.index(level)
    result = {parent: selection.get(parent) or None for parent in LEVELS[:index]}
    result[level] = value or None
    for child in LEVELS[index + 1:]:
        result[child] = None
    return result


def normalize_component(value) -> str:
    """Blank/missing location component -> UNKNOWN_LOCATION."""
    if value is None:
        return UNKNOWN_LOCATION
    text = str(value).strip()
    return text or UNKNOWN_LOCATION


def _component(record, level: str):
    if isinstance(record, Mapping):
        return record.get(level)
    return getattr(record, level, None)


def location_path(record, depth: int) -> Tuple[str, ...]:
    """
    Grouping key for a record: (province[, district[, sector]]).

    Works for animals and disease cases alike; both expose flat
    province/district/sector attributes (the case's are its snapshot).
    """
    if not 1 <= depth <= len(LEVELS):
        raise ValueError(f"depth must be between 1 and {len(LEVELS)}")
    return tuple(normalize_component(_component(record, level)) for level in LEVELS[:depth])


def province_key(record) -> Tuple[str, ...]:
    return location_path(record, 1)


def district_key(record) -> Tuple[str, ...]:
    return location_path(record, 2)


def sector_key(record) -> Tuple[str, ...]:
    return location_path(record, 3)
