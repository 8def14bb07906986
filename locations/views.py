"""
Location drill-down API.

GET /api/locations/
    ?province=...&district=...&sector=...   current selection
    ?changed=province|district|sector       level the user just changed;
                                            every level below it is reset
"""

from rest_framework.views import APIView
from rest_framework.response import Response

from core.exceptions import InvalidFilter
from .hierarchy import (
    LEVELS,
    cascade_selection,
    get_districts,
    get_provinces,
    get_sectors,
    validate_location,
)


class LocationHierarchyView(APIView):
    """
    Returns the options for the next level below the current selection,
    together with the (possibly cascaded) selection itself.
    """

    def get(self, request):
        selection = {level: request.query_params.get(level) or None for level in LEVELS}

        changed = request.query_params.get('changed')
        if changed:
            if changed not in LEVELS:
                raise InvalidFilter({'changed': f"Expected one of {', '.join(LEVELS)}"})
            selection = cascade_selection(selection, changed, selection[changed])

        errors = validate_location(**selection)
        if errors:
            raise InvalidFilter(errors)

        province, district, sector = selection['province'], selection['district'], selection['sector']
        if not province:
            level, options = 'province', get_provinces()
        elif not district:
            level, options = 'district', get_districts(province)
        elif not sector:
            level, options = 'sector', get_sectors(province, district)
        else:
            level, options = None, []

        return Response({
            'selection': selection,
            'level': level,
            'options': options,
        })
