"""
Dashboard services module
"""

from .geo_feed import GeoFeedBuilder, GeoFeedFilter
from .national_overview import NationalOverviewService
from .scope import Scope, resolve_scope
from .scoped_dashboard import ScopedDashboardService

__all__ = [
    'GeoFeedBuilder',
    'GeoFeedFilter',
    'NationalOverviewService',
    'Scope',
    'ScopedDashboardService',
    'resolve_scope',
]
