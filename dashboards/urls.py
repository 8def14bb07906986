"""
Dashboard URL Configuration

Two route groups, mounted separately in core.urls:
- analytics_urlpatterns under /api/analytics/
- map_urlpatterns under /api/diseases/map/
"""

from django.urls import path
from .views import (
    GeoFeedView,
    NationalOverviewView,
    ScopedDashboardView,
)

analytics_urlpatterns = [
    path('dashboard/', ScopedDashboardView.as_view(), name='scoped-dashboard'),
    path('super-admin/', NationalOverviewView.as_view(), name='national-overview'),
]

map_urlpatterns = [
    path('', GeoFeedView.as_view(), name='geo-feed'),
]
