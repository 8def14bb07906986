"""
Dashboard API Views

Provides REST API endpoints for dashboard and map data consumption.
The frontend binds to the returned field names directly.
"""

import logging

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .permissions import IsSuperAdmin, IsSurveillanceStaff
from .services import (
    GeoFeedBuilder,
    GeoFeedFilter,
    NationalOverviewService,
    ScopedDashboardService,
    resolve_scope,
)

logger = logging.getLogger(__name__)


class ScopedDashboardView(APIView):
    """
    Scoped Dashboard API Endpoint

    GET /api/analytics/dashboard/
        ?province=...&district=...&sector=...   (admins only)

    Returns:
    - stats: animal health and disease counts
    - charts: species, disease type, severity, 6-month trend, top diseases
    - recentActivity: latest registrations and reports

    Veterinarians always get their assigned sector.
    """
    permission_classes = [IsAuthenticated, IsSurveillanceStaff]

    def get(self, request):
        scope = resolve_scope(request.user, request.query_params)
        service = ScopedDashboardService(user=request.user, scope=scope)
        return Response(service.get_dashboard(), status=status.HTTP_200_OK)


class NationalOverviewView(APIView):
    """
    National Overview API Endpoint

    GET /api/analytics/super-admin/

    Province, district and sector rollups plus the 12-month
    per-province disease trend.

    Permission: Super Admin only
    """
    permission_classes = [IsAuthenticated, IsSuperAdmin]

    def get(self, request):
        service = NationalOverviewService(user=request.user)
        return Response(service.get_overview(), status=status.HTTP_200_OK)


class GeoFeedView(APIView):
    """
    Disease Map Feed

    GET /api/diseases/map/
        ?species=&severity=&status=&province=&district=
        &diseaseType=&startDate=&endDate=&coordinatesOnly=

    ``all`` (or an empty value) disables a filter. Province and district are
    independent filters; a veterinarian stays locked to their sector and
    may not ask for another location.
    """
    permission_classes = [IsAuthenticated, IsSurveillanceStaff]

    def get(self, request):
        requested = None
        if request.user.is_sector_restricted:
            requested = {
                'province': request.query_params.get('province'),
                'district': request.query_params.get('district'),
            }
        scope = resolve_scope(request.user, requested)
        feed_filter = GeoFeedFilter.from_query_params(request.query_params)
        data = GeoFeedBuilder(scope=scope).build(feed_filter)
        return Response(data, status=status.HTTP_200_OK)
