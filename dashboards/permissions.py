"""
Dashboard-specific permissions for role-based access control.
"""

from rest_framework import permissions


class IsSuperAdmin(permissions.BasePermission):
    """
    Permission for the national overview.
    """
    message = 'Only super administrators can view the national overview.'

    def has_permission(self, request, view):
        return (
            request.user and
            request.user.is_authenticated and
            request.user.role == 'super_admin'
        )


class IsSurveillanceStaff(permissions.BasePermission):
    """
    Permission for scoped dashboards and the disease map.
    """
    ALLOWED_ROLES = ['veterinarian', 'admin', 'super_admin']

    def has_permission(self, request, view):
        return (
            request.user and
            request.user.is_authenticated and
            request.user.role in self.ALLOWED_ROLES
        )
