from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth import get_user_model
from django.contrib import admin

User = get_user_model()


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for the custom User model."""

    list_display = (
        'username', 'email', 'phone', 'role', 'province', 'district', 'sector',
        'is_active', 'is_staff', 'date_joined'
    )
    list_filter = (
        'role', 'is_active', 'is_staff', 'province', 'date_joined'
    )
    search_fields = ('username', 'email', 'phone', 'first_name', 'last_name', 'license_number')
    ordering = ('-date_joined',)

    fieldsets = (
        (None, {'fields': ('username', 'password')}),
        ('Personal Info', {
            'fields': ('first_name', 'last_name', 'email', 'phone', 'license_number')
        }),
        ('Role & Location', {
            'fields': ('role', 'province', 'district', 'sector')
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')
        }),
        ('Important dates', {'fields': ('last_login', 'date_joined')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('username', 'email', 'role', 'password1', 'password2'),
        }),
    )
