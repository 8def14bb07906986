from django.contrib.auth.models import AbstractUser
from django.db import models
from phonenumber_field.modelfields import PhoneNumberField
import uuid


class User(AbstractUser):
    """
    Custom User model extending Django's AbstractUser.

    Carries the caller identity consumed by the surveillance engine: a role
    and, for field staff, the administrative area they are assigned to.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class UserRole(models.TextChoices):
        VETERINARIAN = 'veterinarian', 'Veterinarian'
        ADMIN = 'admin', 'Administrator'
        SUPER_ADMIN = 'super_admin', 'Super Administrator'

    role = models.CharField(
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.VETERINARIAN,
        db_index=True,
        help_text="User's role in the system"
    )

    phone = PhoneNumberField(
        region='RW',  # Rwanda
        blank=True,
        null=True,
        help_text="Phone number (Rwanda format: +250XXXXXXXXX)"
    )

    license_number = models.CharField(
        max_length=50,
        blank=True,
        help_text="Veterinary license number"
    )

    # Geographic assignment (for field staff)
    province = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        db_index=True,
        help_text="Assigned province"
    )

    district = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        help_text="Assigned district"
    )

    sector = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        db_index=True,
        help_text="Assigned sector (veterinarians are restricted to it)"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        indexes = [
            models.Index(fields=['role', 'is_active'], name='users_role_active_idx'),
            models.Index(fields=['province', 'district', 'sector'], name='users_location_idx'),
        ]

    def __str__(self):
        return f"{self.get_full_name()} ({self.get_role_display()})"

    def get_full_name(self):
        """Return the user's full name or username if name is not set."""
        full_name = super().get_full_name()
        return full_name if full_name else self.username

    @property
    def is_super_admin(self):
        return self.role == self.UserRole.SUPER_ADMIN

    @property
    def is_sector_restricted(self):
        """Veterinarians with an assigned sector only see that sector."""
        return self.role == self.UserRole.VETERINARIAN and bool(self.sector)
