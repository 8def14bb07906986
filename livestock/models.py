"""
Livestock Registry & Disease Surveillance Models

Handles:
- Individual animal records with owner and location details
- Ordered vaccination history per animal
- Disease case reports carrying an immutable location snapshot
"""

from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from phonenumber_field.modelfields import PhoneNumberField
from accounts.models import User
import uuid


# Species with a dedicated bucket in map statistics; anything else is "other"
KNOWN_SPECIES = ('cattle', 'goats', 'sheep', 'pigs', 'poultry')


class LocationFields(models.Model):
    """Province -> District -> Sector, plus optional cell/village/coordinates."""

    province = models.CharField(max_length=100, db_index=True)
    district = models.CharField(max_length=100, db_index=True)
    sector = models.CharField(max_length=100, db_index=True)
    cell = models.CharField(max_length=100, blank=True)
    village = models.CharField(max_length=100, blank=True)
    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)

    class Meta:
        abstract = True

    LOCATION_FIELDS = ('province', 'district', 'sector', 'cell', 'village', 'latitude', 'longitude')

    @property
    def has_coordinates(self):
        return self.latitude is not None and self.longitude is not None

    def location_dict(self):
        return {
            'province': self.province,
            'district': self.district,
            'sector': self.sector,
            'cell': self.cell or None,
            'village': self.village or None,
            'latitude': float(self.latitude) if self.latitude is not None else None,
            'longitude': float(self.longitude) if self.longitude is not None else None,
        }


# =============================================================================
# ANIMAL
# =============================================================================

class Animal(LocationFields):
    """
    A registered animal. Health status is kept in line with the outcome of
    its most recently updated disease case (see livestock.signals).
    """

    class Sex(models.TextChoices):
        MALE = 'male', 'Male'
        FEMALE = 'female', 'Female'

    class HealthStatus(models.TextChoices):
        HEALTHY = 'healthy', 'Healthy'
        SICK = 'sick', 'Sick'
        UNDER_TREATMENT = 'under_treatment', 'Under Treatment'
        RECOVERED = 'recovered', 'Recovered'
        DECEASED = 'deceased', 'Deceased'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    animal_id = models.CharField(
        max_length=20,
        unique=True,
        help_text="Tag number (e.g., ANM000001)"
    )
    species = models.CharField(max_length=50, db_index=True)
    breed = models.CharField(max_length=100, blank=True)
    age = models.PositiveIntegerField(default=0, help_text="Age in months")
    sex = models.CharField(max_length=10, choices=Sex.choices)
    color = models.CharField(max_length=50, blank=True)
    identification_marks = models.TextField(blank=True)

    # Owner
    owner_name = models.CharField(max_length=200, db_index=True)
    owner_contact = PhoneNumberField(region='RW', blank=True)
    owner_address = models.CharField(max_length=255, blank=True)

    health_status = models.CharField(
        max_length=20,
        choices=HealthStatus.choices,
        default=HealthStatus.HEALTHY,
        db_index=True
    )

    registered_by = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='registered_animals'
    )
    registered_date = models.DateTimeField(default=timezone.now, db_index=True)
    last_updated = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'animals'
        ordering = ['-registered_date']
        indexes = [
            models.Index(fields=['province', 'district', 'sector'], name='animals_location_idx'),
            models.Index(fields=['species', 'health_status'], name='animals_species_status_idx'),
        ]

    def __str__(self):
        return f"{self.animal_id} - {self.species} ({self.owner_name})"


class VaccinationRecord(models.Model):
    """One entry of an animal's vaccination history."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    animal = models.ForeignKey(Animal, on_delete=models.CASCADE, related_name='vaccination_history')
    vaccine_name = models.CharField(max_length=200)
    date_administered = models.DateField()
    next_due_date = models.DateField(null=True, blank=True)
    administered_by = models.CharField(max_length=200)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'vaccination_records'
        ordering = ['date_administered', 'created_at']

    def __str__(self):
        return f"{self.animal.animal_id} - {self.vaccine_name} ({self.date_administered})"


# =============================================================================
# DISEASE CASE
# =============================================================================

class DiseaseCase(LocationFields):
    """
    A disease case reported against an animal.

    The location fields are a snapshot copied from the animal when the case
    is reported. They record where the case occurred and are never
    re-derived from the animal's current location.
    """

    class DiseaseType(models.TextChoices):
        VIRAL = 'viral', 'Viral'
        BACTERIAL = 'bacterial', 'Bacterial'
        PARASITIC = 'parasitic', 'Parasitic'
        FUNGAL = 'fungal', 'Fungal'
        OTHER = 'other', 'Other'

    class Severity(models.TextChoices):
        MILD = 'mild', 'Mild'
        MODERATE = 'moderate', 'Moderate'
        SEVERE = 'severe', 'Severe'
        CRITICAL = 'critical', 'Critical'

    class Outcome(models.TextChoices):
        ONGOING = 'ongoing', 'Ongoing'
        UNDER_TREATMENT = 'under_treatment', 'Under Treatment'
        RECOVERED = 'recovered', 'Recovered'
        DECEASED = 'deceased', 'Deceased'

    # Increasing risk
    SEVERITY_ORDER = ('mild', 'moderate', 'severe', 'critical')

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    report_id = models.CharField(
        max_length=20,
        unique=True,
        help_text="Report number (e.g., DIS000001)"
    )
    animal = models.ForeignKey(
        Animal,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='disease_cases'
    )

    disease_name = models.CharField(max_length=200, db_index=True)
    disease_type = models.CharField(max_length=20, choices=DiseaseType.choices, db_index=True)
    symptoms = models.JSONField(default=list, blank=True)
    severity = models.CharField(max_length=20, choices=Severity.choices, db_index=True)
    diagnosis_date = models.DateField(db_index=True)
    diagnosis_method = models.CharField(max_length=200, blank=True)
    treatment_provided = models.TextField(blank=True)

    # Free-form on purpose: unrecognised values are tolerated and mapped
    # to fallbacks by the classifier and the consistency updater.
    outcome = models.CharField(
        max_length=30,
        choices=Outcome.choices,
        default=Outcome.ONGOING,
        db_index=True
    )

    is_outbreak = models.BooleanField(default=False, db_index=True)
    affected_animals_count = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)]
    )
    notes = models.TextField(blank=True)

    reported_by = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='reported_cases'
    )
    reported_date = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'disease_cases'
        ordering = ['-reported_date']
        indexes = [
            models.Index(fields=['province', 'district', 'sector'], name='cases_location_idx'),
            models.Index(fields=['severity', 'is_outbreak'], name='cases_severity_outbreak_idx'),
            models.Index(fields=['reported_date', 'province'], name='cases_reported_province_idx'),
        ]

    def __str__(self):
        return f"{self.report_id} - {self.disease_name} ({self.severity})"

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._loaded_outcome = dict(zip(field_names, values)).get('outcome')
        return instance

    @property
    def outcome_changed(self):
        """True for unsaved cases or when outcome differs from the stored value."""
        return self._state.adding or self.outcome != getattr(self, '_loaded_outcome', None)

    def save(self, *args, **kwargs):
        super().save(*args, **kwargs)
        self._loaded_outcome = self.outcome

    def snapshot_location_from(self, animal):
        """Copy the animal's current location onto this case."""
        for field in self.LOCATION_FIELDS:
            setattr(self, field, getattr(animal, field))
