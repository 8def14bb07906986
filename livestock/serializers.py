"""
Livestock serializers.

Input serializers accept the camelCase payloads used by the dashboard and
map clients and produce model field names. Output is built by the plain
``serialize_*`` functions, which emit the wire shapes the clients bind to.
"""

from rest_framework import serializers
from phonenumber_field.serializerfields import PhoneNumberField

from locations.hierarchy import validate_location
from .models import Animal, DiseaseCase


# =============================================================================
# INPUT
# =============================================================================

class LocationSerializer(serializers.Serializer):
    """Nested ``location`` object, flattened onto the parent's fields."""
    province = serializers.CharField(max_length=100)
    district = serializers.CharField(max_length=100)
    sector = serializers.CharField(max_length=100)
    cell = serializers.CharField(max_length=100, required=False, allow_blank=True)
    village = serializers.CharField(max_length=100, required=False, allow_blank=True)
    latitude = serializers.DecimalField(
        max_digits=9, decimal_places=6, required=False, allow_null=True,
        min_value=-90, max_value=90
    )
    longitude = serializers.DecimalField(
        max_digits=9, decimal_places=6, required=False, allow_null=True,
        min_value=-180, max_value=180
    )

    def validate(self, attrs):
        errors = validate_location(
            attrs.get('province'), attrs.get('district'), attrs.get('sector'),
            require_all=True,
        )
        if errors:
            raise serializers.ValidationError(errors)
        return attrs


class AnimalCreateSerializer(serializers.Serializer):
    species = serializers.CharField(max_length=50)
    breed = serializers.CharField(max_length=100, required=False, allow_blank=True)
    age = serializers.IntegerField(min_value=0, required=False, default=0)
    sex = serializers.ChoiceField(choices=Animal.Sex.choices)
    color = serializers.CharField(max_length=50, required=False, allow_blank=True)
    identificationMarks = serializers.CharField(
        source='identification_marks', required=False, allow_blank=True
    )
    ownerName = serializers.CharField(source='owner_name', max_length=200)
    ownerContact = PhoneNumberField(source='owner_contact', required=False, allow_blank=True)
    ownerAddress = serializers.CharField(
        source='owner_address', max_length=255, required=False, allow_blank=True
    )
    location = LocationSerializer(source='*')

    def validate_species(self, value):
        return value.strip().lower()


class AnimalUpdateSerializer(AnimalCreateSerializer):
    healthStatus = serializers.ChoiceField(
        source='health_status', choices=Animal.HealthStatus.choices, required=False
    )


class VaccinationSerializer(serializers.Serializer):
    vaccineName = serializers.CharField(source='vaccine_name', max_length=200)
    dateAdministered = serializers.DateField(source='date_administered')
    nextDueDate = serializers.DateField(source='next_due_date', required=False, allow_null=True)
    administeredBy = serializers.CharField(source='administered_by', max_length=200)

    def validate(self, attrs):
        next_due = attrs.get('next_due_date')
        if next_due and next_due < attrs['date_administered']:
            raise serializers.ValidationError(
                {'nextDueDate': 'Next due date cannot be before the administration date.'}
            )
        return attrs


class DiseaseCaseCreateSerializer(serializers.Serializer):
    animalId = serializers.UUIDField()
    diseaseName = serializers.CharField(source='disease_name', max_length=200)
    diseaseType = serializers.ChoiceField(source='disease_type', choices=DiseaseCase.DiseaseType.choices)
    symptoms = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    severity = serializers.ChoiceField(choices=DiseaseCase.Severity.choices)
    diagnosisDate = serializers.DateField(source='diagnosis_date')
    diagnosisMethod = serializers.CharField(
        source='diagnosis_method', max_length=200, required=False, allow_blank=True
    )
    treatmentProvided = serializers.CharField(
        source='treatment_provided', required=False, allow_blank=True
    )
    outcome = serializers.ChoiceField(
        choices=DiseaseCase.Outcome.choices, required=False, allow_blank=True
    )
    isOutbreak = serializers.BooleanField(source='is_outbreak', required=False)
    affectedAnimalsCount = serializers.IntegerField(
        source='affected_animals_count', min_value=1, required=False
    )
    notes = serializers.CharField(required=False, allow_blank=True)


class DiseaseCaseUpdateSerializer(serializers.Serializer):
    """Editable case fields. Location snapshot and animal link are not among them."""
    outcome = serializers.CharField(max_length=30, required=False)
    treatmentProvided = serializers.CharField(
        source='treatment_provided', required=False, allow_blank=True
    )
    notes = serializers.CharField(required=False, allow_blank=True)
    isOutbreak = serializers.BooleanField(source='is_outbreak', required=False)
    affectedAnimalsCount = serializers.IntegerField(
        source='affected_animals_count', min_value=1, required=False
    )
    symptoms = serializers.ListField(child=serializers.CharField(), required=False)
    diagnosisMethod = serializers.CharField(
        source='diagnosis_method', max_length=200, required=False, allow_blank=True
    )

    def validate_outcome(self, value):
        return value.strip()


# =============================================================================
# OUTPUT
# =============================================================================

def _iso(value):
    return value.isoformat() if value else None


def _phone(value):
    return str(value) if value else ''


def _user_summary(user):
    if user is None:
        return None
    return {
        'name': user.get_full_name(),
        'license': user.license_number or '',
    }


def serialize_vaccination(entry):
    return {
        '_id': str(entry.id),
        'vaccineName': entry.vaccine_name,
        'dateAdministered': _iso(entry.date_administered),
        'nextDueDate': _iso(entry.next_due_date),
        'administeredBy': entry.administered_by,
    }


def serialize_animal(animal, include_history=True):
    data = {
        '_id': str(animal.id),
        'animalId': animal.animal_id,
        'species': animal.species,
        'breed': animal.breed,
        'age': animal.age,
        'sex': animal.sex,
        'color': animal.color,
        'identificationMarks': animal.identification_marks,
        'owner': {
            'name': animal.owner_name,
            'contact': _phone(animal.owner_contact),
            'address': animal.owner_address,
        },
        'location': animal.location_dict(),
        'healthStatus': animal.health_status,
        'registeredBy': _user_summary(animal.registered_by),
        'registeredDate': _iso(animal.registered_date),
        'lastUpdated': _iso(animal.last_updated),
    }
    if include_history:
        data['vaccinationHistory'] = [
            serialize_vaccination(entry) for entry in animal.vaccination_history.all()
        ]
    return data


def serialize_disease_case(case):
    return {
        '_id': str(case.id),
        'reportId': case.report_id,
        'animalId': str(case.animal_id) if case.animal_id else None,
        'animalTag': case.animal.animal_id if case.animal_id else None,
        'diseaseName': case.disease_name,
        'diseaseType': case.disease_type,
        'symptoms': list(case.symptoms or []),
        'severity': case.severity,
        'diagnosisDate': _iso(case.diagnosis_date),
        'diagnosisMethod': case.diagnosis_method,
        'treatmentProvided': case.treatment_provided,
        'outcome': case.outcome,
        'location': case.location_dict(),
        'isOutbreak': case.is_outbreak,
        'affectedAnimalsCount': case.affected_animals_count,
        'notes': case.notes,
        'reportedBy': _user_summary(case.reported_by),
        'reportedDate': _iso(case.reported_date),
        'updatedAt': _iso(case.updated_at),
    }
