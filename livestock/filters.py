"""
Query filters for animal and disease case records.

Filter keys follow the API's camelCase query parameters. Values of
``all`` or blank are dropped by the record accessor before they reach
these filtersets, so every filter here is a real predicate.
"""

import django_filters
from django.db.models import Q

from .models import Animal, DiseaseCase

# Map presentation status -> stored outcome. Any other outcome presents as active.
OUTCOME_FOR_STATUS = {
    'treated': DiseaseCase.Outcome.UNDER_TREATMENT,
    'recovered': DiseaseCase.Outcome.RECOVERED,
    'deceased': DiseaseCase.Outcome.DECEASED,
}
CASE_STATUS_CHOICES = [(status, status) for status in ('active', *OUTCOME_FOR_STATUS)]


class AnimalFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(method='filter_search')
    species = django_filters.CharFilter(field_name='species', lookup_expr='iexact')
    healthStatus = django_filters.ChoiceFilter(
        field_name='health_status',
        choices=Animal.HealthStatus.choices,
    )
    province = django_filters.CharFilter(field_name='province')
    district = django_filters.CharFilter(field_name='district')
    sector = django_filters.CharFilter(field_name='sector')
    ownerName = django_filters.CharFilter(field_name='owner_name', lookup_expr='icontains')
    registeredFrom = django_filters.DateFilter(field_name='registered_date', lookup_expr='date__gte')
    registeredTo = django_filters.DateFilter(field_name='registered_date', lookup_expr='date__lte')

    class Meta:
        model = Animal
        fields = []

    def filter_search(self, queryset, name, value):
        """Tag, owner name or breed substring, case-insensitive."""
        return queryset.filter(
            Q(animal_id__icontains=value)
            | Q(owner_name__icontains=value)
            | Q(breed__icontains=value)
        )


class DiseaseCaseFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(method='filter_search')
    diseaseType = django_filters.ChoiceFilter(
        field_name='disease_type',
        choices=DiseaseCase.DiseaseType.choices,
    )
    severity = django_filters.ChoiceFilter(
        field_name='severity',
        choices=DiseaseCase.Severity.choices,
    )
    outcome = django_filters.CharFilter(field_name='outcome')
    status = django_filters.ChoiceFilter(choices=CASE_STATUS_CHOICES, method='filter_status')
    province = django_filters.CharFilter(field_name='province')
    district = django_filters.CharFilter(field_name='district')
    sector = django_filters.CharFilter(field_name='sector')
    isOutbreak = django_filters.BooleanFilter(field_name='is_outbreak')

    # Species lives on the linked animal
    species = django_filters.CharFilter(field_name='animal__species', lookup_expr='iexact')

    startDate = django_filters.DateFilter(field_name='diagnosis_date', lookup_expr='gte')
    endDate = django_filters.DateFilter(field_name='diagnosis_date', lookup_expr='lte')
    reportedFrom = django_filters.DateFilter(field_name='reported_date', lookup_expr='date__gte')
    reportedTo = django_filters.DateFilter(field_name='reported_date', lookup_expr='date__lte')

    coordinatesOnly = django_filters.BooleanFilter(method='filter_coordinates_only')

    class Meta:
        model = DiseaseCase
        fields = []

    def filter_search(self, queryset, name, value):
        """Report id, disease name or animal tag substring, case-insensitive."""
        return queryset.filter(
            Q(report_id__icontains=value)
            | Q(disease_name__icontains=value)
            | Q(animal__animal_id__icontains=value)
        )

    def filter_status(self, queryset, name, value):
        """Map presentation status, matched on the stored outcome."""
        if value == 'active':
            return queryset.exclude(outcome__in=list(OUTCOME_FOR_STATUS.values()))
        return queryset.filter(outcome=OUTCOME_FOR_STATUS[value])

    def filter_coordinates_only(self, queryset, name, value):
        if not value:
            return queryset
        return queryset.filter(latitude__isnull=False, longitude__isnull=False)
