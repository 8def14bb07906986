"""
Livestock API Views

Animal registry and disease case reporting. Every view resolves the
caller's scope first; records outside it are reported as forbidden.
"""

import logging

from rest_framework import status
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import ScopeDenied
from dashboards.services.scope import resolve_scope
from . import records
from .serializers import (
    AnimalCreateSerializer,
    AnimalUpdateSerializer,
    DiseaseCaseCreateSerializer,
    DiseaseCaseUpdateSerializer,
    VaccinationSerializer,
    serialize_animal,
    serialize_disease_case,
    serialize_vaccination,
)
from .services.consistency import apply_case_outcome
from .services.registration import add_vaccination, register_animal, report_disease_case

logger = logging.getLogger(__name__)


class StandardResultsSetPagination(PageNumberPagination):
    """Standard pagination for registry listings."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_paginated_response_data(self, data):
        """Return pagination metadata along with results."""
        return {
            'count': self.page.paginator.count,
            'total_pages': self.page.paginator.num_pages,
            'current_page': self.page.number,
            'page_size': self.get_page_size(self.request),
            'next': self.get_next_link(),
            'previous': self.get_previous_link(),
            'results': data,
        }


class ScopedRecordView(APIView):
    """Base view: scope resolution and scope checks on single records."""
    permission_classes = [IsAuthenticated]
    pagination_class = StandardResultsSetPagination

    def get_scope(self, request):
        return resolve_scope(request.user, request.query_params)

    def check_in_scope(self, request, record):
        scope = resolve_scope(request.user)
        if not scope.contains(record):
            raise ScopeDenied('This record is outside your assigned area.')

    def paginate(self, request, queryset, serialize):
        paginator = self.pagination_class()
        page = paginator.paginate_queryset(queryset, request, view=self)
        return Response(paginator.get_paginated_response_data([serialize(item) for item in page]))


# =============================================================================
# ANIMALS
# =============================================================================

class AnimalListCreateView(ScopedRecordView):
    """
    GET /api/animals/
    POST /api/animals/
    """

    def get(self, request):
        scope = self.get_scope(request)
        animals = records.fetch_animals(request.query_params, scope).prefetch_related('vaccination_history')
        return self.paginate(request, animals, serialize_animal)

    def post(self, request):
        serializer = AnimalCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        scope = resolve_scope(request.user)
        if not scope.contains(serializer.validated_data):
            raise ScopeDenied('Animals can only be registered inside your assigned area.')

        animal = register_animal(request.user, serializer.validated_data)
        return Response(serialize_animal(animal), status=status.HTTP_201_CREATED)


class AnimalDetailView(ScopedRecordView):
    """
    GET /api/animals/{id}/
    PATCH /api/animals/{id}/
    """

    def get(self, request, pk):
        animal = records.get_animal(pk)
        self.check_in_scope(request, animal)
        return Response(serialize_animal(animal))

    def patch(self, request, pk):
        animal = records.get_animal(pk)
        self.check_in_scope(request, animal)

        serializer = AnimalUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        if 'province' in serializer.validated_data:
            self.check_in_scope(request, serializer.validated_data)

        animal = records.update_animal(animal.pk, serializer.validated_data)
        logger.info(f"Animal {animal.animal_id} edited by {request.user.username}")
        return Response(serialize_animal(animal))


class AnimalVaccinationView(ScopedRecordView):
    """POST /api/animals/{id}/vaccinations/"""

    def post(self, request, pk):
        animal = records.get_animal(pk)
        self.check_in_scope(request, animal)

        serializer = VaccinationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        entry = add_vaccination(animal.pk, serializer.validated_data)
        return Response(serialize_vaccination(entry), status=status.HTTP_201_CREATED)


class OwnerListView(ScopedRecordView):
    """GET /api/animals/owners/ - distinct owner names in scope"""

    def get(self, request):
        scope = self.get_scope(request)
        owners = (
            records.fetch_animals(scope=scope)
            .order_by('owner_name')
            .values_list('owner_name', flat=True)
            .distinct()
        )
        return Response({'owners': list(owners)})


# =============================================================================
# DISEASE CASES
# =============================================================================

class DiseaseCaseListCreateView(ScopedRecordView):
    """
    GET /api/diseases/
    POST /api/diseases/
    """

    def get(self, request):
        scope = self.get_scope(request)
        cases = records.fetch_disease_cases(request.query_params, scope)
        return self.paginate(request, cases, serialize_disease_case)

    def post(self, request):
        serializer = DiseaseCaseCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        animal_pk = data.pop('animalId')

        animal = records.get_animal(animal_pk)
        self.check_in_scope(request, animal)

        case = report_disease_case(request.user, animal_pk, data)
        return Response(serialize_disease_case(case), status=status.HTTP_201_CREATED)


class DiseaseCaseDetailView(ScopedRecordView):
    """
    GET /api/diseases/{id}/
    PATCH /api/diseases/{id}/
    """

    def get(self, request, pk):
        case = records.get_disease_case(pk)
        self.check_in_scope(request, case)
        return Response({
            'report': serialize_disease_case(case),
            'animal': serialize_animal(case.animal) if case.animal_id else None,
        })

    def patch(self, request, pk):
        case = records.get_disease_case(pk)
        self.check_in_scope(request, case)

        serializer = DiseaseCaseUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        fields = dict(serializer.validated_data)
        outcome = fields.pop('outcome', None)
        if outcome is not None:
            case = apply_case_outcome(case.pk, outcome, **fields)
        elif fields:
            case = records.update_disease_case(case.pk, fields)

        return Response(serialize_disease_case(case))
