from django.urls import path

from .views import AnimalDetailView, AnimalListCreateView, AnimalVaccinationView, OwnerListView

app_name = 'animals'

urlpatterns = [
    path('', AnimalListCreateView.as_view(), name='animal-list'),
    path('owners/', OwnerListView.as_view(), name='owner-list'),
    path('<uuid:pk>/', AnimalDetailView.as_view(), name='animal-detail'),
    path('<uuid:pk>/vaccinations/', AnimalVaccinationView.as_view(), name='animal-vaccinations'),
]
