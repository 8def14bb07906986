from django.urls import path

from .views import DiseaseCaseDetailView, DiseaseCaseListCreateView

app_name = 'diseases'

urlpatterns = [
    path('', DiseaseCaseListCreateView.as_view(), name='case-list'),
    path('<uuid:pk>/', DiseaseCaseDetailView.as_view(), name='case-detail'),
]
