from django.urls import path

from .views import LocationHierarchyView

app_name = 'locations'

urlpatterns = [
    path('', LocationHierarchyView.as_view(), name='hierarchy'),
]
