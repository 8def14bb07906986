"""
URL configuration for core project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

# Import analytics URL patterns
from dashboards.urls import analytics_urlpatterns, map_urlpatterns

urlpatterns = [
    path('', RedirectView.as_view(url='/admin/', permanent=False)),
    path('admin/', admin.site.urls),
    path('api/analytics/', include((analytics_urlpatterns, 'analytics'))),  # Scoped dashboard + national overview
    path('api/diseases/map/', include((map_urlpatterns, 'disease_map'))),  # Geo feed (must precede disease detail routes)
    path('api/animals/', include('livestock.animal_urls')),  # Animal registry
    path('api/diseases/', include('livestock.disease_urls')),  # Disease case reports
    path('api/locations/', include('locations.urls')),  # Administrative hierarchy drill-down
]
