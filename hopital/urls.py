"""
URL configuration for the hospital administration backend.

The `urlpatterns` list routes URLs to views.  This module includes
the Django admin, the Prometheus exporter and the API routes provided
by the ``gestion`` app.  OpenAPI documentation is exposed at
``/swagger/`` and ``/redoc/``.
"""
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

# API metadata for Swagger/OpenAPI documentation
api_info = openapi.Info(
    title="Hospital Administration API",
    default_version='v1',
    description="Establishments, services, personnel, patients, beds and bed reservations.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path('admin/', admin.site.urls),
    # /metrics
    path('', include('django_prometheus.urls')),
    path('', include('gestion.routers')),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]
