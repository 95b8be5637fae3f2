"""
URL configuration for the configurator project.

``/api/v1/`` serves the catalog and custom products, ``/api/docs/`` the
interactive schema. The WebSocket route lives in ``config.asgi``.
"""

from django.conf import settings
from django.contrib import admin
from django.urls import include, path
from django.views.generic.base import RedirectView
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

urlpatterns = [
    path('', RedirectView.as_view(pattern_name='swagger-ui', permanent=False), name='index'),
    path('admin/', admin.site.urls),
    path('api/v1/', include('presentation.api.v1.urls')),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]

if 'debug_toolbar' in settings.INSTALLED_APPS:
    urlpatterns = [path('__debug__/', include('debug_toolbar.urls'))] + urlpatterns
