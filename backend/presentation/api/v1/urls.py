"""
API v1 URL Configuration.

All API endpoints for version 1.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views.catalog import (
    ProductViewSet,
    PartViewSet,
)
from .views.assembly import CustomProductViewSet

router = DefaultRouter()

# Catalog
router.register(r'products', ProductViewSet, basename='products')
router.register(r'parts', PartViewSet, basename='parts')

# Assembly
router.register(r'custom-products', CustomProductViewSet, basename='custom-products')

app_name = 'api_v1'

urlpatterns = [
    path('', include(router.urls)),
]
