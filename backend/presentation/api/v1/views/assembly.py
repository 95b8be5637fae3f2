"""
Assembly Views.

API views for custom products. Writes go through the customization service,
which validates part compatibility under a per-product lock; reads use the
ORM directly.
"""

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from application.services.customization import CustomizationService
from infrastructure.notifications.publisher import CeleryEventPublisher
from infrastructure.persistence.models import CustomProduct
from infrastructure.persistence.repositories import (
    DjangoCustomProductRepository,
    DjangoPartCatalog,
)
from ..serializers.assembly import (
    CustomProductSerializer,
    CustomProductCreateSerializer,
    CustomProductUpdateSerializer,
    CustomProductPartsSerializer,
    PartReferenceSerializer,
)
from .base import BaseModelViewSet


class CustomProductViewSet(BaseModelViewSet):
    """
    ViewSet for custom products.

    Endpoints:
    - PATCH  /custom-products/{id}/parts/   replace all parts
    - POST   /custom-products/{id}/attach/  attach one part
    - POST   /custom-products/{id}/detach/  detach one part
    """

    queryset = CustomProduct.objects.prefetch_related('part_links__part')

    serializer_classes = {
        'create': CustomProductCreateSerializer,
        'update': CustomProductUpdateSerializer,
        'partial_update': CustomProductUpdateSerializer,
        'parts': CustomProductPartsSerializer,
        'attach': PartReferenceSerializer,
        'detach': PartReferenceSerializer,
        'default': CustomProductSerializer,
    }

    search_fields = ['name']
    filterset_fields = ['product_type']
    ordering_fields = ['name', 'price', 'created_at', 'updated_at']
    ordering = ['-created_at']

    def get_service(self) -> CustomizationService:
        return CustomizationService(
            catalog=DjangoPartCatalog(),
            repository=DjangoCustomProductRepository(),
            publisher=CeleryEventPublisher(),
        )

    def _input(self, request, partial=False):
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data

    def _render(self, product_id, status_code=status.HTTP_200_OK):
        instance = self.get_queryset().get(pk=product_id)
        return Response(CustomProductSerializer(instance).data, status=status_code)

    def create(self, request, *args, **kwargs):
        data = self._input(request)
        product = self.get_service().create(
            name=data['name'],
            price=data['price'],
            product_type=data['product_type'],
            part_ids=data.get('parts'),
        )
        return self._render(product.id, status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        data = self._input(request, partial=kwargs.get('partial', False))
        self.get_service().update(
            instance.id,
            name=data.get('name'),
            price=data.get('price'),
            product_type=data.get('product_type'),
        )
        return self._render(instance.id)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        self.get_service().delete(instance.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['patch'])
    def parts(self, request, pk=None):
        """Replace every part of the custom product."""
        instance = self.get_object()
        data = self._input(request)
        self.get_service().replace_parts(instance.id, data['parts'])
        return self._render(instance.id)

    @action(detail=True, methods=['post'])
    def attach(self, request, pk=None):
        """Attach one part, swapping out the part already in its category."""
        instance = self.get_object()
        data = self._input(request)
        self.get_service().attach_part(instance.id, data['part'])
        return self._render(instance.id)

    @action(detail=True, methods=['post'])
    def detach(self, request, pk=None):
        """Detach one part."""
        instance = self.get_object()
        data = self._input(request)
        self.get_service().detach_part(instance.id, data['part'])
        return self._render(instance.id)
