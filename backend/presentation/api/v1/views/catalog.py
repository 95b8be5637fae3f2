"""
Catalog Views.

API views for base products and parts.
"""

import logging

from rest_framework.decorators import action
from rest_framework.response import Response

from application.services.catalog import CatalogService
from domain.shared.events import PartCreated, PartDeleted, PartUpdated
from infrastructure.notifications.publisher import CeleryEventPublisher
from infrastructure.persistence.models import Part, Product
from infrastructure.persistence.repositories import DjangoPartCatalog, part_to_domain
from ..serializers.catalog import PartSerializer, ProductSerializer
from .base import BaseModelViewSet, HistoryViewMixin

logger = logging.getLogger(__name__)


class ProductViewSet(BaseModelViewSet):
    """
    ViewSet for base products.

    Filter by product type with ``?type=``.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    search_fields = ['name']
    filterset_fields = ['type', 'is_available']
    ordering_fields = ['name', 'price', 'created_at']
    ordering = ['name']


class PartViewSet(HistoryViewMixin, BaseModelViewSet):
    """
    ViewSet for catalog parts.

    Every change is broadcast to WebSocket subscribers once committed.
    """

    queryset = Part.objects.all()
    serializer_class = PartSerializer

    search_fields = ['category', 'value']
    filterset_fields = ['product_type', 'category', 'is_available']
    ordering_fields = ['product_type', 'category', 'value', 'price', 'quantity']
    history_fields = ('category', 'value', 'price', 'quantity', 'is_available')
    ordering = ['product_type', 'category', 'value']

    publisher_class = CeleryEventPublisher

    def get_publisher(self):
        return self.publisher_class()

    def perform_create(self, serializer):
        part = serializer.save()
        logger.info(f"Part {part.id} created: {part.product_type}/{part.category}='{part.value}'")
        self.get_publisher().publish([PartCreated(part=part_to_domain(part).to_dict())])

    def perform_update(self, serializer):
        part = serializer.save()
        logger.info(f"Part {part.id} updated")
        self.get_publisher().publish([PartUpdated(part=part_to_domain(part).to_dict())])

    def perform_destroy(self, instance):
        part_id = instance.id
        instance.delete()
        logger.info(f"Part {part_id} deleted")
        self.get_publisher().publish([PartDeleted(id=part_id)])

    @action(detail=False, methods=['get'], url_path='options')
    def part_options(self, request):
        """
        Selectable values grouped by product type and category.

        Pass ``?product_type=`` to limit the map to one type.
        """
        product_type = request.query_params.get('product_type')
        service = CatalogService(DjangoPartCatalog())
        return Response(service.part_options(product_type))
