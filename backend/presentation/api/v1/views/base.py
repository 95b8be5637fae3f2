"""
Base Views.

Common view mixins and base classes.
"""

from rest_framework import viewsets, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import AllowAny
from django_filters.rest_framework import DjangoFilterBackend

from presentation.api.pagination import CatalogPagination


class HistoryViewMixin:
    """
    Adds ``GET <detail>/history/`` backed by django-simple-history.

    Each record carries a snapshot of ``history_fields`` and the names of the
    fields that changed since the previous record, newest first.
    """

    history_fields = ()
    history_limit = 50

    @action(detail=True, methods=['get'])
    def history(self, request, pk=None):
        records = list(self.get_object().history.all()[:self.history_limit])
        data = []
        for record, previous in zip(records, records[1:] + [None]):
            changed = []
            if previous is not None:
                changed = [c.field for c in record.diff_against(previous).changes]
            data.append({
                'id': record.history_id,
                'date': record.history_date,
                'type': record.history_type,
                'snapshot': {f: getattr(record, f) for f in self.history_fields},
                'changed': changed,
            })
        return Response(data)


class BaseModelViewSet(viewsets.ModelViewSet):
    """
    Base viewset with common functionality.

    The shop API is public, like the storefront it serves.
    """
    permission_classes = [AllowAny]
    pagination_class = CatalogPagination

    filter_backends = [
        DjangoFilterBackend,
        filters.SearchFilter,
        filters.OrderingFilter,
    ]

    def get_serializer_class(self):
        """
        Return different serializers per action.

        Override `serializer_classes` dict in subclass:
        serializer_classes = {
            'list': ListSerializer,
            'retrieve': DetailSerializer,
            'default': DetailSerializer,
        }
        """
        serializer_classes = getattr(self, 'serializer_classes', {})
        if self.action in serializer_classes:
            return serializer_classes[self.action]
        if 'default' in serializer_classes:
            return serializer_classes['default']
        return super().get_serializer_class()
