"""
Car model API views.

GET    /api/car-models/                    - List all (dashboard)
POST   /api/car-models/                    - Create (editor)
GET    /api/car-models/{id}/               - Retrieve (dashboard)
PUT    /api/car-models/{id}/               - Full update (editor)
PATCH  /api/car-models/{id}/               - Partial update (editor)
DELETE /api/car-models/{id}/               - Delete (editor)
GET    /api/car-models/search/             - Search by name/category (dashboard)
GET    /api/car-models/published/          - Published models, ?category= (public)
GET    /api/car-models/published/{id}/     - Published model (public)
"""

import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny

from apps.core.exceptions import created_response, raise_validation_error, success_response
from apps.core.permissions import IsEditor, IsViewer
from apps.core.throttling import BurstThrottle
from apps.storage.client import get_object_storage

from .serializers import (
    CarModelListSerializer,
    CarModelSearchSerializer,
    CarModelSerializer,
    CarModelWriteSerializer,
)
from .services import CarModelService

logger = logging.getLogger(__name__)


class CarModelViewSet(viewsets.ViewSet):
    """Car model CRUD backed by CarModelService."""

    throttle_classes = [BurstThrottle]
    lookup_value_regex = r'[^/.]+'

    PUBLIC_ACTIONS = ('published', 'published_detail')
    READ_ACTIONS = ('list', 'retrieve', 'search')

    def get_permissions(self):
        if self.action in self.PUBLIC_ACTIONS:
            return [AllowAny()]
        if self.action in self.READ_ACTIONS:
            return [IsViewer()]
        return [IsEditor()]

    def get_service(self):
        return CarModelService(storage=get_object_storage())

    def validated_payload(self, request, partial):
        serializer = CarModelWriteSerializer(data=request.data, partial=partial)
        if not serializer.is_valid():
            raise_validation_error(serializer)
        return dict(serializer.validated_data)

    # -------------------------------------------------------------------------
    # Dashboard
    # -------------------------------------------------------------------------

    def list(self, request):
        models = CarModelService().list_all()
        return success_response({'car_models': CarModelSerializer(models, many=True).data})

    def retrieve(self, request, pk=None):
        model = CarModelService().get(pk)
        return success_response({'car_model': CarModelSerializer(model).data})

    @action(detail=False, methods=['get'])
    def search(self, request):
        serializer = CarModelSearchSerializer(data=request.query_params)
        if not serializer.is_valid():
            raise_validation_error(serializer)
        models = CarModelService().search(**serializer.validated_data)
        return success_response({'car_models': CarModelSerializer(models, many=True).data})

    def create(self, request):
        data = self.validated_payload(request, partial=False)
        model = self.get_service().create(data)
        return created_response(
            {'model_id': model.pk, 'car_model': CarModelSerializer(model).data},
            message="Car model created successfully",
        )

    def update(self, request, pk=None):
        data = self.validated_payload(request, partial=False)
        model = self.get_service().update(pk, data)
        return success_response(
            {'model_id': model.pk, 'car_model': CarModelSerializer(model).data},
            message="Car model updated successfully",
        )

    def partial_update(self, request, pk=None):
        data = self.validated_payload(request, partial=True)
        model = self.get_service().update(pk, data)
        return success_response(
            {'model_id': model.pk, 'car_model': CarModelSerializer(model).data},
            message="Car model updated successfully",
        )

    def destroy(self, request, pk=None):
        CarModelService().delete(pk)
        logger.info("User %s deleted car model %s", request.user.pk, pk)
        return success_response(message="Car model deleted successfully")

    # -------------------------------------------------------------------------
    # Public site
    # -------------------------------------------------------------------------

    @action(detail=False, methods=['get'])
    def published(self, request):
        service = CarModelService()
        category = request.query_params.get('category')
        if category is None:
            models = service.list_published()
        else:
            models = service.list_published_by_category(category)
        return success_response({'car_models': CarModelListSerializer(models, many=True).data})

    @action(detail=False, methods=['get'], url_path=r'published/(?P<model_id>[^/.]+)')
    def published_detail(self, request, model_id=None):
        model = CarModelService().get_published(model_id)
        return success_response({'car_model': CarModelSerializer(model).data})
