"""
Article API views.

GET    /api/articles/                 - List (anonymous: published only)
POST   /api/articles/                 - Create (editor)
GET    /api/articles/{id}/            - Retrieve (anonymous: published only)
PUT    /api/articles/{id}/            - Full update (editor)
PATCH  /api/articles/{id}/            - Partial update (editor)
DELETE /api/articles/{id}/            - Delete (editor)
GET    /api/articles/slug/{slug}/     - Retrieve by slug (anonymous: published only)

List query parameters: page, page_size, category ('All' = any), search,
published_only.
"""

import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.core.exceptions import (
    ValidationError,
    created_response,
    raise_validation_error,
    success_response,
)
from apps.core.permissions import IsEditor
from apps.core.throttling import BurstThrottle
from apps.storage.client import get_object_storage

from .serializers import ArticleSerializer, ArticleListSerializer, ArticleWriteSerializer
from .services import ArticleService

logger = logging.getLogger(__name__)

TRUTHY = ('true', '1', 'yes')


def int_param(request, name, default=None):
    value = request.query_params.get(name)
    if value in (None, ''):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be an integer", field=name)


class ArticleViewSet(viewsets.ViewSet):
    """
    Article CRUD backed by ArticleService.

    Dashboard users (any authenticated role) see drafts; everyone else
    only ever sees published articles.
    """

    throttle_classes = [BurstThrottle]
    lookup_value_regex = r'\d+'

    PUBLIC_ACTIONS = ('list', 'retrieve', 'by_slug')

    def get_permissions(self):
        if self.action in self.PUBLIC_ACTIONS:
            return [AllowAny()]
        return [IsEditor()]

    def get_service(self):
        return ArticleService(storage=get_object_storage())

    def published_only(self, request):
        if not request.user or not request.user.is_authenticated:
            return True
        return request.query_params.get('published_only', '').lower() in TRUTHY

    def validated_payload(self, request, partial):
        serializer = ArticleWriteSerializer(data=request.data, partial=partial)
        if not serializer.is_valid():
            raise_validation_error(serializer)
        return dict(serializer.validated_data)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list(self, request):
        page = ArticleService().list(
            page=int_param(request, 'page', 1),
            page_size=int_param(request, 'page_size'),
            category=request.query_params.get('category'),
            search=request.query_params.get('search'),
            published_only=self.published_only(request),
        )
        return Response({
            'data': ArticleListSerializer(page.items, many=True).data,
            'pagination': page.pagination(),
        })

    def retrieve(self, request, pk=None):
        article = ArticleService().get_by_id(int(pk), published_only=self.published_only(request))
        return success_response({'article': ArticleSerializer(article).data})

    @action(detail=False, methods=['get'], url_path=r'slug/(?P<slug>[^/]+)')
    def by_slug(self, request, slug=None):
        article = ArticleService().get_by_slug(slug, published_only=self.published_only(request))
        return success_response({'article': ArticleSerializer(article).data})

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, request):
        data = self.validated_payload(request, partial=False)
        article = self.get_service().create(data)
        return created_response(
            {'article': ArticleSerializer(article).data},
            message="Article created successfully",
        )

    def update(self, request, pk=None):
        data = self.validated_payload(request, partial=False)
        article = self.get_service().update(int(pk), data, partial=False)
        return success_response(
            {'article': ArticleSerializer(article).data},
            message="Article updated successfully",
        )

    def partial_update(self, request, pk=None):
        data = self.validated_payload(request, partial=True)
        article = self.get_service().update(int(pk), data, partial=True)
        return success_response(
            {'article': ArticleSerializer(article).data},
            message="Article updated successfully",
        )

    def destroy(self, request, pk=None):
        ArticleService().delete(int(pk))
        logger.info("User %s deleted article %s", request.user.pk, pk)
        return success_response(message="Article deleted successfully")
