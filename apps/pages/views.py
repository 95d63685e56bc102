"""
Site page API views.

GET  /api/pages/homepage/       - Homepage hero and sections (public)
PUT  /api/pages/homepage/       - Replace homepage and sections (editor)
GET  /api/pages/about-us/       - About us content (public)
PUT  /api/pages/about-us/       - Create (id 0) or update about us (editor)
GET  /api/pages/contact-info/   - Contact details (public)
PUT  /api/pages/contact-info/   - Create (id 0) or update contact details (editor)
GET  /api/pages/site-settings/  - Brand name and analytics IDs (public)
PUT  /api/pages/site-settings/  - Update site settings (editor)
"""

import logging

from rest_framework.permissions import SAFE_METHODS, AllowAny
from rest_framework.views import APIView

from apps.core.exceptions import created_response, raise_validation_error, success_response
from apps.core.permissions import IsEditor
from apps.core.throttling import BurstThrottle
from apps.storage.client import get_object_storage

from .serializers import (
    AboutUsSerializer,
    AboutUsWriteSerializer,
    ContactInfoSerializer,
    ContactInfoWriteSerializer,
    HomepageConfigSerializer,
    HomepageUpdateSerializer,
    SiteSettingsSerializer,
    SiteSettingsWriteSerializer,
)
from .services import AboutUsService, ContactInfoService, HomepageService, SiteSettingsService

logger = logging.getLogger(__name__)


class PageView(APIView):
    """Public reads, editor writes."""

    throttle_classes = [BurstThrottle]

    def get_permissions(self):
        if self.request.method in SAFE_METHODS:
            return [AllowAny()]
        return [IsEditor()]

    @staticmethod
    def validated(serializer_class, request):
        serializer = serializer_class(data=request.data)
        if not serializer.is_valid():
            raise_validation_error(serializer)
        return serializer.validated_data


class HomepageView(PageView):

    def get(self, request):
        config = HomepageService().get_homepage()
        data = HomepageConfigSerializer(config).data if config else None
        return success_response({'homepage': data})

    def put(self, request):
        data = self.validated(HomepageUpdateSerializer, request)
        config = HomepageService(storage=get_object_storage()).update_homepage(data)
        logger.info("User %s saved the homepage", request.user.pk)
        return success_response(
            {'homepage': HomepageConfigSerializer(config).data},
            message="Homepage updated successfully",
        )


class AboutUsView(PageView):

    def get(self, request):
        about = AboutUsService().get()
        return success_response({'about_us': AboutUsSerializer(about).data})

    def put(self, request):
        data = self.validated(AboutUsWriteSerializer, request)
        about, created = AboutUsService(storage=get_object_storage()).update(data)
        body = {'about_us': AboutUsSerializer(about).data}
        if created:
            return created_response(body, message="About us content created successfully")
        return success_response(body, message="About us content updated successfully")


class ContactInfoView(PageView):

    def get(self, request):
        info = ContactInfoService().get()
        return success_response({'contact_info': ContactInfoSerializer(info).data})

    def put(self, request):
        data = self.validated(ContactInfoWriteSerializer, request)
        info, created = ContactInfoService(storage=get_object_storage()).update(data)
        body = {'contact_info': ContactInfoSerializer(info).data}
        if created:
            return created_response(body, message="Contact information created successfully")
        return success_response(body, message="Contact information updated successfully")


class SiteSettingsView(PageView):

    def get(self, request):
        site_settings = SiteSettingsService().get()
        return success_response({'site_settings': SiteSettingsSerializer(site_settings).data})

    def put(self, request):
        data = self.validated(SiteSettingsWriteSerializer, request)
        site_settings = SiteSettingsService().update(data)
        return success_response(
            {'site_settings': SiteSettingsSerializer(site_settings).data},
            message="Site settings updated successfully.",
        )
