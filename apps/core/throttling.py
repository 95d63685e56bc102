"""
Rate Limiting / Throttling for the Showroom API.

Custom DRF throttle classes for different endpoint types.

Usage in views:
    from apps.core.throttling import ContactSubmissionThrottle

    class ContactSubmitView(APIView):
        throttle_classes = [ContactSubmissionThrottle]

Usage in settings:
    REST_FRAMEWORK = {
        'DEFAULT_THROTTLE_RATES': {
            'contact': '5/minute',   # Public contact form
            'upload': '30/minute',   # Presigned upload URLs
            'burst': '120/minute',   # General dashboard traffic
        }
    }
"""

from django.core.exceptions import ImproperlyConfigured
from rest_framework.throttling import UserRateThrottle, AnonRateThrottle
import logging

logger = logging.getLogger(__name__)


class ContactSubmissionThrottle(AnonRateThrottle):
    """
    Throttle for the public contact form.

    Applies to:
    - POST /api/contact/

    Default: 5 requests/minute per client IP
    """
    scope = 'contact'

    def get_rate(self):
        """Get rate from settings or use default."""
        try:
            return super().get_rate()
        except ImproperlyConfigured:
            return '5/minute'

    def get_cache_key(self, request, view):
        # Keyed by IP for every caller, signed-in staff included
        return self.cache_format % {
            'scope': self.scope,
            'ident': self.get_ident(request),
        }


class UploadUrlThrottle(UserRateThrottle):
    """
    Throttle for presigned upload URL issuance.

    Applies to:
    - POST /api/storage/upload-url/

    Default: 30 requests/minute
    """
    scope = 'upload'

    def get_rate(self):
        try:
            return super().get_rate()
        except ImproperlyConfigured:
            return '30/minute'


class BurstThrottle(UserRateThrottle):
    """
    Burst throttle to prevent rapid-fire requests.

    Allows short bursts but limits sustained high rates.

    Default: 120 requests/minute
    """
    scope = 'burst'

    def get_rate(self):
        try:
            return super().get_rate()
        except ImproperlyConfigured:
            return '120/minute'
