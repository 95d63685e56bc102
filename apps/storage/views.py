"""
Object storage API views (admin dashboard only).

POST /api/storage/upload-url/  - presigned PUT URL for a browser upload
POST /api/storage/delete/      - delete an uploaded object
"""

import logging

from rest_framework.views import APIView

from apps.core.exceptions import raise_validation_error, success_response
from apps.core.permissions import IsEditor
from apps.core.throttling import UploadUrlThrottle, BurstThrottle

from .client import get_object_storage, generate_unique_file_name
from .serializers import (
    UploadUrlRequestSerializer,
    UploadTicketSerializer,
    DeleteObjectRequestSerializer,
)

logger = logging.getLogger(__name__)


class UploadUrlView(APIView):
    """
    Issue a presigned upload URL.

    Body: {"file_name": "hero.webp", "file_type": "image/webp", "unique_name": false}
    Returns: {"success": true, "presigned_url": ..., "object_key": ..., "public_url": ...}
    """
    permission_classes = [IsEditor]
    throttle_classes = [UploadUrlThrottle]

    def post(self, request):
        serializer = UploadUrlRequestSerializer(data=request.data)
        if not serializer.is_valid():
            raise_validation_error(serializer)
        data = serializer.validated_data

        file_name = data['file_name']
        if data['unique_name']:
            file_name = generate_unique_file_name(file_name)

        ticket = get_object_storage().request_upload_url(file_name, data['file_type'])
        return success_response(UploadTicketSerializer(ticket).data)


class DeleteObjectView(APIView):
    """
    Delete an uploaded object by its public URL.

    Body: {"image_url": "https://media.example.com/images/x.webp", "include_variants": true}
    """
    permission_classes = [IsEditor]
    throttle_classes = [BurstThrottle]

    def post(self, request):
        serializer = DeleteObjectRequestSerializer(data=request.data)
        if not serializer.is_valid():
            raise_validation_error(serializer)
        data = serializer.validated_data

        storage = get_object_storage()
        if data['include_variants']:
            result = storage.delete_image(data['image_url'])
            deleted = result.deleted
        else:
            storage.delete_object(data['image_url'])
            deleted = [storage.extract_object_key(data['image_url'])]

        logger.info("User %s deleted %s", request.user.pk, ', '.join(deleted) or 'nothing')
        return success_response({'deleted': deleted}, message="Object deleted successfully")
