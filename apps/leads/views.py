"""
Contact lead API views.

POST   /api/contact/                          - Submit the contact form (public, throttled)
GET    /api/contact/submissions/              - List submissions, ?status= (dashboard)
PATCH  /api/contact/submissions/{id}/status/  - Update follow-up status (editor)
DELETE /api/contact/submissions/{id}/         - Delete a submission (admin)
"""

import logging

from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from apps.core.exceptions import created_response, raise_validation_error, success_response
from apps.core.permissions import IsAdmin, IsEditor, IsViewer
from apps.core.throttling import BurstThrottle, ContactSubmissionThrottle

from .serializers import ContactFormSerializer, ContactSubmissionSerializer, StatusUpdateSerializer
from .services import ContactService

logger = logging.getLogger(__name__)


class ContactSubmitView(APIView):
    """Public contact form endpoint."""

    permission_classes = [AllowAny]
    throttle_classes = [ContactSubmissionThrottle]

    def post(self, request):
        serializer = ContactFormSerializer(data=request.data)
        if not serializer.is_valid():
            raise_validation_error(serializer)

        ContactService().submit(serializer.validated_data, remote_ip=request.META.get('REMOTE_ADDR'))
        return created_response(message="Form submitted successfully")


class SubmissionListView(APIView):
    permission_classes = [IsViewer]
    throttle_classes = [BurstThrottle]

    def get(self, request):
        submissions = ContactService().list(status=request.query_params.get('status'))
        return success_response({
            'submissions': ContactSubmissionSerializer(submissions, many=True).data,
        })


class SubmissionStatusView(APIView):
    permission_classes = [IsEditor]
    throttle_classes = [BurstThrottle]

    def patch(self, request, pk):
        serializer = StatusUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            raise_validation_error(serializer)

        submission = ContactService().update_status(pk, serializer.validated_data['status'])
        return success_response(
            {'submission': ContactSubmissionSerializer(submission).data},
            message="Status updated successfully",
        )


class SubmissionDetailView(APIView):
    permission_classes = [IsAdmin]
    throttle_classes = [BurstThrottle]

    def delete(self, request, pk):
        ContactService().delete(pk)
        logger.info("User %s deleted contact submission %s", request.user.pk, pk)
        return success_response(message="Submission deleted successfully")
