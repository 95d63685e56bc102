"""
Contact lead service: public submissions and dashboard follow-up.
"""

import logging
from typing import Callable, List, Optional

from apps.core.exceptions import ErrorCode, NotFoundError, ValidationError

from .models import ContactSubmission
from .recaptcha import verify_recaptcha

logger = logging.getLogger(__name__)


SUBMISSION_FIELDS = ('full_name', 'email', 'phone_number', 'location', 'car_model_interest')


class ContactService:
    """
    Args:
        verifier: ``(token, remote_ip) -> bool``; defaults to Google
            reCAPTCHA siteverify.
    """

    def __init__(self, verifier: Optional[Callable] = None):
        self.verifier = verifier or verify_recaptcha

    def submit(self, data: dict, remote_ip: Optional[str] = None) -> ContactSubmission:
        values = {name: (data.get(name) or '').strip() for name in SUBMISSION_FIELDS}
        if not all(values.values()):
            raise ValidationError(
                "All fields are required",
                code=ErrorCode.MISSING_FIELD,
                details={'missing': [name for name, value in values.items() if not value]},
            )

        token = (data.get('recaptcha_token') or '').strip()
        if not token:
            raise ValidationError("reCAPTCHA verification is required", field='recaptcha_token')

        if not self.verifier(token, remote_ip):
            raise ValidationError(
                "reCAPTCHA verification failed. Please try again.",
                field='recaptcha_token',
            )

        submission = ContactSubmission.objects.create(**values)
        logger.info("New contact submission %s for %s", submission.pk, submission.car_model_interest)
        return submission

    def list(self, status: Optional[str] = None) -> List[ContactSubmission]:
        """Submissions oldest first, optionally filtered by status."""
        queryset = ContactSubmission.objects.all()
        if status:
            self._check_status(status)
            queryset = queryset.filter(status=status)
        return list(queryset.order_by('created_at', 'id'))

    def delete(self, submission_id: int) -> None:
        deleted, _ = ContactSubmission.objects.filter(pk=submission_id).delete()
        if not deleted:
            raise NotFoundError("Submission not found")
        logger.info("Deleted contact submission %s", submission_id)

    def update_status(self, submission_id: int, status: str) -> ContactSubmission:
        self._check_status(status)
        updated = ContactSubmission.objects.filter(pk=submission_id).update(status=status)
        if not updated:
            raise NotFoundError("Submission not found")
        logger.info("Contact submission %s -> %s", submission_id, status)
        return ContactSubmission.objects.get(pk=submission_id)

    @staticmethod
    def _check_status(status):
        if status not in ContactSubmission.valid_statuses():
            raise ValidationError("Invalid status value", code=ErrorCode.INVALID_VALUE, field='status')
