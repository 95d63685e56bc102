"""
Standardized error handling for the Showroom API.

Provides consistent error codes, exception classes, and response formatting.
"""

import logging
import traceback
import uuid
from enum import Enum
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_VALUE = "INVALID_VALUE"

    # Authentication/Authorization (401/403)
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    RATE_LIMITED = "RATE_LIMITED"

    # Resource errors (404/409)
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE = "DUPLICATE"

    # External service errors
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Processing errors
    PROCESSING_ERROR = "PROCESSING_ERROR"

    # Database errors
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    INTEGRITY_ERROR = "INTEGRITY_ERROR"

    # Server errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Error Response Schema
# =============================================================================

@dataclass
class ErrorDetail:
    """Detailed error information."""
    code: ErrorCode
    message: str
    field: Optional[str] = None
    details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "code": self.code.value if isinstance(self.code, ErrorCode) else self.code,
            "message": self.message,
        }
        if self.field:
            result["field"] = self.field
        if self.details:
            result["details"] = self.details
        return result


@dataclass
class ErrorResponse:
    """Standardized error response."""
    error: ErrorDetail
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": self.error.to_dict(),
            "request_id": self.request_id,
        }

    def to_response(self, status_code: int = 400) -> Response:
        return Response(self.to_dict(), status=status_code)


# =============================================================================
# Custom Exceptions
# =============================================================================

class ShowroomException(APIException):
    """Base exception for Showroom API errors."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = ErrorCode.INTERNAL_ERROR
    default_detail = "An error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[ErrorCode] = None,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message or self.default_detail
        self.error_code = code or self.error_code
        self.field = field
        self.error_details = details or {}

        if status_code:
            self.status_code = status_code

        super().__init__(detail=self.message)

    def __str__(self):
        return self.message

    def get_error_response(self, request_id: Optional[str] = None) -> ErrorResponse:
        return ErrorResponse(
            error=ErrorDetail(
                code=self.error_code,
                message=self.message,
                field=self.field,
                details=self.error_details if self.error_details else None,
            ),
            request_id=request_id or str(uuid.uuid4()),
        )


class ValidationError(ShowroomException):
    """Caller-supplied data failed a schema check."""
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = ErrorCode.VALIDATION_ERROR
    default_detail = "Validation failed"


class NotFoundError(ShowroomException):
    """Resource not found."""
    status_code = status.HTTP_404_NOT_FOUND
    error_code = ErrorCode.NOT_FOUND
    default_detail = "Resource not found"


class DuplicateError(ShowroomException):
    """Duplicate resource."""
    status_code = status.HTTP_409_CONFLICT
    error_code = ErrorCode.DUPLICATE
    default_detail = "Resource already exists"


class PermissionDeniedError(ShowroomException):
    """Permission denied."""
    status_code = status.HTTP_403_FORBIDDEN
    error_code = ErrorCode.PERMISSION_DENIED
    default_detail = "Permission denied"


class PersistenceError(ShowroomException):
    """A write that was expected to succeed affected no rows."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = ErrorCode.PERSISTENCE_ERROR
    default_detail = "Failed to save"


class ProcessingError(ShowroomException):
    """Content could not be processed (e.g. sanitization refused)."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = ErrorCode.PROCESSING_ERROR
    default_detail = "Processing failed"


class ExternalServiceError(ShowroomException):
    """Object storage, reCAPTCHA or another upstream service failed."""
    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = ErrorCode.EXTERNAL_SERVICE_ERROR
    default_detail = "External service error"


# =============================================================================
# Message helpers
# =============================================================================

def flatten_errors(errors, prefix: str = '') -> list:
    """
    Flatten a (possibly nested) DRF/Django error structure into
    ``"field: message"`` strings, in field order.
    """
    messages = []
    if isinstance(errors, dict):
        for key, value in errors.items():
            if key == 'non_field_errors':
                path = prefix
            elif isinstance(key, int) or (isinstance(key, str) and key.isdigit()):
                # ListSerializer/ListField errors keyed by item index
                path = f"{prefix}[{key}]" if prefix else str(key)
            else:
                path = f"{prefix}.{key}" if prefix else str(key)
            messages.extend(flatten_errors(value, path))
    elif isinstance(errors, (list, tuple)):
        for index, value in enumerate(errors):
            if isinstance(value, (dict, list, tuple)):
                path = f"{prefix}[{index}]" if prefix else str(index)
                messages.extend(flatten_errors(value, path))
            else:
                messages.extend(flatten_errors(value, prefix))
    elif errors not in (None, ''):
        messages.append(f"{prefix}: {errors}" if prefix else str(errors))
    return messages


def validation_message(errors) -> str:
    """Single message enumerating every violation."""
    messages = flatten_errors(errors)
    if not messages:
        return "Validation failed"
    return "; ".join(messages)


def raise_validation_error(serializer):
    """Raise our ValidationError for an invalid serializer, listing all violations."""
    raise ValidationError(
        message=validation_message(serializer.errors),
        details=serializer.errors,
    )


# =============================================================================
# Exception Handler
# =============================================================================

def get_request_id(request) -> str:
    """Get or generate request ID from request."""
    if hasattr(request, 'request_id'):
        return request.request_id
    return str(uuid.uuid4())


def showroom_exception_handler(exc, context):
    """
    Custom exception handler for the Showroom API.

    Converts all exceptions to standardized error response format.
    """
    request = context.get('request')
    request_id = get_request_id(request) if request else str(uuid.uuid4())

    # Handle our custom exceptions
    if isinstance(exc, ShowroomException):
        error_response = exc.get_error_response(request_id)
        logger.warning(
            f"API Error: {exc.error_code.value}",
            extra={
                "error_code": exc.error_code.value,
                "error_message": exc.message,
                "field": exc.field,
                "status_code": exc.status_code,
            }
        )
        return error_response.to_response(exc.status_code)

    # Handle Django validation errors
    if isinstance(exc, DjangoValidationError):
        if hasattr(exc, 'message_dict'):
            details = exc.message_dict
        else:
            details = {"errors": exc.messages}

        error_response = ErrorResponse(
            error=ErrorDetail(
                code=ErrorCode.VALIDATION_ERROR,
                message=validation_message(details),
                details=details,
            ),
            request_id=request_id,
        )
        return error_response.to_response(status.HTTP_400_BAD_REQUEST)

    # Handle 404
    if isinstance(exc, Http404):
        error_response = ErrorResponse(
            error=ErrorDetail(
                code=ErrorCode.NOT_FOUND,
                message=str(exc) if str(exc) else "Resource not found",
            ),
            request_id=request_id,
        )
        return error_response.to_response(status.HTTP_404_NOT_FOUND)

    # Unique constraint lost a race with a concurrent writer
    if isinstance(exc, IntegrityError):
        logger.warning("Integrity error: %s", exc)
        error_response = ErrorResponse(
            error=ErrorDetail(
                code=ErrorCode.INTEGRITY_ERROR,
                message="Failed to save: conflicting record",
            ),
            request_id=request_id,
        )
        return error_response.to_response(status.HTTP_409_CONFLICT)

    # Use DRF's default handler for standard exceptions
    response = drf_exception_handler(exc, context)

    if response is not None:
        # Wrap DRF response in our format
        error_code = ErrorCode.VALIDATION_ERROR
        if response.status_code == 401:
            error_code = ErrorCode.AUTHENTICATION_REQUIRED
        elif response.status_code == 403:
            error_code = ErrorCode.PERMISSION_DENIED
        elif response.status_code == 404:
            error_code = ErrorCode.NOT_FOUND
        elif response.status_code == 429:
            error_code = ErrorCode.RATE_LIMITED
        elif response.status_code >= 500:
            error_code = ErrorCode.INTERNAL_ERROR

        # Extract message from DRF response
        if isinstance(exc, DRFValidationError):
            message = validation_message(response.data)
            details = response.data if isinstance(response.data, dict) else {"errors": response.data}
        elif isinstance(response.data, dict) and 'detail' in response.data:
            message = str(response.data['detail'])
            details = None
        else:
            message = validation_message(response.data)
            details = None

        error_response = ErrorResponse(
            error=ErrorDetail(
                code=error_code,
                message=message,
                details=details,
            ),
            request_id=request_id,
        )
        return error_response.to_response(response.status_code)

    # Unhandled exception - log and return generic error
    logger.exception(
        f"Unhandled exception: {type(exc).__name__}",
        extra={
            "exception_type": type(exc).__name__,
            "exception_message": str(exc),
            "traceback": traceback.format_exc(),
        }
    )

    error_response = ErrorResponse(
        error=ErrorDetail(
            code=ErrorCode.INTERNAL_ERROR,
            message="An unexpected error occurred",
        ),
        request_id=request_id,
    )
    return error_response.to_response(status.HTTP_500_INTERNAL_SERVER_ERROR)


# =============================================================================
# Response Helpers
# =============================================================================

def success_response(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = 200,
) -> Response:
    """Create a standardized success response."""
    response_data = {'success': True}

    if data is not None:
        if isinstance(data, dict):
            response_data.update(data)
        else:
            response_data['data'] = data

    if message:
        response_data['message'] = message

    return Response(response_data, status=status_code)


def created_response(
    data: Any = None,
    message: str = "Created successfully",
) -> Response:
    """Create a 201 Created response."""
    return success_response(data=data, message=message, status_code=201)
