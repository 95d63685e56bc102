"""
Request ID middleware and log filter.

Every request gets an ``X-Request-ID``: a well-formed UUID sent by the
caller (the public site forwards its own) is kept, anything else is
replaced. The ID is stored on ``request.request_id`` for the error
envelope, echoed in the response header and attached to every log
record emitted while the request is handled.

Dashboard writes (non-safe methods under /api/) are logged with the
acting user and response status.
"""

import logging
import threading
import time
import uuid

logger = logging.getLogger(__name__)

REQUEST_ID_META = 'HTTP_X_REQUEST_ID'
REQUEST_ID_HEADER = 'X-Request-ID'

SAFE_METHODS = ('GET', 'HEAD', 'OPTIONS')

_current = threading.local()


def current_request_id():
    """ID of the request being handled on this thread, or None."""
    return getattr(_current, 'request_id', None)


def resolve_request_id(incoming):
    """Keep a caller-supplied UUID (in canonical form); otherwise mint a new one."""
    if incoming:
        try:
            return str(uuid.UUID(incoming))
        except (ValueError, TypeError, AttributeError):
            logger.debug("Replacing malformed X-Request-ID %r", incoming)
    return str(uuid.uuid4())


class RequestIDMiddleware:

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = resolve_request_id(request.META.get(REQUEST_ID_META))
        request.request_id = request_id
        _current.request_id = request_id

        started = time.monotonic()
        try:
            response = self.get_response(request)
        finally:
            _current.request_id = None

        response[REQUEST_ID_HEADER] = request_id
        if request.path.startswith('/api/') and request.method not in SAFE_METHODS:
            self.log_write(request, response, started, request_id)
        return response

    @staticmethod
    def log_write(request, response, started, request_id):
        user = getattr(request, 'user', None)
        user_id = user.pk if user is not None and user.is_authenticated else None
        logger.info(
            "%s %s -> %s (user=%s, %.0fms)",
            request.method,
            request.path,
            response.status_code,
            user_id,
            (time.monotonic() - started) * 1000,
            extra={'request_id': request_id},
        )


class RequestIDFilter(logging.Filter):
    """Adds ``record.request_id`` (``-`` outside a request) for the log formatters."""

    def filter(self, record):
        if not getattr(record, 'request_id', None):
            record.request_id = current_request_id() or '-'
        return True
