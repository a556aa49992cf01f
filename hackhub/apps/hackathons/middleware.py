import logging

from hackhub.apps.hackathons.helpers import json_error
from hackhub.libs.errors import HackathonError, emit_current_exception

logger = logging.getLogger(__name__)


class ApiErrorMiddleware:
    """Turns errors raised by the JSON views into ``{"error": ...}`` bodies"""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, HackathonError):
            if exception.status_code >= 500:
                logger.error("%s %s failed: %s", request.method, request.path,
                             exception)
                emit_current_exception()
            return json_error(exception.msg, exception.status_code,
                              errors=exception.errors)

        if not request.path.startswith("/api/"):
            return None

        logger.exception("Unhandled error on %s %s", request.method,
                         request.path)
        emit_current_exception()
        return json_error("Internal server error", 500)
