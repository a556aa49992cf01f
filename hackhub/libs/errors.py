import os
import sys
import traceback

import sentry_sdk


def emit_current_exception():
    if os.environ.get("DEBUG") in ["1", 1, True, "true"]:
        traceback.print_exc(file=sys.stdout)
    else:
        sentry_sdk.capture_exception()


class HackathonError(Exception):
    """Base class for errors that map onto an API response."""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None, errors=None):
        super(HackathonError, self).__init__()
        self.msg = message if message is not None else self.default_message
        self.errors = errors

    def __str__(self):
        return self.msg


class Unauthenticated(HackathonError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(HackathonError):
    status_code = 403
    default_message = "Access denied"


class NotFound(HackathonError):
    status_code = 404
    default_message = "Not found"


class ValidationFailed(HackathonError):
    status_code = 400
    default_message = "Validation failed"


class UnexpectedError(HackathonError):
    pass


class MeetLinkError(Exception):
    pass
