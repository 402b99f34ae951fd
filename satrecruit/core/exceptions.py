"""
Error taxonomy shared by the data access layer, services and routes.

Each error knows its HTTP status; the handlers in `satrecruit.main` turn them
into `{"detail": ...}` responses. Messages on these classes are safe to show
to clients. Internal details go to the log only.
"""

from typing import Dict, Optional


class RecruitError(Exception):
    """Base class for all expected application errors."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RecruitError):
    """Bad or missing input. Carries a field -> message mapping."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        super().__init__(message)


class InvalidFile(RecruitError):
    """Uploaded file has the wrong type or is too large."""

    status_code = 400
    default_message = "Invalid file"


class NotFound(RecruitError):
    status_code = 404
    default_message = "Resource not found"


class StoreUnavailable(RecruitError):
    """Connection or query failure in the persistent store."""

    status_code = 500
    default_message = "Data store unavailable"


class AuthenticationError(RecruitError):
    status_code = 401
    default_message = "Invalid or expired token"
