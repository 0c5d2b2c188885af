"""Application error taxonomy.

Services raise these; the API layer turns them into HTTP responses with
``to_http_exception``. Messages are user facing and never carry store or
stack details.
"""

from fastapi import HTTPException, status


class ProfGuiError(Exception):
    """Base class for all request-terminating errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ProfGuiError):
    """Malformed or incomplete input; carries the first violated rule."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ProfGuiError):
    """An account already exists for the submitted phone number."""

    status_code = status.HTTP_409_CONFLICT


class AuthError(ProfGuiError):
    """Unknown phone number or wrong password."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ProfGuiError):
    """The caller is known but not allowed to proceed.

    ``reason`` is a short machine-readable tag such as ``"pending"`` or
    ``"rejected"`` for login gating, or ``"admin_only"``.
    """

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, reason: str, message: str):
        self.reason = reason
        super().__init__(message)


class NotFoundError(ProfGuiError):
    """The targeted identity or profile does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


def to_http_exception(exc: ProfGuiError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)
