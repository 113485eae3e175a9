"""
Error taxonomy shared by the service layer and the transport boundary.

Every failure a client can see is one of the ``ErrorKind`` members; the
transport layer picks the HTTP status from ``STATUS_CODES``.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of client-visible error kinds"""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    INTERNAL = "internal"


STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}

DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.VALIDATION: "Invalid request",
    ErrorKind.UNAUTHORIZED: "Unauthorized",
    ErrorKind.FORBIDDEN: "Forbidden",
    ErrorKind.NOT_FOUND: "Resource not found",
    ErrorKind.CONFLICT: "Resource conflict",
    ErrorKind.INTERNAL: "Internal server error",
}


class ApiError(Exception):
    """Base class for errors rendered into the response envelope"""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str | None = None, kind: ErrorKind | None = None):
        if kind is not None:
            self.kind = kind
        self.message = message or DEFAULT_MESSAGES[self.kind]
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


class ValidationError(ApiError):
    """Malformed or out-of-range input"""
    kind = ErrorKind.VALIDATION


class NotFoundError(ApiError):
    """Referenced resource is absent or not published"""
    kind = ErrorKind.NOT_FOUND


class UnauthorizedError(ApiError):
    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(ApiError):
    kind = ErrorKind.FORBIDDEN


class ConflictError(ApiError):
    kind = ErrorKind.CONFLICT


class InternalError(ApiError):
    kind = ErrorKind.INTERNAL


# Order matters: the first matching hint wins.
_MESSAGE_HINTS: list[tuple[tuple[str, ...], ErrorKind]] = [
    (("not found",), ErrorKind.NOT_FOUND),
    (("unauthorized", "authentication"), ErrorKind.UNAUTHORIZED),
    (("forbidden", "permission"), ErrorKind.FORBIDDEN),
    (("validation", "invalid"), ErrorKind.VALIDATION),
    (("conflict", "duplicate"), ErrorKind.CONFLICT),
]


def to_api_error(error: Exception) -> ApiError:
    """
    Convert any exception into an ``ApiError``.

    Typed errors pass through unchanged. Anything else is classified by
    keywords in its message, which can misclassify unrelated errors (an
    "invalid literal" ``ValueError`` becomes a 400). Raise typed errors at
    new call sites instead of relying on this.
    """
    if isinstance(error, ApiError):
        return error

    message = str(error)
    lowered = message.lower()
    for hints, kind in _MESSAGE_HINTS:
        if any(hint in lowered for hint in hints):
            return ApiError(message, kind=kind)

    return InternalError(message or "An unexpected error occurred")
