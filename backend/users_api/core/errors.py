"""Error Taxonomy — closed set of application failure kinds and their HTTP mapping.

Invariants:
    - ApiErrorKind is closed: NOT_FOUND, INVALID_INPUT, INTERNAL_ERROR
    - Every kind maps to exactly one HTTP status (checked at import time)
    - to_response() always produces a single-field envelope: {"error": message}
    - NotFound and InternalError carry fixed messages; InvalidInput carries its own

Design Decisions:
    - Kind enum + status table over per-class http_status: adding a kind without
      a status fails on import instead of at request time
    - Subclasses per kind so handlers read as `raise NotFoundError()`
"""

from enum import Enum


NOT_FOUND_MESSAGE = "Data not found"
INTERNAL_ERROR_MESSAGE = "internal server error"


class ApiErrorKind(str, Enum):
    """Application failure kinds. Extend together with _STATUS_BY_KIND."""
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    INTERNAL_ERROR = "internal_error"


_STATUS_BY_KIND: dict[ApiErrorKind, int] = {
    ApiErrorKind.NOT_FOUND: 404,
    ApiErrorKind.INVALID_INPUT: 400,
    ApiErrorKind.INTERNAL_ERROR: 500,
}

_unmapped = set(ApiErrorKind) - set(_STATUS_BY_KIND)
if _unmapped:
    raise RuntimeError(
        f"ApiErrorKind members without HTTP status: {sorted(k.value for k in _unmapped)}",
    )


def status_for(kind: ApiErrorKind) -> int:
    """HTTP status for an error kind."""
    return _STATUS_BY_KIND[kind]


class ApiError(Exception):
    """Base exception for all application errors raised by handlers."""

    def __init__(self, kind: ApiErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def http_status(self) -> int:
        return status_for(self.kind)

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


class NotFoundError(ApiError):
    """Requested data does not exist."""
    def __init__(self):
        super().__init__(ApiErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)


class InvalidInputError(ApiError):
    """Client supplied input the handler rejects. Message is shown verbatim."""
    def __init__(self, message: str):
        super().__init__(ApiErrorKind.INVALID_INPUT, message)


class InternalServerError(ApiError):
    """Unclassified failure. Never carries internal details."""
    def __init__(self):
        super().__init__(ApiErrorKind.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)


def describe_error(error: ApiError) -> tuple[int, str]:
    """Map an error to (http_status, user-facing message)."""
    return status_for(error.kind), error.message
