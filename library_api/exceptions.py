"""
Domain Exceptions

Errors raised by the services when a mutation is rejected.

Every error carries a `code` and, where a single input is to blame, the
offending `field`/`value` pair. The `extensions` property is picked up by
graphql-core when it wraps the exception, so the serialized GraphQL error
looks like:

    {
        "message": "Book title must be unique",
        "path": ["addBook"],
        "extensions": {
            "code": "CONFLICT",
            "invalidArgs": {"field": "title", "value": "1984"}
        }
    }
"""

from typing import Any


class LibraryError(Exception):
    """Base class for all coded domain errors."""

    code = "BAD_REQUEST"

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value

    @property
    def extensions(self) -> dict[str, Any]:
        extensions: dict[str, Any] = {"code": self.code}
        if self.field is not None:
            extensions["invalidArgs"] = {"field": self.field, "value": self.value}
        return extensions


class ConflictError(LibraryError):
    """Raised when a title or author name is already taken."""

    code = "CONFLICT"


class InvalidReferenceError(LibraryError):
    """Raised when an author ID does not resolve to an existing author."""

    code = "INVALID_REFERENCE"


class InvalidFormatError(LibraryError):
    """Raised when an ISBN is malformed."""

    code = "INVALID_FORMAT"


class OutOfRangeError(LibraryError):
    """Raised when a publication or birth year is outside the allowed range."""

    code = "OUT_OF_RANGE"


class InvalidValueError(LibraryError):
    """Raised for non-positive page counts, short names and negative page sizes."""

    code = "INVALID_VALUE"


class NotFoundError(LibraryError):
    """Raised when an update target does not exist."""

    code = "NOT_FOUND"


class DependencyConflictError(LibraryError):
    """Raised when deleting an author who still has books."""

    code = "DEPENDENCY_CONFLICT"
