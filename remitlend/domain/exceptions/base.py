"""
Application error taxonomy.

Every expected failure is raised as an ``AppError`` tagged with an
``ErrorKind``. The kind fixes the default HTTP status and whether the
failure is operational (an expected outcome such as bad input) or a defect.
Anything that is not an ``AppError`` is classified as ``UNEXPECTED`` at the
formatting boundary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class ErrorKind(str, Enum):
    """Closed set of failure categories."""
    VALIDATION = "validation"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    TOO_MANY_REQUESTS = "too_many_requests"
    INTERNAL = "internal"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class KindPolicy:
    status_code: int
    operational: bool
    default_message: str


KIND_POLICIES: dict[ErrorKind, KindPolicy] = {
    ErrorKind.VALIDATION: KindPolicy(400, True, "Validation failed"),
    ErrorKind.BAD_REQUEST: KindPolicy(400, True, "Bad request"),
    ErrorKind.UNAUTHORIZED: KindPolicy(401, True, "Unauthorized"),
    ErrorKind.FORBIDDEN: KindPolicy(403, True, "Forbidden"),
    ErrorKind.NOT_FOUND: KindPolicy(404, True, "Not found"),
    ErrorKind.CONFLICT: KindPolicy(409, True, "Conflict"),
    ErrorKind.TOO_MANY_REQUESTS: KindPolicy(
        429, True, "Too many requests, please try again later."
    ),
    ErrorKind.INTERNAL: KindPolicy(500, False, "Internal server error"),
    ErrorKind.UNEXPECTED: KindPolicy(500, False, "Internal server error"),
}


@dataclass(frozen=True)
class FieldError:
    """
    A single schema violation.

    Attributes:
        path: Dotted locator of the offending field, e.g. ``body.userId``
        message: Human-readable reason
    """
    path: str
    message: str

    def to_dict(self) -> dict:
        return {"path": self.path, "message": self.message}


class AppError(Exception):
    """
    Base exception for all expected application failures.

    Use the factory classmethods rather than instantiating directly, so the
    kind and its status stay paired.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        errors: Sequence[FieldError] = (),
    ):
        policy = KIND_POLICIES[kind]
        self.kind = kind
        self.message = message or policy.default_message
        self.status_code = policy.status_code
        self.is_operational = policy.operational
        self.errors = tuple(errors)
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"AppError(kind={self.kind.value!r}, message={self.message!r})"

    @classmethod
    def validation(cls, errors: Sequence[FieldError]) -> "AppError":
        if not errors:
            raise ValueError("a validation error needs at least one FieldError")
        return cls(ErrorKind.VALIDATION, errors=errors)

    @classmethod
    def bad_request(cls, message: str = "Bad request") -> "AppError":
        return cls(ErrorKind.BAD_REQUEST, message)

    @classmethod
    def unauthorized(cls, message: str = "Unauthorized") -> "AppError":
        return cls(ErrorKind.UNAUTHORIZED, message)

    @classmethod
    def forbidden(cls, message: str = "Forbidden") -> "AppError":
        return cls(ErrorKind.FORBIDDEN, message)

    @classmethod
    def not_found(cls, message: str = "Not found") -> "AppError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def conflict(cls, message: str = "Conflict") -> "AppError":
        return cls(ErrorKind.CONFLICT, message)

    @classmethod
    def too_many_requests(
        cls,
        message: str = "Too many requests, please try again later.",
    ) -> "AppError":
        return cls(ErrorKind.TOO_MANY_REQUESTS, message)

    @classmethod
    def internal(cls, message: str = "Internal server error") -> "AppError":
        return cls(ErrorKind.INTERNAL, message)
