"""Domain Exceptions - the closed error taxonomy shared by every layer."""

from .base import (
    KIND_POLICIES,
    AppError,
    ErrorKind,
    FieldError,
    KindPolicy,
)

__all__ = [
    "KIND_POLICIES",
    "AppError",
    "ErrorKind",
    "FieldError",
    "KindPolicy",
]
