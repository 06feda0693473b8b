"""Shared-secret access control for internal, mutating endpoints."""

import hmac
from typing import Optional

import structlog

from remitlend.domain.exceptions import AppError

logger = structlog.get_logger(__name__)

API_KEY_HEADER = "x-api-key"


class ApiKeyGate:
    """
    Checks a caller-provided API key against the configured secret.

    The expected key is fixed when the gate is built, at application start.
    The gate fails closed: with no key configured every request is rejected
    as a server misconfiguration.
    """

    def __init__(self, expected_key: Optional[str]):
        self._expected_key = expected_key or None

    @property
    def configured(self) -> bool:
        return self._expected_key is not None

    def check(self, provided_key: Optional[str]) -> None:
        """
        Validate a provided key.

        Raises:
            AppError: INTERNAL when no key is configured, UNAUTHORIZED when
                the provided key is missing or does not match exactly
        """
        if self._expected_key is None:
            raise AppError.internal(
                "Server misconfiguration: INTERNAL_API_KEY is not set"
            )

        if not provided_key or not hmac.compare_digest(
            provided_key.encode("utf-8"),
            self._expected_key.encode("utf-8"),
        ):
            logger.info("api_key_rejected", key_present=bool(provided_key))
            raise AppError.unauthorized("Unauthorised: invalid or missing API key")
