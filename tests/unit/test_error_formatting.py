"""
Unit Tests for error classification and response formatting.

These tests verify:
1. Every ErrorKind carries the right status and operational flag
2. Exceptions are classified into the right kind
3. Response bodies never leak internals outside non-production mode
"""

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from remitlend.domain.exceptions import KIND_POLICIES, AppError, ErrorKind, FieldError
from remitlend.presentation.middleware import build_error_response, classify_exception
from remitlend.presentation.middleware.error_handler import GENERIC_SERVER_MESSAGE


def raised(exc: BaseException) -> BaseException:
    """Raise and catch so the exception carries a traceback."""
    try:
        raise exc
    except BaseException as caught:
        return caught


# =============================================================================
# AppError Tests
# =============================================================================

class TestAppError:

    @pytest.mark.parametrize(
        "error,kind,status,operational",
        [
            (AppError.bad_request(), ErrorKind.BAD_REQUEST, 400, True),
            (AppError.unauthorized(), ErrorKind.UNAUTHORIZED, 401, True),
            (AppError.forbidden(), ErrorKind.FORBIDDEN, 403, True),
            (AppError.not_found(), ErrorKind.NOT_FOUND, 404, True),
            (AppError.conflict(), ErrorKind.CONFLICT, 409, True),
            (AppError.too_many_requests(), ErrorKind.TOO_MANY_REQUESTS, 429, True),
            (AppError.internal(), ErrorKind.INTERNAL, 500, False),
        ],
    )
    def test_factories_pair_kind_and_status(self, error, kind, status, operational):
        assert error.kind == kind
        assert error.status_code == status
        assert error.is_operational is operational

    def test_validation_factory_carries_errors(self):
        error = AppError.validation([FieldError("body.userId", "User ID is required")])

        assert error.kind == ErrorKind.VALIDATION
        assert error.status_code == 400
        assert error.message == "Validation failed"
        assert error.errors == (FieldError("body.userId", "User ID is required"),)

    def test_validation_factory_requires_errors(self):
        with pytest.raises(ValueError):
            AppError.validation([])

    def test_every_kind_has_a_policy(self):
        assert set(KIND_POLICIES) == set(ErrorKind)


# =============================================================================
# Classification Tests
# =============================================================================

class TestClassifyException:

    def test_app_error_keeps_its_kind(self):
        classified = classify_exception(AppError.unauthorized("nope"))

        assert classified.kind == ErrorKind.UNAUTHORIZED
        assert classified.http_status == 401
        assert classified.message == "nope"

    @pytest.mark.parametrize("status", [404, 405])
    def test_unmatched_route_is_not_found(self, status: int):
        classified = classify_exception(
            StarletteHTTPException(status_code=status),
            "DELETE",
            "/api/nowhere",
        )

        assert classified.kind == ErrorKind.NOT_FOUND
        assert classified.http_status == 404
        assert classified.message == "Cannot DELETE /api/nowhere"

    def test_rate_limit_status_is_too_many_requests(self):
        classified = classify_exception(StarletteHTTPException(status_code=429, detail="10 per 45 minutes"))

        assert classified.kind == ErrorKind.TOO_MANY_REQUESTS
        assert classified.message == "Too many requests, please try again later."

    def test_request_validation_error_is_validation(self):
        exc = RequestValidationError(
            [{"loc": ("path", "userId"), "msg": "Field required", "type": "missing"}]
        )

        classified = classify_exception(exc)

        assert classified.kind == ErrorKind.VALIDATION
        assert classified.errors == (FieldError("params.userId", "Field required"),)

    def test_unknown_exception_is_unexpected(self):
        classified = classify_exception(RuntimeError("boom"))

        assert classified.kind == ErrorKind.UNEXPECTED
        assert classified.http_status == 500
        assert classified.is_operational is False


# =============================================================================
# Response Body Tests
# =============================================================================

class TestBuildErrorResponse:

    def test_validation_body_lists_field_errors(self):
        error = AppError.validation([
            FieldError("body.userId", "User ID is required"),
            FieldError("body.onTime", "onTime must be a boolean"),
        ])

        status, body = build_error_response(error, expose_internals=False)

        assert status == 400
        assert body == {
            "success": False,
            "message": "Validation failed",
            "errors": [
                {"path": "body.userId", "message": "User ID is required"},
                {"path": "body.onTime", "message": "onTime must be a boolean"},
            ],
        }

    def test_operational_error_has_no_errors_or_stack(self):
        status, body = build_error_response(
            raised(AppError.unauthorized("Unauthorised: invalid or missing API key")),
            expose_internals=True,
        )

        assert status == 401
        assert body == {
            "success": False,
            "message": "Unauthorised: invalid or missing API key",
        }

    def test_internal_error_hidden_in_production(self):
        status, body = build_error_response(
            raised(AppError.internal("Server misconfiguration: INTERNAL_API_KEY is not set")),
            expose_internals=False,
        )

        assert status == 500
        assert body == {"success": False, "message": GENERIC_SERVER_MESSAGE}

    def test_internal_error_exposed_outside_production(self):
        status, body = build_error_response(
            raised(AppError.internal("Server misconfiguration: INTERNAL_API_KEY is not set")),
            expose_internals=True,
        )

        assert status == 500
        assert body["message"] == "Server misconfiguration: INTERNAL_API_KEY is not set"
        assert "AppError" in body["stack"]

    def test_unexpected_error_never_leaks_its_message(self):
        status, body = build_error_response(
            raised(RuntimeError("password=hunter2")),
            expose_internals=False,
        )

        assert status == 500
        assert body == {"success": False, "message": GENERIC_SERVER_MESSAGE}

    def test_unexpected_error_carries_stack_outside_production(self):
        _, body = build_error_response(
            raised(RuntimeError("boom")),
            expose_internals=True,
        )

        assert body["message"] == GENERIC_SERVER_MESSAGE
        assert "RuntimeError: boom" in body["stack"]

    def test_not_found_body(self):
        status, body = build_error_response(
            StarletteHTTPException(status_code=404),
            expose_internals=False,
            method="GET",
            path="/api/unknown",
        )

        assert status == 404
        assert body == {"success": False, "message": "Cannot GET /api/unknown"}
