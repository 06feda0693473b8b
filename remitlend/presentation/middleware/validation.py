"""
Request validation pipeline.

Each route declares which part of the request (body, path params or query)
is checked against which schema. The check runs as a FastAPI dependency
before the handler body, and any violation is raised as a single
VALIDATION ``AppError`` carrying one ``FieldError`` per failing field.
Formatting the HTTP response is left to the error handlers.
"""

import json
from typing import Any, Awaitable, Callable, Literal, TypeVar

from fastapi import Request
from pydantic import ValidationError

from remitlend.domain.exceptions import AppError, FieldError
from remitlend.presentation.schemas import RequestSchema

ValidationSource = Literal["body", "params", "query"]

SchemaT = TypeVar("SchemaT", bound=RequestSchema)


def field_errors_from(
    exc: ValidationError,
    source: ValidationSource,
    schema: type[RequestSchema],
) -> list[FieldError]:
    """
    Convert a pydantic ValidationError into ordered FieldErrors.

    Errors keep the schema's field declaration order. A field that fails more
    than one check is reported once, with its first failure.
    """
    field_errors: list[FieldError] = []
    seen_paths: set[str] = set()

    for error in exc.errors(include_url=False):
        loc = [str(part) for part in error["loc"]]
        path = ".".join([source, *loc])
        if path in seen_paths:
            continue
        seen_paths.add(path)

        field = loc[0] if loc else ""
        message = schema.error_messages.get((field, error["type"]), error["msg"])
        field_errors.append(FieldError(path=path, message=message))

    return field_errors


def validate_data(
    data: Any,
    source: ValidationSource,
    schema: type[SchemaT],
) -> SchemaT:
    """
    Validate already-extracted request data against a schema.

    Raises:
        AppError: VALIDATION with the full list of field errors
    """
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise AppError.validation(field_errors_from(exc, source, schema)) from exc


async def _read_source(request: Request, source: ValidationSource) -> Any:
    if source == "params":
        return dict(request.path_params)
    if source == "query":
        return dict(request.query_params)

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise AppError.validation(
            [FieldError(path="body", message="Malformed JSON body")]
        ) from exc


def validate_request(
    schema: type[SchemaT],
    source: ValidationSource,
) -> Callable[[Request], Awaitable[SchemaT]]:
    """
    Build a FastAPI dependency that validates one part of the request.

    Usage:
        payload: Annotated[
            UpdateScoreRequestSchema,
            Depends(validate_body(UpdateScoreRequestSchema)),
        ]
    """

    async def dependency(request: Request) -> SchemaT:
        data = await _read_source(request, source)
        return validate_data(data, source, schema)

    dependency.__name__ = f"validate_{source}_{schema.__name__}"
    return dependency


def validate_body(schema: type[SchemaT]) -> Callable[[Request], Awaitable[SchemaT]]:
    return validate_request(schema, "body")


def validate_params(schema: type[SchemaT]) -> Callable[[Request], Awaitable[SchemaT]]:
    return validate_request(schema, "params")
