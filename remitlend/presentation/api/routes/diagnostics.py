"""
Routes that fail on purpose.

Mounted only when the environment is ``test`` so the error pipeline can be
exercised end to end.
"""

import asyncio

from fastapi import APIRouter

from remitlend.domain.exceptions import AppError

diagnostics_router = APIRouter(prefix="/test/error", include_in_schema=False)


@diagnostics_router.get("/operational")
async def operational_error():
    raise AppError.bad_request("This is an operational error")


@diagnostics_router.get("/internal")
async def internal_error():
    raise AppError.internal("This is an internal error")


@diagnostics_router.get("/unexpected")
async def unexpected_error():
    raise RuntimeError("This is an unexpected error")


@diagnostics_router.get("/async")
async def async_error():
    await asyncio.sleep(0)
    raise RuntimeError("This is an async error")
