"""API key dependency guarding internal endpoints."""

from typing import Annotated, Optional

from fastapi import Depends, Header

from remitlend.core.dependencies import get_api_key_gate
from remitlend.core.security import API_KEY_HEADER, ApiKeyGate


async def require_api_key(
    gate: Annotated[ApiKeyGate, Depends(get_api_key_gate)],
    x_api_key: Annotated[
        Optional[str],
        Header(alias=API_KEY_HEADER, description="Internal service API key"),
    ] = None,
) -> None:
    """Reject the request unless it carries the configured internal API key."""
    gate.check(x_api_key)
