"""Per-client request rate limiting backed by slowapi."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from remitlend.core.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """
    Create the limiter for one application.

    Each limiter owns its in-memory counters, so apps built in the same
    process never share quota or the enabled flag.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        storage_uri="memory://",
        strategy="fixed-window",
        enabled=settings.rate_limit_enabled,
    )
