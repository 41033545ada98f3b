"""Per-client rate limiting for the public API routes."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)


def api_rate_limit() -> str:
    """Limit applied to every /api/eosb route, read at request time."""
    return settings.rate_limit
