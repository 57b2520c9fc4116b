"""
Per-client request limiting for the public endpoints.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from portfolio_gateway.config import Settings, settings as default_settings

limiter = Limiter(key_func=get_remote_address)

_per_minute = default_settings.RATE_LIMIT_PER_MINUTE


def configure_limiter(settings: Settings) -> Limiter:
    """Apply `settings` to the shared limiter and start from empty counters."""
    global _per_minute
    _per_minute = settings.RATE_LIMIT_PER_MINUTE
    limiter.reset()
    return limiter


def rate_limit() -> str:
    return f"{_per_minute}/minute"
