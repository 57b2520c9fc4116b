"""
Request / response logging middleware.
"""

import time
from fastapi import Request
from loguru import logger

# Liveness probes are frequent; keep them out of INFO logs.
_QUIET_PATHS = {"/_health"}


async def logging_middleware(request: Request, call_next):
    start = time.perf_counter()
    path = request.url.path
    level = "DEBUG" if path in _QUIET_PATHS else "INFO"
    client = request.client.host if request.client else "-"
    logger.log(level, f"→ {request.method} {path} ({client})")

    response = await call_next(request)

    elapsed = round((time.perf_counter() - start) * 1000, 2)
    logger.log(level, f"← {request.method} {path} [{response.status_code}] {elapsed}ms")
    return response
