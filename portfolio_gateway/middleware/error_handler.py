"""
Error envelopes: malformed prompt bodies become a 400, and any exception
escaping a route becomes the 500 error envelope.
"""

from fastapi import Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from portfolio_gateway.models.schemas import ErrorResponse

_PROMPT_PATHS = {"/api/generate"}


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    if request.url.path not in _PROMPT_PATHS:
        return await request_validation_exception_handler(request, exc)
    logger.info(f"[server] rejected body on {request.url.path}: {exc.errors()[:1]}")
    body = ErrorResponse(error="No prompt provided")
    return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))


async def global_exception_handler(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception(f"[server] unhandled {type(exc).__name__} on {request.method} {request.url.path}")
        body = ErrorResponse(error="Server error", detail=str(exc) or type(exc).__name__)
        return JSONResponse(status_code=500, content=body.model_dump())
