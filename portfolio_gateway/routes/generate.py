"""
Chat prompt endpoint: local KB answer, Gemini reply, or fallback.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from loguru import logger

from portfolio_gateway.config import Settings
from portfolio_gateway.dependencies import get_remote_call, get_settings
from portfolio_gateway.errors import InvalidInput
from portfolio_gateway.limiter import limiter, rate_limit
from portfolio_gateway.models.schemas import ErrorResponse, GenerateRequest, ReplyEnvelope
from portfolio_gateway.services.assistant_service import RemoteCall, generate_reply

router = APIRouter(tags=["generate"])


@router.post(
    "/api/generate",
    response_model=ReplyEnvelope,
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@limiter.limit(rate_limit)
async def generate(
    request: Request,
    req: Optional[GenerateRequest] = None,
    settings: Settings = Depends(get_settings),
    remote_call: RemoteCall = Depends(get_remote_call),
):
    req = req or GenerateRequest()
    try:
        return await generate_reply(req.prompt, req.system, settings, remote_call)
    except InvalidInput as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception as e:
        logger.exception("[server] error")
        return JSONResponse(
            status_code=500,
            content={"error": "Server error", "detail": str(e)},
        )
