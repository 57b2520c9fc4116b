from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from portfolio_gateway.limiter import limiter, rate_limit

router = APIRouter(tags=["health"])


@router.get("/_health", response_class=PlainTextResponse)
@limiter.limit(rate_limit)
async def health(request: Request):
    return "OK"
