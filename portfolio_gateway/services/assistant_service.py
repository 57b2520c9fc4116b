"""
Reply orchestration: local knowledge base, then Gemini, then a canned fallback.
"""

from typing import Awaitable, Callable, Optional

from loguru import logger

from portfolio_gateway.config import Settings
from portfolio_gateway.errors import InvalidInput, RemoteError
from portfolio_gateway.models.schemas import ReplyEnvelope
from portfolio_gateway.services.gemini_service import call_gemini_with_retry
from portfolio_gateway.services.knowledge_service import match_local

RemoteCall = Callable[[str, str, Settings, int], Awaitable[str]]

NO_KEY_FALLBACK = (
    "Gemini key is not configured on the server. I can still answer basic "
    "profile questions. Email: kalusahu902@gmail.com"
)

RATE_LIMIT_FALLBACK = (
    "Sorry — my language model is temporarily rate-limited. I can still answer "
    "basic questions about Kalu (skills, education, contact). "
    "Try asking: 'What are Kalu's skills?'."
)


async def generate_reply(
    prompt: str,
    system: Optional[str],
    settings: Settings,
    remote_call: RemoteCall = call_gemini_with_retry,
) -> ReplyEnvelope:
    if not prompt:
        raise InvalidInput("No prompt provided")

    # 1. Local KB first (fast, no cost, no rate limits)
    local = match_local(prompt)
    if local:
        logger.debug(f"[kb] '{prompt[:40]}' answered locally")
        return ReplyEnvelope(reply=local, source="local")

    # 2. No key: never attempt the remote call
    if not settings.gemini_configured:
        return ReplyEnvelope(reply=NO_KEY_FALLBACK, source="fallback")

    # 3. Gemini with retry/backoff
    if system is None:
        system = settings.DEFAULT_SYSTEM_PROMPT
    try:
        reply = await remote_call(prompt, system, settings, settings.GEMINI_MAX_RETRIES)
        return ReplyEnvelope(reply=reply, source="gemini")
    except RemoteError as e:
        logger.error(f"[server] Gemini final failure: {e.message} {e.detail if e.detail is not None else ''}")
        return ReplyEnvelope(reply=RATE_LIMIT_FALLBACK, source="fallback", detail=e.payload())
