"""
Gemini generateContent client with retry / exponential backoff.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx
from loguru import logger

from portfolio_gateway.config import Settings
from portfolio_gateway.errors import ProviderError, RateLimited, RemoteError, TransportError

Sleep = Callable[[float], Awaitable[Any]]


def build_payload(prompt: str, system: str) -> Dict[str, Any]:
    return {"contents": [{"parts": [{"text": f"{system}\nUser: {prompt}"}]}]}


def _endpoint(settings: Settings) -> str:
    base = settings.GEMINI_BASE_URL.rstrip("/")
    return f"{base}/models/{settings.GEMINI_MODEL}:generateContent"


def _extract_text(data: Any, status_code: int) -> str:
    candidates = data.get("candidates") if isinstance(data, dict) else None
    if not candidates:
        raise ProviderError("Gemini returned empty candidates", status_code, data)
    try:
        return candidates[0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise ProviderError("Gemini candidate has no text", status_code, data) from e


async def _attempt(
    client: httpx.AsyncClient,
    settings: Settings,
    payload: Dict[str, Any],
) -> str:
    """One POST to Gemini. Raises a RemoteError subclass on any failure."""
    try:
        response = await client.post(
            _endpoint(settings),
            params={"key": settings.GEMINI_API_KEY},
            json=payload,
        )
    except httpx.TransportError as e:
        raise TransportError(f"{type(e).__name__}: {e}") from e

    status = response.status_code
    try:
        data = response.json()
    except ValueError as e:
        raise TransportError(
            f"Non-JSON response (status {status}): {response.text[:200]}",
            status_code=status,
        ) from e

    if status == 429:
        raise RateLimited("Rate limited by Gemini", status, data)
    if not response.is_success:
        raise ProviderError(f"Gemini error status {status}", status, data)

    return _extract_text(data, status)


async def call_gemini_with_retry(
    prompt: str,
    system: str,
    settings: Settings,
    max_retries: int = 3,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    sleep: Sleep = asyncio.sleep,
) -> str:
    """
    Ask Gemini for a reply, making up to `max_retries + 1` attempts.

    429s, transport failures and non-JSON bodies are retried after a backoff
    that starts at GEMINI_INITIAL_BACKOFF_MS and doubles each time. Any other
    provider error, or a success response without candidates, fails at once.
    When the budget is exhausted the last error is raised.
    """
    payload = build_payload(prompt, system)
    attempts = max_retries + 1
    delay_ms = settings.GEMINI_INITIAL_BACKOFF_MS

    async with httpx.AsyncClient(
        timeout=settings.GEMINI_TIMEOUT_SECONDS, transport=transport
    ) as client:
        for attempt in range(1, attempts + 1):
            logger.info(f"[gemini] attempt {attempt} -> calling Gemini")
            try:
                return await _attempt(client, settings, payload)
            except (TransportError, RateLimited) as e:
                logger.warning(f"[gemini] attempt {attempt} failed: {e.message}")
                if attempt == attempts:
                    raise
            except ProviderError as e:
                logger.error(f"[gemini] attempt {attempt} failed (not retrying): {e.message}")
                raise

            logger.debug(f"[gemini] backing off {delay_ms}ms before attempt {attempt + 1}")
            await sleep(delay_ms / 1000)
            delay_ms *= 2

    # Only reachable with a negative retry budget.
    raise RemoteError("Retries exhausted")
