"""
Pydantic request / response schemas for the API.
"""

from pydantic import BaseModel
from typing import Any, Literal, Optional


# ── Generate ─────────────────────────────────────────────
class GenerateRequest(BaseModel):
    prompt: str = ""
    system: Optional[str] = None


class ReplyEnvelope(BaseModel):
    reply: str
    source: Literal["local", "gemini", "fallback"]
    detail: Optional[Any] = None


# ── Errors ───────────────────────────────────────────────
class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
