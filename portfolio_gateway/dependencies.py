"""
FastAPI dependencies shared by the routers.
"""

from fastapi import Request

from portfolio_gateway.config import Settings
from portfolio_gateway.services.assistant_service import RemoteCall
from portfolio_gateway.services.gemini_service import call_gemini_with_retry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_remote_call() -> RemoteCall:
    return call_gemini_with_retry
