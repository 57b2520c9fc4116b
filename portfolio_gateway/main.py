"""
Portfolio Gateway — FastAPI entry point.
"""

import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.exceptions import RequestValidationError
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from loguru import logger

from portfolio_gateway.config import Settings, settings as default_settings
from portfolio_gateway.limiter import configure_limiter
from portfolio_gateway.middleware.error_handler import global_exception_handler, validation_exception_handler
from portfolio_gateway.middleware.logging_middleware import logging_middleware

# ── Routes ───────────────────────────────────────────────
from portfolio_gateway.routes.generate import router as generate_router
from portfolio_gateway.routes.health import router as health_router


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    _configure_logging(settings.LOG_LEVEL)

    # ── Lifespan ─────────────────────────────────────────
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} on port {settings.PORT}")
        if not settings.gemini_configured:
            logger.warning("No Gemini key found. Set GEMINI_API_KEY in .env")
        yield
        logger.info("Shutting down")

    # ── App ──────────────────────────────────────────────
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Portfolio assistant: local knowledge base with Gemini fallback",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ── Rate Limiter ─────────────────────────────────────
    app.state.limiter = configure_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # ── Malformed bodies ─────────────────────────────────
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # ── CORS ─────────────────────────────────────────────
    if settings.CORS_ORIGINS.strip() == "*":
        origins = ["*"]
    else:
        origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Custom Middleware ────────────────────────────────
    app.middleware("http")(global_exception_handler)
    app.middleware("http")(logging_middleware)

    # ── Register Routers ─────────────────────────────────
    app.include_router(generate_router)
    app.include_router(health_router)

    # ── Static site (mounted last so API routes win) ─────
    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
        logger.info(f"Serving static files from {static_dir.resolve()}")

    return app


app = create_app()


# ── Run ──────────────────────────────────────────────────
def run() -> None:
    import uvicorn
    uvicorn.run(
        "portfolio_gateway.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG,
        log_level="info",
    )


if __name__ == "__main__":
    run()
