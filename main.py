"""LearnStream API - Main application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware

from app.api import feed_router, health_router
from app.auth.router import router as auth_router
from app.config import get_settings
from app.db.session import dispose_engine
from app.exceptions import LearnStreamError
from app.logging import request_context, setup_logging

logger = logging.getLogger(__name__)


class JSONContentTypeMiddleware(BaseHTTPMiddleware):
    """Middleware to pin the charset on JSON responses and add security headers."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        if response.headers.get("content-type", "").startswith("application/json"):
            response.headers["Content-Type"] = "application/json; charset=utf-8"

        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"

        # Prevent clickjacking attacks
        response.headers["X-Frame-Options"] = "DENY"

        return response


async def learnstream_error_handler(request: Request, exc: LearnStreamError):
    """Translate unhandled application errors into a JSON 500 response."""
    logger.error(
        "Unhandled application error",
        extra=request_context(request, context=exc.context),
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"success": False, "error": exc.message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    setup_logging()
    settings = get_settings()
    logger.info(f"Starting LearnStream API v{settings.app_version} (env={settings.env})")
    yield
    # Shutdown
    logger.info("Shutting down, closing database connections")
    await dispose_engine()
    logger.info("Server stopped gracefully")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="LearnStream API",
        description="Short-video learning feed backend",
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Configure rate limiting
    limiter = Limiter(key_func=get_remote_address)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(LearnStreamError, learnstream_error_handler)

    app.add_middleware(JSONContentTypeMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.frontend_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
        max_age=3600,
    )

    # Include routers
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(feed_router)

    return app


app = create_app()


def main():
    """Entry point for running the application."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.env == "dev",
        timeout_graceful_shutdown=10,
    )


if __name__ == "__main__":
    main()
