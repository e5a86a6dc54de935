"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from ..config import Settings
from ..services.realtime_service import SessionProxyError
from .routers import realtime

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings: Settings = app.state.settings
    logging.info(f"Life Interviewer server running on port {settings.port}")
    yield
    logging.info("Life Interviewer server shutting down...")


def create_app(settings: Settings) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Life Interviewer",
        description="Realtime voice session proxy for the life interviewer client",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # The browser client calls this server cross-origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(realtime.router, tags=["session"])

    @app.exception_handler(SessionProxyError)
    async def session_error_handler(request: Request, exc: SessionProxyError):
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"ok": True}

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Life Interviewer server is running. Try /health or /session"

    return app
