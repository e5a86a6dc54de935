"""Realtime session endpoint."""

import logging

from fastapi import APIRouter, Depends, Query, Request

from ...config import Settings
from ...models.session import TURN_DETECTION_PRESETS, SessionConfig, SessionRequest
from ...prompts import DEFAULT_EVENT, DEFAULT_VIBE, build_instructions, clean, resolve_vibe_style
from ...services.realtime_service import RealtimeSessionService, SessionProxyError

router = APIRouter()
logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings built once at startup and attached to the app."""
    return request.app.state.settings


def get_realtime_service(settings: Settings = Depends(get_app_settings)) -> RealtimeSessionService:
    return RealtimeSessionService(
        api_key=settings.openai_api_key,
        url=settings.openai_realtime_url,
    )


def build_session_config(request: SessionRequest, settings: Settings) -> SessionConfig:
    """Assemble the outbound payload for a sanitized request."""
    instructions = build_instructions(request.event, resolve_vibe_style(request.vibe))
    return SessionConfig(
        turn_detection=TURN_DETECTION_PRESETS[settings.turn_detection_preset],
        instructions=instructions,
    )


@router.get("/session")
async def create_session(
    event: str | None = Query(default=None, description="Life event the interview is about"),
    vibe: str | None = Query(default=None, description="Interviewer persona: old_friend, documentarian or coach"),
    settings: Settings = Depends(get_app_settings),
    service: RealtimeSessionService = Depends(get_realtime_service),
):
    """
    Create an OpenAI realtime session primed with the interviewer prompt.

    Returns the upstream session JSON (including the ephemeral client secret)
    exactly as received.
    """
    session_request = SessionRequest(
        event=clean(event, DEFAULT_EVENT),
        vibe=clean(vibe, DEFAULT_VIBE),
    )
    config = build_session_config(session_request, settings)

    try:
        return await service.create_session(config)
    except SessionProxyError as e:
        logger.error(f"Error creating session: {e.message}")
        raise
