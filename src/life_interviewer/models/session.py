"""Session data models."""

from pydantic import BaseModel, ConfigDict

REALTIME_MODEL = "gpt-4o-realtime-preview"
REALTIME_VOICE = "verse"
# Lowest temperature the realtime API accepts
REALTIME_TEMPERATURE = 0.6


class SessionRequest(BaseModel):
    """Sanitized interview parameters taken from the query string."""

    event: str
    vibe: str


class TurnDetection(BaseModel):
    """Server-side voice activity detection settings."""

    model_config = ConfigDict(frozen=True)

    type: str = "server_vad"
    threshold: float
    prefix_padding_ms: int
    silence_duration_ms: int
    create_response: bool = True
    # Finish speaking before listening again
    interrupt_response: bool = False


TURN_DETECTION_PRESETS: dict[str, TurnDetection] = {
    # Ignores small noises and waits for a clear pause before replying
    "patient": TurnDetection(threshold=0.75, prefix_padding_ms=400, silence_duration_ms=650),
    "responsive": TurnDetection(threshold=0.5, prefix_padding_ms=300, silence_duration_ms=200),
}


class SessionConfig(BaseModel):
    """Payload sent to the realtime session-creation endpoint."""

    model: str = REALTIME_MODEL
    voice: str = REALTIME_VOICE
    temperature: float = REALTIME_TEMPERATURE
    turn_detection: TurnDetection
    instructions: str
