"""Data models for the Life Interviewer proxy."""

from .session import TURN_DETECTION_PRESETS, SessionConfig, SessionRequest, TurnDetection

__all__ = [
    "SessionConfig",
    "SessionRequest",
    "TURN_DETECTION_PRESETS",
    "TurnDetection",
]
