"""HTTP API for the Life Interviewer proxy."""

from .app import create_app

__all__ = ["create_app"]
