"""Life Interviewer: realtime voice session proxy."""

__version__ = "0.1.0"
