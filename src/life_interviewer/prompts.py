"""Interviewer prompt construction from caller-supplied query values."""

import re

DEFAULT_EVENT = "chosen life event"
DEFAULT_VIBE = "old_friend"

VIBE_STYLES = {
    "documentarian": "precise, calm, neutral",
    "coach": "gentle, upbeat, encouraging",
}
DEFAULT_VIBE_STYLE = "warm, familiar, lightly playful"

_DISALLOWED = re.compile(r"[^a-zA-Z0-9_ \-]")

INSTRUCTIONS_TEMPLATE = """
You are an on-topic interviewer speaking in English (US) only.
Vibe: {vibe_style}. Topic: {event}.

### Conversation rules
- Ask **one concise question** at a time, then **wait quietly**.
- **Do not infer answers**. If you don't hear a clear reply, **do not proceed**.
- If there is **no audible user response** after a few seconds, say:
  "I didn't catch that. Want me to repeat the question?" and then pause again.
- Stay tightly focused on {event}. Use at most 2 short follow-ups for any tangent, then redirect.
- Summarize names/dates/places every 2-3 turns to confirm.

### Outline to fill (don't read aloud)
{{
  "eventType": "{event}",
  "people": [{{"role":"partner","name":""}},{{"role":"officiant_or_equivalent","name":""}},{{"role":"VIP","name":""}}],
  "date":"", "venue":"", "city":"",
  "keyMoments":[{{"title":"","details":""}}],
  "quotes":[], "music_or_readings":[], "challenges_or_hiccups":[]
}}
"""


def clean(value: str | None, fallback: str) -> str:
    """Strip everything except letters, digits, underscore, space and hyphen.

    Missing or empty values are replaced by ``fallback`` before cleaning.
    """
    return _DISALLOWED.sub("", value or fallback)


def resolve_vibe_style(vibe: str) -> str:
    """Map a vibe label to the speaking style phrase used in the prompt."""
    return VIBE_STYLES.get(vibe, DEFAULT_VIBE_STYLE)


def build_instructions(event: str, vibe_style: str) -> str:
    """Build the system prompt for an interview about ``event``."""
    return INSTRUCTIONS_TEMPLATE.format(event=event, vibe_style=vibe_style)
