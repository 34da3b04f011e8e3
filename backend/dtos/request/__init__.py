"""
Request DTOs

The base shape of every conference concept. These carry the declarative
validation metadata (required fields, maximum lengths) that the API boundary
enforces through validate_request(), and are reused as the lightweight
entries nested inside response DTOs.
"""

from .conference_request import (
    AttendeeDto,
    ConferenceDto,
    SessionDto,
    SpeakerDto,
    TagDto,
    TrackDto,
)
from .validation import validate_request

__all__ = [
    "AttendeeDto",
    "ConferenceDto",
    "SessionDto",
    "SpeakerDto",
    "TagDto",
    "TrackDto",
    "validate_request",
]
