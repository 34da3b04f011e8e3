"""
Response DTOs

DTOs for outgoing API responses. Each is a single flat record: the scalar
fields of the concept plus lists of related base DTOs, never ORM entities.

Every list field starts out empty, so a freshly constructed response can be
iterated without None checks. Only the entity mappers set a list to None, when
the relation it is derived from was not loaded.
"""

from .conference_response import (
    AttendeeResponse,
    ConferenceResponse,
    SessionResponse,
    SpeakerResponse,
    TrackResponse,
)

__all__ = [
    "AttendeeResponse",
    "ConferenceResponse",
    "SessionResponse",
    "SpeakerResponse",
    "TrackResponse",
]
