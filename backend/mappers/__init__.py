"""
Entity mappers.

Pure functions that project fully loaded ORM entities into response DTOs.
They perform no I/O and never trigger lazy loading: a relation that was not
loaded by the caller comes out as None on the response.
"""

from .entity_mappers import (
    map_attendee_response,
    map_conference_response,
    map_session_response,
    map_speaker_response,
    map_track_response,
)

__all__ = [
    "map_attendee_response",
    "map_conference_response",
    "map_session_response",
    "map_speaker_response",
    "map_track_response",
]
