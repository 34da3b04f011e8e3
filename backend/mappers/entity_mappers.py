"""
Entity to response DTO mappers.

Each map_*_response function copies the entity's scalar fields verbatim and
flattens its join records into lists of base DTOs, preserving the order in
which the join collection iterates.

Absent vs. empty: a join collection that is loaded (even if empty) becomes a
list of the same length; a collection that was never loaded, or is None,
becomes None. The caller decides what gets loaded.
The row behind each join record is read the same way: an unloaded target is
read as None, so mapping a link whose target was not loaded raises
AttributeError instead of issuing a query.

DTOs are built with model_construct(): stored data is trusted and validation
only runs at the request boundary.
"""

from typing import Any, Callable, List, Optional, TypeVar

from sqlalchemy import inspect

from dtos.request import ConferenceDto, SessionDto, SpeakerDto, TagDto, TrackDto
from dtos.response import (
    AttendeeResponse,
    ConferenceResponse,
    SessionResponse,
    SpeakerResponse,
    TrackResponse,
)
from models import Attendee, Conference, Session, SessionAttendee, Speaker, Track
from utils.logging_utils import StructuredLogger

logger = StructuredLogger(__name__)

T = TypeVar('T')


def _loaded(entity: Any, attr: str) -> Any:
    """
    Read a relationship attribute only if it is already loaded.

    Returns None instead of lazy-loading when the attribute is unloaded.
    Objects that are not SQLAlchemy-mapped are read directly.
    """
    state = inspect(entity, raiseerr=False)
    if state is not None and attr in state.unloaded:
        logger.debug(
            f"{type(entity).__name__}.{attr} not loaded, leaving it absent",
            extra={"entity": type(entity).__name__, "relation": attr}
        )
        return None
    return getattr(entity, attr, None)


def _map_collection(entity: Any, attr: str, convert: Callable[[Any], T]) -> Optional[List[T]]:
    rows = _loaded(entity, attr)
    if rows is None:
        return None
    return [convert(row) for row in rows]


def map_session_response(session: Session) -> SessionResponse:
    """
    Project a session into a SessionResponse.

    Tags and speakers come from the session's join records. The nested track
    is always present; a session without a track gets track_id 0 and no name.
    """
    track = _loaded(session, 'track')

    return SessionResponse.model_construct(
        id=session.id,
        conference_id=session.conference_id,
        title=session.title,
        abstract=session.abstract,
        start_time=session.start_time,
        end_time=session.end_time,
        track_id=session.track_id,
        track=TrackDto.model_construct(
            track_id=session.track_id or 0,
            conference_id=session.conference_id,
            name=track.name if track is not None else None,
        ),
        tags=_map_collection(
            session, 'session_tags',
            lambda st: TagDto.model_construct(id=st.tag_id, name=_loaded(st, 'tag').name)
        ),
        speakers=_map_collection(
            session, 'session_speakers',
            lambda ss: SpeakerDto.model_construct(id=ss.speaker_id, name=_loaded(ss, 'speaker').name)
        ),
    )


def map_speaker_response(speaker: Speaker) -> SpeakerResponse:
    """Project a speaker and the sessions they present (id and title only)."""
    return SpeakerResponse.model_construct(
        id=speaker.id,
        name=speaker.name,
        bio=speaker.bio,
        web_site=speaker.web_site,
        sessions=_map_collection(
            speaker, 'session_speakers',
            lambda ss: SessionDto.model_construct(id=ss.session_id, title=_loaded(ss, 'session').title)
        ),
    )


def _agenda_entry(session_attendee: SessionAttendee) -> SessionDto:
    session = _loaded(session_attendee, 'session')
    return SessionDto.model_construct(
        id=session_attendee.session_id,
        title=session.title,
        start_time=session.start_time,
        end_time=session.end_time,
    )


def map_attendee_response(attendee: Attendee) -> AttendeeResponse:
    """
    Project an attendee with their agenda and registrations.

    Sessions carry id, title and times; conferences carry id and name.
    """
    return AttendeeResponse.model_construct(
        id=attendee.id,
        first_name=attendee.first_name,
        last_name=attendee.last_name,
        user_name=attendee.user_name,
        email_address=attendee.email_address,
        sessions=_map_collection(attendee, 'session_attendees', _agenda_entry),
        conferences=_map_collection(
            attendee, 'conference_attendees',
            lambda ca: ConferenceDto.model_construct(id=ca.conference_id, name=_loaded(ca, 'conference').name)
        ),
    )


def _session_summary(session: Session) -> SessionDto:
    return SessionDto.model_construct(
        id=session.id,
        conference_id=session.conference_id,
        title=session.title,
        start_time=session.start_time,
        end_time=session.end_time,
        track_id=session.track_id,
    )


def _track_summary(track: Track) -> TrackDto:
    return TrackDto.model_construct(
        track_id=track.id,
        conference_id=track.conference_id,
        name=track.name,
    )


def _conference_speakers(conference: Conference) -> Optional[List[SpeakerDto]]:
    """Distinct speakers of a conference's sessions, in first-appearance order."""
    sessions = _loaded(conference, 'sessions')
    if sessions is None:
        return None

    speakers: List[SpeakerDto] = []
    seen = set()
    for session in sessions:
        for ss in _loaded(session, 'session_speakers') or []:
            if ss.speaker_id in seen:
                continue
            seen.add(ss.speaker_id)
            speakers.append(SpeakerDto.model_construct(id=ss.speaker_id, name=_loaded(ss, 'speaker').name))
    return speakers


def map_conference_response(conference: Conference) -> ConferenceResponse:
    """
    Project a conference with its sessions, tracks and speakers.

    Speakers are only collected from sessions whose speaker links are
    loaded; if the sessions themselves are not loaded, speakers is None too.
    """
    return ConferenceResponse.model_construct(
        id=conference.id,
        name=conference.name,
        sessions=_map_collection(conference, 'sessions', _session_summary),
        tracks=_map_collection(conference, 'tracks', _track_summary),
        speakers=_conference_speakers(conference),
    )


def map_track_response(track: Track) -> TrackResponse:
    """Project a track with its owning conference and its sessions."""
    conference = _loaded(track, 'conference')

    return TrackResponse.model_construct(
        track_id=track.id,
        conference_id=track.conference_id,
        name=track.name,
        conference=(
            ConferenceDto.model_construct(id=conference.id, name=conference.name)
            if conference is not None else None
        ),
        sessions=_map_collection(track, 'sessions', _session_summary),
    )
