"""
Conference Response DTOs

Flat read views over the conference entities. Related objects are embedded as
base DTOs from dtos.request, never as ORM models.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List

from dtos.request import ConferenceDto, SessionDto, SpeakerDto, TagDto, TrackDto


class ConferenceResponse(BaseModel):
    """
    Response DTO for a conference with its schedule.

    speakers lists every distinct speaker of the conference's sessions.
    """

    id: int = Field(description="Conference ID")
    name: str = Field(description="Conference name")
    sessions: Optional[List[SessionDto]] = Field(default_factory=list, description="Sessions of the conference")
    tracks: Optional[List[TrackDto]] = Field(default_factory=list, description="Tracks of the conference")
    speakers: Optional[List[SpeakerDto]] = Field(default_factory=list, description="Speakers across all sessions")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class TrackResponse(BaseModel):
    """Response DTO for a track, its conference and its sessions."""

    track_id: int = Field(description="Track ID")
    conference_id: int = Field(description="Owning conference ID")
    name: str = Field(description="Track name")
    conference: Optional[ConferenceDto] = Field(None, description="Owning conference")
    sessions: Optional[List[SessionDto]] = Field(default_factory=list, description="Sessions on this track")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class SessionResponse(BaseModel):
    """
    Response DTO for a session.

    track is always present: a session without a track reports track_id 0
    and no name.
    """

    id: int = Field(description="Session ID")
    conference_id: int = Field(description="Owning conference ID")
    title: str = Field(description="Session title")
    abstract: Optional[str] = Field(None, description="Session abstract")
    start_time: Optional[datetime] = Field(None, description="Scheduled start")
    end_time: Optional[datetime] = Field(None, description="Scheduled end")
    track_id: Optional[int] = Field(None, description="Track the session is placed on")
    track: Optional[TrackDto] = Field(None, description="Track summary")
    speakers: Optional[List[SpeakerDto]] = Field(default_factory=list, description="Speakers presenting the session")
    tags: Optional[List[TagDto]] = Field(default_factory=list, description="Tags attached to the session")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class SpeakerResponse(BaseModel):
    """Response DTO for a speaker and the sessions they present."""

    id: int = Field(description="Speaker ID")
    name: str = Field(description="Speaker name")
    bio: Optional[str] = Field(None, description="Speaker biography")
    web_site: Optional[str] = Field(None, description="Speaker web site")
    sessions: Optional[List[SessionDto]] = Field(default_factory=list, description="Sessions presented")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class AttendeeResponse(BaseModel):
    """Response DTO for an attendee with their conferences and sessions."""

    id: int = Field(description="Attendee ID")
    first_name: str = Field(description="First name")
    last_name: str = Field(description="Last name")
    user_name: str = Field(description="Unique user name")
    email_address: Optional[str] = Field(None, description="Contact e-mail address")
    conferences: Optional[List[ConferenceDto]] = Field(default_factory=list, description="Registered conferences")
    sessions: Optional[List[SessionDto]] = Field(default_factory=list, description="Sessions in the personal agenda")

    class Config:
        """Pydantic configuration."""
        from_attributes = True
