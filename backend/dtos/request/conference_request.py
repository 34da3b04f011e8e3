"""
Conference Request DTOs

Base DTO shapes for conferences, tracks, tags, sessions, speakers and attendees.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from constants import FieldLimits


class ConferenceDto(BaseModel):
    """Request DTO for a conference."""

    id: int = Field(0, description="Conference ID")
    name: str = Field(
        min_length=1,
        max_length=FieldLimits.CONFERENCE_NAME,
        description="Conference name"
    )

    class Config:
        """Pydantic configuration."""
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "PyCon 2026"
            }
        }


class TrackDto(BaseModel):
    """
    Request DTO for a track.

    A track always belongs to exactly one conference, so conference_id is
    required even when the track itself is new (track_id 0).
    """

    track_id: int = Field(0, description="Track ID")
    conference_id: int = Field(description="Owning conference ID")
    name: str = Field(
        min_length=1,
        max_length=FieldLimits.TRACK_NAME,
        description="Track name"
    )

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class TagDto(BaseModel):
    """Request DTO for a session tag."""

    id: int = Field(0, description="Tag ID")
    name: str = Field(
        min_length=1,
        max_length=FieldLimits.TAG_NAME,
        description="Tag name"
    )

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class SessionDto(BaseModel):
    """Request DTO for a session."""

    id: int = Field(0, description="Session ID")
    conference_id: int = Field(0, description="Owning conference ID")
    title: str = Field(
        min_length=1,
        max_length=FieldLimits.SESSION_TITLE,
        description="Session title"
    )
    abstract: Optional[str] = Field(
        None,
        max_length=FieldLimits.SESSION_ABSTRACT,
        description="Session abstract"
    )
    start_time: Optional[datetime] = Field(None, description="Scheduled start")
    end_time: Optional[datetime] = Field(None, description="Scheduled end")
    track_id: Optional[int] = Field(None, description="Track the session is placed on")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class SpeakerDto(BaseModel):
    """Request DTO for a speaker."""

    id: int = Field(0, description="Speaker ID")
    name: str = Field(
        min_length=1,
        max_length=FieldLimits.SPEAKER_NAME,
        description="Speaker name"
    )
    bio: Optional[str] = Field(None, max_length=FieldLimits.SPEAKER_BIO, description="Speaker biography")
    web_site: Optional[str] = Field(None, max_length=FieldLimits.SPEAKER_WEB_SITE, description="Speaker web site")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class AttendeeDto(BaseModel):
    """Request DTO for an attendee."""

    id: int = Field(0, description="Attendee ID")
    first_name: str = Field(min_length=1, max_length=FieldLimits.ATTENDEE_NAME, description="First name")
    last_name: str = Field(min_length=1, max_length=FieldLimits.ATTENDEE_NAME, description="Last name")
    user_name: str = Field(min_length=1, max_length=FieldLimits.ATTENDEE_NAME, description="Unique user name")
    email_address: Optional[str] = Field(
        None,
        max_length=FieldLimits.ATTENDEE_EMAIL,
        description="Contact e-mail address"
    )

    class Config:
        """Pydantic configuration."""
        from_attributes = True
        json_schema_extra = {
            "example": {
                "first_name": "Ada",
                "last_name": "Lovelace",
                "user_name": "ada",
                "email_address": "ada@example.com"
            }
        }
