from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey, CheckConstraint, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from constants import FieldLimits
from database import Base


class Conference(Base):
    __tablename__ = 'conferences'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(FieldLimits.CONFERENCE_NAME), nullable=False)

    tracks = relationship("Track", back_populates="conference", order_by="Track.id")
    sessions = relationship("Session", back_populates="conference", order_by="Session.id")
    conference_attendees = relationship(
        "ConferenceAttendee", back_populates="conference", order_by="ConferenceAttendee.attendee_id"
    )

    __table_args__ = (
        CheckConstraint("name != ''"),
    )


class Track(Base):
    __tablename__ = 'tracks'

    id = Column(Integer, primary_key=True, autoincrement=True)
    conference_id = Column(Integer, ForeignKey('conferences.id'), nullable=False)
    name = Column(String(FieldLimits.TRACK_NAME), nullable=False)

    conference = relationship("Conference", back_populates="tracks")
    sessions = relationship("Session", back_populates="track", order_by="Session.id")

    __table_args__ = (
        Index('idx_tracks_conference', 'conference_id'),
    )


class Session(Base):
    """
    A talk slot within a conference.

    A session always belongs to a conference and may optionally be placed on
    one of that conference's tracks. Speakers, tags and attendees are linked
    through join records so each link can be loaded independently.
    """
    __tablename__ = 'sessions'

    id = Column(Integer, primary_key=True, autoincrement=True)
    conference_id = Column(Integer, ForeignKey('conferences.id'), nullable=False)
    title = Column(String(FieldLimits.SESSION_TITLE), nullable=False)
    abstract = Column(Text)
    start_time = Column(DateTime)
    end_time = Column(DateTime)
    track_id = Column(Integer, ForeignKey('tracks.id'), nullable=True)

    conference = relationship("Conference", back_populates="sessions")
    track = relationship("Track", back_populates="sessions")
    session_speakers = relationship("SessionSpeaker", back_populates="session", order_by="SessionSpeaker.speaker_id")
    session_tags = relationship("SessionTag", back_populates="session", order_by="SessionTag.tag_id")
    session_attendees = relationship("SessionAttendee", back_populates="session", order_by="SessionAttendee.attendee_id")

    __table_args__ = (
        Index('idx_sessions_conference', 'conference_id'),
        Index('idx_sessions_track', 'track_id'),
    )


class Speaker(Base):
    __tablename__ = 'speakers'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(FieldLimits.SPEAKER_NAME), nullable=False)
    bio = Column(Text)
    web_site = Column(String(FieldLimits.SPEAKER_WEB_SITE))

    session_speakers = relationship("SessionSpeaker", back_populates="speaker", order_by="SessionSpeaker.session_id")


class Attendee(Base):
    __tablename__ = 'attendees'

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(FieldLimits.ATTENDEE_NAME), nullable=False)
    last_name = Column(String(FieldLimits.ATTENDEE_NAME), nullable=False)
    user_name = Column(String(FieldLimits.ATTENDEE_NAME), nullable=False)
    email_address = Column(String(FieldLimits.ATTENDEE_EMAIL))

    session_attendees = relationship("SessionAttendee", back_populates="attendee", order_by="SessionAttendee.session_id")
    conference_attendees = relationship(
        "ConferenceAttendee", back_populates="attendee", order_by="ConferenceAttendee.conference_id"
    )

    __table_args__ = (
        UniqueConstraint('user_name', name='uq_attendee_user_name'),
    )


class Tag(Base):
    __tablename__ = 'tags'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(FieldLimits.TAG_NAME), nullable=False)

    session_tags = relationship("SessionTag", back_populates="tag", order_by="SessionTag.session_id")


# Join records (many-to-many links with their own navigation on both sides)

class SessionSpeaker(Base):
    __tablename__ = 'session_speakers'

    session_id = Column(Integer, ForeignKey('sessions.id'), primary_key=True)
    speaker_id = Column(Integer, ForeignKey('speakers.id'), primary_key=True)

    session = relationship("Session", back_populates="session_speakers")
    speaker = relationship("Speaker", back_populates="session_speakers")


class SessionTag(Base):
    __tablename__ = 'session_tags'

    session_id = Column(Integer, ForeignKey('sessions.id'), primary_key=True)
    tag_id = Column(Integer, ForeignKey('tags.id'), primary_key=True)

    session = relationship("Session", back_populates="session_tags")
    tag = relationship("Tag", back_populates="session_tags")


class SessionAttendee(Base):
    __tablename__ = 'session_attendees'

    session_id = Column(Integer, ForeignKey('sessions.id'), primary_key=True)
    attendee_id = Column(Integer, ForeignKey('attendees.id'), primary_key=True)

    session = relationship("Session", back_populates="session_attendees")
    attendee = relationship("Attendee", back_populates="session_attendees")


class ConferenceAttendee(Base):
    __tablename__ = 'conference_attendees'

    conference_id = Column(Integer, ForeignKey('conferences.id'), primary_key=True)
    attendee_id = Column(Integer, ForeignKey('attendees.id'), primary_key=True)

    conference = relationship("Conference", back_populates="conference_attendees")
    attendee = relationship("Attendee", back_populates="conference_attendees")
