import sys
from datetime import datetime
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from models import (
    Base,
    Attendee,
    Conference,
    ConferenceAttendee,
    Session,
    SessionAttendee,
    SessionSpeaker,
    SessionTag,
    Speaker,
    Tag,
    Track,
)


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    engine = create_engine('sqlite:///:memory:')
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def conference_graph(db_session):
    """
    Seed one conference and return its ids.

    PyCon has two tracks. "Intro" (Data track) is presented by Ada and Grace
    and tagged python + ml; "Deep Dive" has no track and is presented by Grace.
    Alan is registered for PyCon and attends both sessions. Linus speaks nowhere.
    The identity map is cleared so nothing is loaded until a test asks for it.
    """
    conference = Conference(id=1, name="PyCon")
    data_track = Track(id=5, conference=conference, name="Data")
    web_track = Track(id=6, conference=conference, name="Web")

    ada = Speaker(id=1, name="Ada", bio="Analyst", web_site="https://ada.example")
    grace = Speaker(id=2, name="Grace", bio="Admiral", web_site=None)
    linus = Speaker(id=3, name="Linus")

    python_tag = Tag(id=1, name="python")
    ml_tag = Tag(id=2, name="ml")

    intro = Session(
        id=1,
        conference=conference,
        track=data_track,
        title="Intro",
        abstract="Getting started",
        start_time=datetime(2026, 5, 1, 9, 0),
        end_time=datetime(2026, 5, 1, 10, 0),
    )
    deep_dive = Session(
        id=2,
        conference=conference,
        title="Deep Dive",
        start_time=datetime(2026, 5, 1, 11, 0),
        end_time=datetime(2026, 5, 1, 12, 30),
    )

    alan = Attendee(id=1, first_name="Alan", last_name="Turing", user_name="alan")

    db_session.add_all([
        conference, data_track, web_track, ada, grace, linus, python_tag, ml_tag,
        intro, deep_dive, alan,
        SessionTag(session=intro, tag=python_tag),
        SessionTag(session=intro, tag=ml_tag),
        SessionSpeaker(session=intro, speaker=ada),
        SessionSpeaker(session=intro, speaker=grace),
        SessionSpeaker(session=deep_dive, speaker=grace),
        SessionAttendee(session=intro, attendee=alan),
        SessionAttendee(session=deep_dive, attendee=alan),
        ConferenceAttendee(conference=conference, attendee=alan),
    ])
    db_session.commit()
    db_session.expunge_all()

    return {
        "conference_id": 1,
        "track_id": 5,
        "empty_track_id": 6,
        "intro_id": 1,
        "deep_dive_id": 2,
        "speaker_ids": {"ada": 1, "grace": 2, "linus": 3},
        "attendee_id": 1,
    }
