import pytest

from dtos.request import (
    AttendeeDto,
    ConferenceDto,
    SessionDto,
    SpeakerDto,
    TagDto,
    TrackDto,
    validate_request,
)
from dtos.response import (
    AttendeeResponse,
    ConferenceResponse,
    SessionResponse,
    SpeakerResponse,
    TrackResponse,
)
from exceptions import ApplicationError, ValidationError


def test_track_name_at_limit_is_accepted():
    track = validate_request(TrackDto, {"track_id": 5, "conference_id": 2, "name": "D" * 200})

    assert track.track_id == 5
    assert track.conference_id == 2
    assert len(track.name) == 200


def test_track_name_over_limit_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        validate_request(TrackDto, {"track_id": 5, "conference_id": 2, "name": "D" * 201})

    assert "name" in exc_info.value.invalid_fields
    assert exc_info.value.message == "Invalid TrackDto"


def test_track_requires_conference_id():
    with pytest.raises(ValidationError) as exc_info:
        validate_request(TrackDto, {"name": "Data"})

    assert list(exc_info.value.invalid_fields) == ["conference_id"]


def test_tag_name_is_bounded_at_32():
    assert validate_request(TagDto, {"name": "t" * 32}).name == "t" * 32

    with pytest.raises(ValidationError) as exc_info:
        validate_request(TagDto, {"name": "t" * 33})

    assert "name" in exc_info.value.invalid_fields


@pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": None}])
def test_conference_name_is_required(payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_request(ConferenceDto, payload)

    assert "name" in exc_info.value.invalid_fields


def test_validation_error_is_an_application_error():
    with pytest.raises(ApplicationError) as exc_info:
        validate_request(ConferenceDto, {"name": "x" * 201})

    assert exc_info.value.details == {"invalid_fields": exc_info.value.invalid_fields}


def test_session_payload_parses_times():
    session = validate_request(SessionDto, {
        "conference_id": 1,
        "title": "Intro",
        "start_time": "2026-05-01T09:00:00",
        "end_time": "2026-05-01T10:00:00",
    })

    assert session.id == 0
    assert session.start_time.hour == 9
    assert session.track_id is None


def test_session_abstract_is_bounded():
    with pytest.raises(ValidationError) as exc_info:
        validate_request(SessionDto, {"title": "Intro", "abstract": "a" * 4001})

    assert "abstract" in exc_info.value.invalid_fields


def test_speaker_web_site_is_bounded():
    with pytest.raises(ValidationError) as exc_info:
        validate_request(SpeakerDto, {"name": "Ada", "web_site": "w" * 1001})

    assert "web_site" in exc_info.value.invalid_fields


def test_attendee_reports_every_invalid_field():
    with pytest.raises(ValidationError) as exc_info:
        validate_request(AttendeeDto, {"first_name": "Ada", "email_address": "e" * 257})

    assert set(exc_info.value.invalid_fields) == {"last_name", "user_name", "email_address"}


def test_request_dto_reads_attributes():
    class Row:
        id = 3
        name = "python"

    assert validate_request(TagDto, Row()).name == "python"


def test_response_collections_default_to_empty_lists():
    conference = ConferenceResponse(id=1, name="PyCon")
    track = TrackResponse(track_id=5, conference_id=1, name="Data")
    session = SessionResponse(id=1, conference_id=1, title="Intro")
    speaker = SpeakerResponse(id=1, name="Ada")
    attendee = AttendeeResponse(id=1, first_name="Alan", last_name="Turing", user_name="alan")

    assert (conference.sessions, conference.tracks, conference.speakers) == ([], [], [])
    assert track.sessions == []
    assert track.conference is None
    assert (session.tags, session.speakers) == ([], [])
    assert speaker.sessions == []
    assert (attendee.conferences, attendee.sessions) == ([], [])


def test_response_collections_are_not_shared():
    first = SpeakerResponse(id=1, name="Ada")
    second = SpeakerResponse(id=2, name="Grace")

    first.sessions.append(SessionDto(title="Intro"))

    assert second.sessions == []


def test_responses_embed_dtos_not_entities():
    response = AttendeeResponse(
        id=1,
        first_name="Alan",
        last_name="Turing",
        user_name="alan",
        conferences=[{"id": 1, "name": "PyCon"}],
    )

    assert isinstance(response.conferences[0], ConferenceDto)
    assert not hasattr(response.conferences[0], "conference_attendees")
