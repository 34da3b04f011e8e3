"""
Application-wide constants.

This module centralizes the field-length limits shared by the persistence
models and the DTO validation metadata, so both sides agree on the same bounds.
"""


class FieldLimits:
    """Maximum string lengths for persisted and exposed fields"""

    CONFERENCE_NAME = 200
    TRACK_NAME = 200
    TAG_NAME = 32

    SESSION_TITLE = 200
    SESSION_ABSTRACT = 4000

    SPEAKER_NAME = 200
    SPEAKER_BIO = 4000
    SPEAKER_WEB_SITE = 1000

    ATTENDEE_NAME = 200  # first_name, last_name and user_name
    ATTENDEE_EMAIL = 256


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
