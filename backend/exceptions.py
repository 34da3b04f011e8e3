"""
Custom exception classes for the application.

The mapping layer itself raises none of these: it trusts already-loaded
entities. They are raised at the API boundary, where incoming payloads are
validated against the DTO shapes.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, invalid_keys: list[str] | None = None):
        details = {"invalid_keys": invalid_keys} if invalid_keys else {}
        super().__init__(message, details)


class ValidationError(ApplicationError):
    """Raised when an incoming payload fails DTO validation"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        self.invalid_fields = invalid_fields or {}
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)
