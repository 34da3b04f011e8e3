"""
Boundary validation for request DTOs.

Runs a DTO's declarative validation against an incoming payload and reports
failures as the application's ValidationError, so the error handlers can turn
them into a 400 response.
"""

import logging
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from exceptions import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)


def validate_request(dto_class: Type[T], payload: Any) -> T:
    """
    Validate a raw payload against a request DTO.

    Args:
        dto_class: DTO model to validate against (e.g. TrackDto)
        payload: Parsed request body (dict) or an object with matching attributes

    Returns:
        Validated DTO instance

    Raises:
        ValidationError: With invalid_fields mapping each field path to its message
    """
    try:
        return dto_class.model_validate(payload)
    except PydanticValidationError as e:
        invalid_fields: Dict[str, str] = {}
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "__root__"
            invalid_fields[field] = error["msg"]

        logger.warning(f"Rejected {dto_class.__name__} payload: {invalid_fields}")
        raise ValidationError(
            f"Invalid {dto_class.__name__}",
            invalid_fields=invalid_fields
        ) from e
