"""Response validation against declared response schemas.

A schema is a strict Pydantic model (see ``models/responses.py``). Its fields
are checked in declaration order and the first violation is reported as an
``IncompleteResponseError`` using the platform wording, e.g.::

    The response body is missing the "entities" property.
    The response body "pageCount" property is not a number.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.exceptions import IncompleteResponseError
from . import timing

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Pydantic error types -> expected type wording
_TYPE_NAMES: dict[str, str] = {
    "list_type": "an array",
    "string_type": "a string",
    "int_type": "a number",
    "int_from_float": "a number",
    "float_type": "a number",
    "bool_type": "a boolean",
    "dict_type": "an object",
    "model_type": "an object",
    "model_attributes_type": "an object",
}


def _describe_owner(owner: str, loc: tuple[int | str, ...]) -> str:
    """Build the subject of the message from the error location."""
    parts = [owner]
    for position, part in enumerate(loc):
        if isinstance(part, int):
            parts.append(f"item {part}")
        elif position == 0 and part == "body":
            parts.append("body")
        else:
            parts.append(f'"{part}" property')
    return " ".join(parts)


def describe_error(error: dict[str, Any], owner: str = "The response") -> str:
    """Render a single Pydantic error as a platform-style message.

    Args:
        error: One entry of ``ValidationError.errors()``
        owner: Subject used for the top-level object

    Returns:
        Human readable description of the violation
    """
    loc = tuple(error.get("loc", ()))
    error_type = error.get("type", "")

    if not loc:
        return f"{owner} is not an object."

    *container, field = loc
    if error_type == "missing":
        return f'{_describe_owner(owner, tuple(container))} is missing the "{field}" property.'

    expected = _TYPE_NAMES.get(error_type, "of the expected type")
    return f"{_describe_owner(owner, loc)} is not {expected}."


def validate_response(
    response: Any,
    schema: type[SchemaT],
    owner: str = "The response",
) -> SchemaT:
    """Validate a raw response against a schema.

    Args:
        response: Raw response returned by the platform API client
        schema: Response model listing the required properties
        owner: Subject used in error messages

    Returns:
        Parsed model; record payloads are kept unchanged

    Raises:
        IncompleteResponseError: On the first missing property or type mismatch
    """
    try:
        return schema.model_validate(response)
    except ValidationError as e:
        first = e.errors(include_url=False)[0]
        raise IncompleteResponseError(describe_error(first, owner)) from e


def parse_response_timestamp(value: str, owner: str, field: str) -> datetime:
    """Parse an ISO-8601 timestamp read from a response property.

    Raises:
        IncompleteResponseError: If the value is not a valid timestamp
    """
    try:
        return timing.parse_timestamp(value)
    except ValueError as e:
        raise IncompleteResponseError(
            f'{owner} "{field}" property is not a valid timestamp.'
        ) from e
