"""Explicit request validation.

Routers call :func:`validate_person` before touching the service. Errors
come back as a mapping of field path to human readable messages, e.g.
``{"Name": ["Name is required."], "Skills[1].Level": [...]}``.
"""

from typing import Any, Iterable, Sequence

from pydantic import ValidationError

from .models.person import PersonDto
from .models.skill import LEVEL_MAX, LEVEL_MIN

ValidationErrors = dict[str, list[str]]

EMPTY_BODY_MESSAGE = "A non-empty request body is required."
INVALID_JSON_MESSAGE = "The request body is not valid JSON."

_REQUIRED_TYPES = {"missing", "string_too_short", "blank_string"}
_RANGE_TYPES = {"greater_than_equal", "less_than_equal", "greater_than", "less_than"}


def _pascal(segment: str) -> str:
    if "_" in segment:
        return "".join(part[:1].upper() + part[1:] for part in segment.split("_"))
    return segment[:1].upper() + segment[1:]


def field_path(loc: Sequence[int | str]) -> str:
    """Render a pydantic error location as ``Skills[0].Level``."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += ("." if path else "") + _pascal(segment)
    return path


def _label(loc: Sequence[int | str]) -> str:
    names = [s for s in loc if isinstance(s, str)]
    return _pascal(names[-1]) if names else ""


def error_message(error: dict[str, Any]) -> str:
    """Translate one pydantic error into the message clients see."""
    loc = error.get("loc", ())
    label = _label(loc)
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if not loc and error_type in {"model_type", "model_attributes_type", "dict_type"}:
        return EMPTY_BODY_MESSAGE
    if error_type == "json_invalid":
        return INVALID_JSON_MESSAGE
    if error_type in _REQUIRED_TYPES:
        return f"{label} is required."
    if error_type.endswith("_type") and error.get("input") is None:
        return f"{label} is required."
    if error_type == "string_too_long":
        return f"{label} cannot be longer than {ctx.get('max_length')} characters."
    if error_type in _RANGE_TYPES and label == "Level":
        return f"{label} must be between {LEVEL_MIN} and {LEVEL_MAX}."
    return f"The value is not valid for {label}."


def format_errors(
    errors: Iterable[dict[str, Any]], strip_prefix: bool = False
) -> ValidationErrors:
    """Group error messages by field path.

    With ``strip_prefix`` the leading ``body``/``path``/``query`` segment
    that FastAPI adds to request errors is dropped.
    """
    result: ValidationErrors = {}
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if strip_prefix and loc and loc[0] in {"body", "path", "query", "header"}:
            loc = loc[1:]
        if error.get("type") == "json_invalid":
            loc = ()
        error = {**error, "loc": loc}
        messages = result.setdefault(field_path(loc), [])
        message = error_message(error)
        if message not in messages:
            messages.append(message)
    return result


def validate_person(payload: Any) -> tuple[PersonDto | None, ValidationErrors]:
    """Validate a raw request body as a person.

    Returns the parsed DTO and an empty mapping, or ``None`` and the errors.
    """
    if payload is None:
        return None, {"": [EMPTY_BODY_MESSAGE]}
    try:
        return PersonDto.model_validate(payload), {}
    except ValidationError as exc:
        return None, format_errors(exc.errors())
