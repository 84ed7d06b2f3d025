"""
Field-level validation results for payment detail input.

Two entry points share one error format, a mapping from JSON field name to
the list of messages for that field:

    {"cardNumber": ["Card number must be 16 digits"],
     "cvc": ["CVC is required"]}

  - validate_payment_detail(): validate a plain mapping in-process
  - field_errors(): convert pydantic / FastAPI error lists (used by the
    RequestValidationError handler to build 400 responses)
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from app.schemas.payment_detail import (
    INVALID_MESSAGES,
    PAYMENT_DETAIL_ERROR,
    REQUIRED_MESSAGES,
    PaymentDetailInput,
)


# FastAPI prefixes error locations with where the value came from
REQUEST_LOCATIONS = ("body", "path", "query", "header", "cookie")

# Attribute name -> JSON name, for errors reported against attribute names
FIELD_ALIASES = {
    name: info.alias
    for name, info in PaymentDetailInput.model_fields.items()
    if info.alias
}


@dataclass
class ValidationResult:
    value: PaymentDetailInput | None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _field_name(loc: tuple) -> str:
    # JSON decode errors are reported at ("body", <char offset>)
    if len(loc) > 1 and loc[0] in REQUEST_LOCATIONS and isinstance(loc[1], str):
        name = loc[1]
    elif loc:
        name = loc[0]
    else:
        name = "body"
    name = str(name)
    return FIELD_ALIASES.get(name, name)


def _message(field_name: str, error: Mapping[str, Any]) -> str:
    error_type = error.get("type")
    if error_type == PAYMENT_DETAIL_ERROR:
        return error["msg"]
    is_absent = error_type == "missing" or (
        "input" in error and error["input"] is None
    )
    if is_absent and field_name in REQUIRED_MESSAGES:
        return REQUIRED_MESSAGES[field_name]
    if field_name in INVALID_MESSAGES:
        return INVALID_MESSAGES[field_name]
    return error.get("msg", "Invalid value")


def field_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    """Group pydantic-style error dicts by field, with user-facing messages."""
    collected: dict[str, list[str]] = {}
    for error in errors:
        name = _field_name(tuple(error.get("loc", ())))
        message = _message(name, error)
        messages = collected.setdefault(name, [])
        if message not in messages:
            messages.append(message)
    return collected


def validate_payment_detail(data: Mapping[str, Any]) -> ValidationResult:
    """
    Validate raw payment detail input.

    Returns a ValidationResult whose `value` is the parsed input on success,
    or whose `errors` maps each failing field to its messages. Never raises
    for bad input.
    """
    try:
        value = PaymentDetailInput.model_validate(data)
    except ValidationError as exc:
        return ValidationResult(value=None, errors=field_errors(exc.errors()))
    return ValidationResult(value=value)
