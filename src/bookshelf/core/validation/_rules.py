"""Field rules shared by the per-entity validators.

Validators take the raw input dictionary (keyed by API attribute names) and
return either a payload keyed by column names or an ``ErrorResponse``. Checks
run in rule order and stop at the first failure.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Literal

from bookshelf.core.errors import ErrorResponse, bad_input

_MISSING = object()
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class FieldRule:
    attr_name: str
    column: str
    label: str
    kind: Literal["string", "integer"] = "string"
    default: str | None = None
    choices: tuple[str, ...] | None = None

    def required_message(self) -> str:
        return f'{self.label} is required and should be of type "{self.kind}"'

    def type_message(self) -> str:
        return f'{self.label} should be of type "{self.kind}"'

    def choices_message(self) -> str:
        allowed = ", ".join(f"'{choice}'" for choice in self.choices or ())
        return f'{self.label} should be one of "{allowed}"'


def parse_int(value: Any) -> int | None:
    """Parse the leading integer of ``value``; ``None`` when there is none."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def _check_string(rule: FieldRule, value: Any) -> ErrorResponse | None:
    if not isinstance(value, str):
        return bad_input(rule.attr_name, rule.type_message())
    if rule.choices is not None and value not in rule.choices:
        return bad_input(rule.attr_name, rule.choices_message())
    return None


def validate_create(
    rules: tuple[FieldRule, ...], data: dict[str, Any]
) -> dict[str, Any] | ErrorResponse:
    payload: dict[str, Any] = {}
    for rule in rules:
        value = data.get(rule.attr_name, _MISSING)

        if rule.kind == "integer":
            parsed = None if value is _MISSING else parse_int(value)
            if parsed is None:
                return bad_input(rule.attr_name, rule.required_message())
            payload[rule.column] = parsed
            continue

        if rule.default is not None and (value is _MISSING or not value):
            value = rule.default
        if value is _MISSING:
            return bad_input(rule.attr_name, rule.required_message())
        error = _check_string(rule, value)
        if error is not None:
            return error
        payload[rule.column] = value
    return payload


def validate_update(
    rules: tuple[FieldRule, ...], record_id: Any, data: dict[str, Any]
) -> dict[str, Any] | ErrorResponse:
    error = require_id(record_id, "updation")
    if error is not None:
        return error

    payload: dict[str, Any] = {}
    for rule in rules:
        if rule.kind == "integer":
            # Unparsable foreign keys count as not sent
            value = data.get(rule.attr_name)
            parsed = parse_int(value) if value else None
            if parsed is not None:
                payload[rule.column] = parsed
            continue

        if rule.attr_name not in data:
            continue
        value = data[rule.attr_name]
        error = _check_string(rule, value)
        if error is not None:
            return error
        payload[rule.column] = value

    if not payload:
        return bad_input("", "No value(s) sent for updation.")
    return payload


def require_id(record_id: Any, action: str) -> ErrorResponse | None:
    if not record_id:
        return bad_input("id", f"Id is required for {action}.")
    return None
