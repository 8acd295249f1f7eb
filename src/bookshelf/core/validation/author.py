from typing import Any

from bookshelf.core.errors import ErrorResponse
from bookshelf.core.validation._rules import (
    FieldRule,
    require_id,
    validate_create,
    validate_update,
)
from bookshelf.entities.author.entity import UNKNOWN_COUNTRY

AUTHOR_FIELDS = (
    FieldRule("name", "name", "Name"),
    FieldRule("country", "country", "Country", default=UNKNOWN_COUNTRY),
)


def validate_author_create(data: dict[str, Any]) -> dict[str, Any] | ErrorResponse:
    return validate_create(AUTHOR_FIELDS, data)


def validate_author_update(
    author_id: Any, data: dict[str, Any]
) -> dict[str, Any] | ErrorResponse:
    return validate_update(AUTHOR_FIELDS, author_id, data)


def validate_author_delete(author_id: Any) -> ErrorResponse | None:
    return require_id(author_id, "deletion")
