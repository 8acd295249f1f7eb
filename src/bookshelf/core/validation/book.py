from typing import Any

from bookshelf.core.errors import ErrorResponse
from bookshelf.core.validation._rules import (
    FieldRule,
    require_id,
    validate_create,
    validate_update,
)
from bookshelf.entities.book.entity import Genre

BOOK_FIELDS = (
    FieldRule("title", "title", "Title"),
    FieldRule("yearPublished", "year_published", "Year Published"),
    FieldRule(
        "genre",
        "genre",
        "Genre",
        default=Genre.UNKNOWN.value,
        choices=tuple(genre.value for genre in Genre),
    ),
    FieldRule("authorId", "author_id", "Author Id", kind="integer"),
)


def validate_book_create(data: dict[str, Any]) -> dict[str, Any] | ErrorResponse:
    return validate_create(BOOK_FIELDS, data)


def validate_book_update(
    book_id: Any, data: dict[str, Any]
) -> dict[str, Any] | ErrorResponse:
    return validate_update(BOOK_FIELDS, book_id, data)


def validate_book_delete(book_id: Any) -> ErrorResponse | None:
    return require_id(book_id, "deletion")
