"""Per-entity input validators.

Each validator normalizes a raw input dictionary into a persistence payload,
or returns an ``ErrorResponse`` describing the first offending attribute.
"""

from .author import (
    validate_author_create,
    validate_author_delete,
    validate_author_update,
)
from .book import validate_book_create, validate_book_delete, validate_book_update

__all__ = [
    "validate_author_create",
    "validate_author_update",
    "validate_author_delete",
    "validate_book_create",
    "validate_book_update",
    "validate_book_delete",
]
