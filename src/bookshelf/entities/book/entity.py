"""Entity: Book."""

from enum import StrEnum

from pydantic import Field

from bookshelf.entities._base import Entity


class Genre(StrEnum):
    ADVENTURE = "ADVENTURE"
    COMICS = "COMICS"
    FANTASY = "FANTASY"
    UNKNOWN = "UNKNOWN"


class Book(Entity):
    """A book written by a single author.

    ``year_published`` is free text; it is stored as given and never parsed.
    """

    title: str = Field(description="Title")
    year_published: str = Field(description="Year Published")
    genre: str = Field(default=Genre.UNKNOWN.value, description="Genre")
    author_id: int = Field(description="Identifier of the owning author")
