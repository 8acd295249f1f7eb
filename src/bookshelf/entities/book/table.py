"""Book database table model."""

from sqlmodel import Field

from bookshelf.entities._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    ``author_id`` references ``author.id``; the database rejects books that
    point at a missing author.
    """

    __tablename__ = "book"

    title: str = Field(nullable=False)
    year_published: str = Field(nullable=False)
    genre: str = Field(default="UNKNOWN", nullable=False)
    author_id: int = Field(foreign_key="author.id", nullable=False, index=True)
