"""Author database table model."""

from sqlmodel import Field

from bookshelf.entities._base import EntityTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors."""

    __tablename__ = "author"

    name: str = Field(nullable=False)
    country: str = Field(default="UNKNOWN", nullable=False)
