"""Entity: Author."""

from pydantic import Field

from bookshelf.entities._base import Entity

UNKNOWN_COUNTRY = "UNKNOWN"


class Author(Entity):
    """A writer owning zero or more books."""

    name: str = Field(description="Name")
    country: str = Field(default=UNKNOWN_COUNTRY, description="Country")
