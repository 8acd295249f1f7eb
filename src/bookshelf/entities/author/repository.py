"""Author repository."""

from bookshelf.entities._base import EntityRepository
from bookshelf.entities.author.entity import Author
from bookshelf.entities.author.table import AuthorTable


class AuthorRepository(EntityRepository[Author, AuthorTable]):
    """Data-access layer for authors."""

    entity = Author
    table = AuthorTable
    attribute_map = {
        "id": "id",
        "name": "name",
        "country": "country",
    }
