"""Book repository."""

from bookshelf.entities._base import EntityRepository
from bookshelf.entities.book.entity import Book
from bookshelf.entities.book.table import BookTable


class BookRepository(EntityRepository[Book, BookTable]):
    """Data-access layer for books."""

    entity = Book
    table = BookTable
    attribute_map = {
        "id": "id",
        "title": "title",
        "yearPublished": "year_published",
        "genre": "genre",
        "author": "author_id",
        "authorId": "author_id",
    }
