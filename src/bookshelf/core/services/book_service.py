from bookshelf.core.services.crud_service import CrudService
from bookshelf.core.validation import (
    validate_book_create,
    validate_book_delete,
    validate_book_update,
)
from bookshelf.entities.book import Book, BookRepository


class BookService(CrudService[Book]):
    """CRUD operations on books."""

    entity_name = "Book"
    repository_class = BookRepository

    validate_create = staticmethod(validate_book_create)
    validate_update = staticmethod(validate_book_update)
    validate_delete = staticmethod(validate_book_delete)
