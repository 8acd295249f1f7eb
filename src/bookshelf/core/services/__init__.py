from .author_service import AuthorService
from .book_service import BookService
from .crud_service import CrudService

__all__ = ["AuthorService", "BookService", "CrudService"]
