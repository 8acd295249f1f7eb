from bookshelf.core.services.crud_service import CrudService
from bookshelf.core.validation import (
    validate_author_create,
    validate_author_delete,
    validate_author_update,
)
from bookshelf.entities.author import Author, AuthorRepository


class AuthorService(CrudService[Author]):
    """CRUD operations on authors."""

    entity_name = "Author"
    repository_class = AuthorRepository

    validate_create = staticmethod(validate_author_create)
    validate_update = staticmethod(validate_author_update)
    validate_delete = staticmethod(validate_author_delete)
