"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model returned by services and rendered by the API
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .author import Author, AuthorRepository, AuthorTable
from .book import Book, BookRepository, BookTable, Genre

__all__ = [
    "Author",
    "AuthorTable",
    "AuthorRepository",
    "Book",
    "BookTable",
    "BookRepository",
    "Genre",
]
