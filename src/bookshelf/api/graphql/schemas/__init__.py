from .author import AuthorMutation, AuthorQuery
from .book import BookMutation, BookQuery

__all__ = ["AuthorMutation", "AuthorQuery", "BookMutation", "BookQuery"]
