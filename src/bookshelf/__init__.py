"""Bookshelf GraphQL API.

A FastAPI service exposing author and book CRUD operations over GraphQL, with
directive-based authentication and authorization.
"""

__version__ = "0.1.0"
