"""Executable schema merged from the per-entity query and mutation types."""

import strawberry
from strawberry.tools import merge_types

from bookshelf.api.graphql.schemas import (
    AuthorMutation,
    AuthorQuery,
    BookMutation,
    BookQuery,
)

Query = merge_types("Query", (BookQuery, AuthorQuery))
Mutation = merge_types("Mutation", (BookMutation, AuthorMutation))

schema = strawberry.Schema(query=Query, mutation=Mutation)


def print_schema() -> str:
    """Return the SDL document, directives included."""
    return schema.as_str()
