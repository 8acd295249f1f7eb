from .context import GraphQLContext, get_graphql_context
from .schema import schema

__all__ = ["GraphQLContext", "get_graphql_context", "schema"]
