from fastapi import Depends
from strawberry.fastapi import BaseContext

from bookshelf.api.http.deps import get_database_service
from bookshelf.core.auth import Principal
from bookshelf.core.services import AuthorService, BookService
from bookshelf.core.services.database.db_session import DbSessionService


class GraphQLContext(BaseContext):
    """Per-request state shared by every resolver of one operation."""

    def __init__(
        self, database: DbSessionService, principal: Principal | None = None
    ) -> None:
        super().__init__()
        self.database = database
        self.principal = principal
        self.authors = AuthorService(database)
        self.books = BookService(database)


async def get_graphql_context(
    database: DbSessionService = Depends(get_database_service),
) -> GraphQLContext:
    return GraphQLContext(database)
