from typing import Annotated, Optional

import strawberry
from strawberry.types import Info

from bookshelf.api.graphql.context import GraphQLContext
from bookshelf.api.graphql.directives import (
    ARRAY_RETURN_TYPE,
    Authenticate,
    Authorize,
    guarded,
)
from bookshelf.api.graphql.types import (
    AuthorInput,
    AuthorResponse,
    input_data,
    result_list,
)


@strawberry.type
class AuthorQuery:
    @strawberry.field(
        **guarded(
            Authorize(scope="author:read", return_type=ARRAY_RETURN_TYPE),
            Authenticate(return_type=ARRAY_RETURN_TYPE),
        )
    )
    async def get_authors(
        self,
        info: Info[GraphQLContext, None],
        filter_: Annotated[Optional[str], strawberry.argument(name="filter")] = None,
    ) -> Optional[list[Optional[AuthorResponse]]]:
        return result_list(await info.context.authors.get({"where": filter_}))

    @strawberry.field(**guarded(Authorize(scope="author:read"), Authenticate()))
    async def get_author(
        self, info: Info[GraphQLContext, None], id: int
    ) -> Optional[AuthorResponse]:
        return await info.context.authors.get({"id": id})


@strawberry.type
class AuthorMutation:
    @strawberry.mutation(**guarded(Authorize(scope="author:add"), Authenticate()))
    async def add_author(
        self, info: Info[GraphQLContext, None], data: AuthorInput
    ) -> Optional[AuthorResponse]:
        return await info.context.authors.add(input_data(data))

    @strawberry.mutation(**guarded(Authorize(scope="author:update"), Authenticate()))
    async def update_author(
        self, info: Info[GraphQLContext, None], id: int, data: AuthorInput
    ) -> Optional[AuthorResponse]:
        return await info.context.authors.update(id, input_data(data))

    @strawberry.mutation(**guarded(Authorize(scope="author:delete"), Authenticate()))
    async def delete_author(
        self, info: Info[GraphQLContext, None], id: int
    ) -> Optional[AuthorResponse]:
        return await info.context.authors.delete(id)
