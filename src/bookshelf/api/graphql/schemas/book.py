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
    BookInput,
    BookResponse,
    input_data,
    result_list,
)


@strawberry.type
class BookQuery:
    @strawberry.field(
        **guarded(
            Authorize(scope="book:read", return_type=ARRAY_RETURN_TYPE),
            Authenticate(return_type=ARRAY_RETURN_TYPE),
        )
    )
    async def get_books(
        self,
        info: Info[GraphQLContext, None],
        filter_: Annotated[Optional[str], strawberry.argument(name="filter")] = None,
    ) -> Optional[list[Optional[BookResponse]]]:
        return result_list(await info.context.books.get({"where": filter_}))

    @strawberry.field(**guarded(Authorize(scope="book:read"), Authenticate()))
    async def get_book(
        self, info: Info[GraphQLContext, None], id: int
    ) -> Optional[BookResponse]:
        return await info.context.books.get({"id": id})


@strawberry.type
class BookMutation:
    @strawberry.mutation(**guarded(Authorize(scope="book:add"), Authenticate()))
    async def add_book(
        self, info: Info[GraphQLContext, None], data: BookInput
    ) -> Optional[BookResponse]:
        return await info.context.books.add(input_data(data))

    @strawberry.mutation(**guarded(Authorize(scope="book:update"), Authenticate()))
    async def update_book(
        self, info: Info[GraphQLContext, None], id: int, data: BookInput
    ) -> Optional[BookResponse]:
        return await info.context.books.update(id, input_data(data))

    @strawberry.mutation(**guarded(Authorize(scope="book:delete"), Authenticate()))
    async def delete_book(
        self, info: Info[GraphQLContext, None], id: int
    ) -> Optional[BookResponse]:
        return await info.context.books.delete(id)
