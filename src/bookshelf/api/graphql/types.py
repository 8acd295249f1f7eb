"""GraphQL object, input and union types.

Resolvers return domain entities and ``ErrorResponse`` envelopes directly;
``is_type_of`` picks the concrete union member by probing for ``errors``.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional, Union

import strawberry
from strawberry.types import Info
from strawberry.utils.str_converters import to_camel_case

from bookshelf.api.graphql.directives import ARRAY_RETURN_TYPE, Authorize, guarded
from bookshelf.core.errors import info as info_envelope
from bookshelf.core.errors import is_error


@strawberry.type(name="ModuleError")
class ModuleErrorType:
    code: str
    message: str
    attr_names: Optional[list[Optional[str]]] = None


@strawberry.type(name="Error")
class ErrorType:
    code: str
    message: str
    attr_name: Optional[str] = None
    row: Optional[int] = None
    module_error: Optional[ModuleErrorType] = None


@strawberry.type(name="ErrorResponse")
class ErrorResponseType:
    errors: Optional[list[Optional[ErrorType]]]

    @classmethod
    def is_type_of(cls, obj: Any, info: Any) -> bool:
        return is_error(obj)


@strawberry.type(name="Author")
class AuthorType:
    id: int
    name: str
    country: Optional[str]

    @strawberry.field(**guarded(Authorize(scope="book:read", return_type=ARRAY_RETURN_TYPE)))
    async def books(self, info: Info) -> Optional[list[Optional[BookResponse]]]:
        result = await info.context.books.get({"where": {"author": self.id}})
        return result if isinstance(result, list) else [result]

    @classmethod
    def is_type_of(cls, obj: Any, info: Any) -> bool:
        return not is_error(obj)


@strawberry.type(name="Book")
class BookType:
    id: int
    title: str
    year_published: str
    genre: Optional[str]

    @strawberry.field(**guarded(Authorize(scope="author:read")))
    async def author(self, info: Info) -> Optional[AuthorResponse]:
        return await info.context.authors.get({"id": self.author_id})

    @classmethod
    def is_type_of(cls, obj: Any, info: Any) -> bool:
        return not is_error(obj)


AuthorResponse = Annotated[
    Union[AuthorType, ErrorResponseType], strawberry.union("AuthorResponse")
]
BookResponse = Annotated[
    Union[BookType, ErrorResponseType], strawberry.union("BookResponse")
]


@strawberry.input
class AuthorInput:
    name: Optional[str] = strawberry.UNSET
    country: Optional[str] = strawberry.UNSET


@strawberry.input
class BookInput:
    title: Optional[str] = strawberry.UNSET
    year_published: Optional[str] = strawberry.UNSET
    genre: Optional[str] = strawberry.UNSET
    author_id: Optional[int] = strawberry.UNSET


def input_data(data: object) -> dict[str, Any]:
    """Fields the client actually sent, keyed by their GraphQL names.

    An explicit ``null`` is kept; omitted fields are dropped.
    """
    return {
        to_camel_case(name): value
        for name, value in vars(data).items()
        if value is not strawberry.UNSET
    }


def result_list(result: Any) -> list[Any]:
    """Shape a list query result; an empty match becomes one ``I_INFO`` element."""
    if not isinstance(result, list):
        return [result]
    if not result:
        return [info_envelope("No data matched your selection criteria")]
    return result
