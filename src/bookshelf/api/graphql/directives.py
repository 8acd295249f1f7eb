"""Schema directives guarding field resolution.

``@authenticate`` and ``@authorize`` are declared on fields and printed in the
SDL. :class:`DirectiveResolvers` turns them into an interceptor chain run
before the field's own resolver: each interceptor either lets resolution
continue or short-circuits with an error envelope. Directives apply in
reverse declaration order, so ``[Authorize(...), Authenticate()]``
authenticates first.
"""

from collections.abc import Awaitable, Callable
from typing import Any, Optional

import strawberry
from strawberry.extensions import FieldExtension
from strawberry.schema_directive import Location
from strawberry.types import Info
from strawberry.types.field import StrawberryField

from bookshelf.core.auth import authenticate, authorize
from bookshelf.core.errors import ErrorResponse, is_error, no_permission

ARRAY_RETURN_TYPE = "array"


@strawberry.schema_directive(
    locations=[Location.FIELD_DEFINITION],
    name="authenticate",
    description="Resolve the request principal before the field.",
)
class Authenticate:
    return_type: Optional[str] = None


@strawberry.schema_directive(
    locations=[Location.FIELD_DEFINITION],
    name="authorize",
    description="Require scope resource:permission[:admin] on the field.",
)
class Authorize:
    scope: str
    return_type: Optional[str] = None


async def _authenticate_directive(directive: Authenticate, info: Info) -> ErrorResponse | None:
    principal = await authenticate(info.context)
    return principal if is_error(principal) else None


async def _authorize_directive(directive: Authorize, info: Info) -> ErrorResponse | None:
    if authorize(info.context.principal, directive.scope):
        return None
    return no_permission(directive.scope)


Interceptor = Callable[[Any, Info], Awaitable[ErrorResponse | None]]

DIRECTIVE_RESOLVERS: dict[type, Interceptor] = {
    Authenticate: _authenticate_directive,
    Authorize: _authorize_directive,
}


class DirectiveResolvers(FieldExtension):
    def __init__(self) -> None:
        self.directives: list[Any] = []

    def apply(self, field: StrawberryField) -> None:
        directives = [d for d in field.directives if type(d) in DIRECTIVE_RESOLVERS]
        self.directives = list(reversed(directives))

    async def resolve_async(
        self, next_: Callable[..., Awaitable[Any]], source: Any, info: Info, **kwargs: Any
    ) -> Any:
        for directive in self.directives:
            denial = await DIRECTIVE_RESOLVERS[type(directive)](directive, info)
            if denial is not None:
                if directive.return_type == ARRAY_RETURN_TYPE:
                    return [denial]
                return denial
        return await next_(source, info, **kwargs)


def guarded(*directives: Any) -> dict[str, Any]:
    """Keyword arguments for ``strawberry.field`` attaching guard directives."""
    return {"directives": list(directives), "extensions": [DirectiveResolvers()]}
