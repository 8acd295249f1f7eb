"""Request authentication and scope-based authorization."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from loguru import logger

from bookshelf.core.auth.permission import check_permission
from bookshelf.core.auth.principal import Principal
from bookshelf.core.errors import ErrorResponse
from bookshelf.runtime.context import get_config

ADMIN_QUALIFIER = "admin"

PermissionChecker = Callable[[int, str, str], bool]


class PrincipalHolder(Protocol):
    principal: Principal | None


@dataclass(frozen=True)
class Scope:
    resource: str
    permission: str
    qualifier: str | None = None

    @property
    def admin_only(self) -> bool:
        return self.qualifier is not None

    @classmethod
    def parse(cls, scope: str) -> "Scope | None":
        """Parse ``resource:permission[:admin]``; None when malformed."""
        parts = [part.strip() for part in scope.lower().split(":")]
        if len(parts) not in (2, 3) or not all(parts[:2]):
            return None
        return cls(parts[0], parts[1], parts[2] if len(parts) == 3 else None)


async def authenticate(context: PrincipalHolder) -> Principal | ErrorResponse:
    """Resolve the request principal once and cache it on ``context``.

    Identity is currently the principal configured under ``auth.principal``;
    the token codes in ``ErrorCode`` are reserved for a real authenticator.
    """
    if context.principal is None:
        context.principal = Principal.model_validate(
            get_config().auth.principal.model_dump()
        )
        logger.debug("Authenticated principal {}", context.principal.id)
    return context.principal


def authorize(
    principal: Principal | None,
    scope: str,
    checker: PermissionChecker = check_permission,
) -> bool:
    """Return True when ``principal`` is granted ``scope``."""
    if principal is None:
        logger.warning("Authorization for {} requested without a principal", scope)
        return False

    parsed = Scope.parse(scope)
    if parsed is None:
        logger.warning("Malformed authorization scope: {}", scope)
        return False

    if parsed.admin_only and (
        parsed.qualifier != ADMIN_QUALIFIER or not principal.is_role_admin
    ):
        logger.info("Principal {} denied admin scope {}", principal.id, scope)
        return False

    if not checker(principal.role_id, parsed.permission, parsed.resource):
        logger.info("Principal {} denied scope {}", principal.id, scope)
        return False
    return True
