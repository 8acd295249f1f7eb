"""Unit tests for authentication and scope authorization."""

from unittest.mock import MagicMock

import pytest

from bookshelf.core.auth import Principal, Scope, authenticate, authorize, check_permission
from bookshelf.runtime.config.config_data import AuthConfig, ConfigData, PrincipalConfig
from bookshelf.runtime.context import with_context


class _Context:
    def __init__(self, principal: Principal | None = None):
        self.principal = principal


class TestAuthenticate:
    """Test principal resolution."""

    @pytest.mark.asyncio
    async def test_resolves_configured_principal(self):
        """Should attach the configured principal to the context."""
        config = ConfigData(
            auth=AuthConfig(principal=PrincipalConfig(id=7, full_name="Reader", role_id=3))
        )
        context = _Context()

        with with_context(config):
            principal = await authenticate(context)

        assert isinstance(principal, Principal)
        assert principal.id == 7
        assert principal.role_id == 3
        assert context.principal is principal

    @pytest.mark.asyncio
    async def test_cached_principal_is_reused(self, principal):
        """Should not replace a principal already on the context."""
        context = _Context(principal)

        assert await authenticate(context) is principal
        assert await authenticate(context) is principal


class TestAuthorize:
    """Test scope-based authorization."""

    def test_grants_plain_scope(self, principal):
        """Should grant a resource:permission scope the checker allows."""
        assert authorize(principal, "author:read")

    def test_passes_parsed_scope_to_checker(self, principal):
        """Should call the checker with role, permission and resource."""
        checker = MagicMock(return_value=True)

        assert authorize(principal, " Book : Update ", checker=checker)
        checker.assert_called_once_with(1, "update", "book")

    def test_checker_denial(self, principal):
        """Should deny when the checker refuses."""
        assert not authorize(principal, "author:read", checker=lambda *_: False)

    def test_admin_scope_denied_for_non_admin(self, principal):
        """Should deny admin scopes to non-admins without consulting the checker."""
        checker = MagicMock(return_value=True)

        assert not authorize(principal, "book:delete:admin", checker=checker)
        checker.assert_not_called()

    def test_admin_scope_granted_for_admin(self, admin_principal):
        """Should grant admin scopes to admins the checker allows."""
        assert authorize(admin_principal, "book:delete:ADMIN")

    def test_unknown_qualifier_denied(self, admin_principal):
        """Should only accept 'admin' as the third segment."""
        assert not authorize(admin_principal, "book:delete:owner")

    @pytest.mark.parametrize("scope", ["book", "book:", ":read", "a:b:c:d", ""])
    def test_malformed_scope_denied(self, principal, scope):
        """Should deny scopes that do not parse."""
        assert not authorize(principal, scope)

    def test_missing_principal_denied(self):
        """Should deny when no principal was resolved."""
        assert not authorize(None, "author:read")


class TestScope:
    """Test scope parsing."""

    def test_parse(self):
        """Should lowercase and split the scope."""
        assert Scope.parse("Author:Add") == Scope("author", "add")
        assert Scope.parse("book:delete:admin").admin_only

    def test_permission_stub_grants(self):
        """Should grant every request."""
        assert check_permission(1, "read", "author")
