"""Shared pytest fixtures."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from bookshelf.api.graphql.context import GraphQLContext
from bookshelf.core.auth import Principal
from bookshelf.core.services import AuthorService, BookService
from bookshelf.core.services.database.db_manage import DbManageService
from bookshelf.core.services.database.db_session import DbSessionService
from bookshelf.runtime.config.config_data import ConfigData, DatabaseConfig

MEMORY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_config() -> ConfigData:
    """Configuration backed by a private in-memory database."""
    return ConfigData(database=DatabaseConfig(url=MEMORY_DATABASE_URL))


@pytest_asyncio.fixture
async def database(test_config: ConfigData) -> AsyncGenerator[DbSessionService]:
    """Fresh database with all tables created; disposed after the test."""
    service = DbSessionService(test_config)
    await DbManageService(service).create_all()
    try:
        yield service
    finally:
        await service.dispose()


@pytest.fixture
def author_service(database: DbSessionService) -> AuthorService:
    return AuthorService(database)


@pytest.fixture
def book_service(database: DbSessionService) -> BookService:
    return BookService(database)


@pytest.fixture
def principal() -> Principal:
    return Principal(
        id=1,
        full_name="Test",
        email_address="test@test.test",
        is_role_admin=False,
        role_id=1,
    )


@pytest.fixture
def admin_principal() -> Principal:
    return Principal(
        id=2,
        full_name="Admin",
        email_address="admin@test.test",
        is_role_admin=True,
        role_id=2,
    )


@pytest.fixture
def graphql_context(database: DbSessionService) -> GraphQLContext:
    return GraphQLContext(database)
