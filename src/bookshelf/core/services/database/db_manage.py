"""Schema management for the application database."""

from loguru import logger
from sqlmodel import SQLModel

from bookshelf.core.services.database.db_session import DbSessionService


class DbManageService:
    def __init__(self, database: DbSessionService):
        self._database = database

    async def create_all(self) -> None:
        """Create all database tables."""
        from bookshelf.entities import AuthorTable, BookTable  # noqa: F401

        async with self._database.engine.begin() as connection:
            await connection.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized with tables.")

    async def drop_all(self) -> None:
        """Drop all database tables."""
        from bookshelf.entities import AuthorTable, BookTable  # noqa: F401

        async with self._database.engine.begin() as connection:
            await connection.run_sync(SQLModel.metadata.drop_all)
        logger.info("Database tables dropped.")
