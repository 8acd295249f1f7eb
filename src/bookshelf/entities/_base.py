from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, TypeVar

import sqlalchemy as sa
from loguru import logger
from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlalchemy.exc import IntegrityError
from sqlmodel import Field, SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from bookshelf.core.errors import PersistenceError


class Entity(BaseModel):
    """Base entity class with a database-generated integer identifier."""

    id: int = PydanticField(description="Unique identifier for the entity")

    created_at: datetime | None = None
    updated_at: datetime | None = None


class EntityTable(SQLModel, table=False):
    """Base table with an auto-increment primary key and audit timestamps."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )


EntityT = TypeVar("EntityT", bound=Entity)
TableT = TypeVar("TableT", bound=EntityTable)


class EntityRepository(Generic[EntityT, TableT]):
    """Data-access layer shared by every entity.

    Criteria are field-equality maps keyed by the attribute names clients use
    (``attribute_map`` translates them to columns). A list value matches any
    of its items.
    """

    entity: ClassVar[type[Entity]]
    table: ClassVar[type[EntityTable]]
    attribute_map: ClassVar[dict[str, str]] = {"id": "id"}

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity.model_validate(row, from_attributes=True)  # type: ignore[return-value]

    def _statement(self, where: dict[str, Any]):
        statement = select(self.table)
        for attr_name, value in where.items():
            column_name = self.attribute_map.get(attr_name)
            if column_name is None:
                raise PersistenceError(
                    "E_INVALID_CRITERIA",
                    f"Unrecognized attribute `{attr_name}` in criteria",
                    [attr_name],
                )
            column = getattr(self.table, column_name)
            if isinstance(value, list):
                statement = statement.where(column.in_(value))
            elif isinstance(value, dict):
                raise PersistenceError(
                    "E_INVALID_CRITERIA",
                    f"Unsupported modifier for attribute `{attr_name}`",
                    [attr_name],
                )
            else:
                statement = statement.where(column == value)
        return statement.order_by(self.table.id)

    async def _flush(self) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise PersistenceError("E_INTEGRITY", str(e.orig)) from e

    async def _first(self, where: dict[str, Any]) -> TableT | None:
        result = await self._session.exec(self._statement(where))
        return result.first()

    async def create(self, payload: dict[str, Any]) -> EntityT:
        row = self.table(**payload)
        self._session.add(row)
        await self._flush()
        await self._session.refresh(row)
        logger.debug("Created {} {}", self.table.__tablename__, row.id)
        return self._to_entity(row)

    async def find(self, where: dict[str, Any]) -> list[EntityT]:
        result = await self._session.exec(self._statement(where))
        rows: Sequence[TableT] = result.all()
        return [self._to_entity(row) for row in rows]

    async def update_one(
        self, payload: dict[str, Any], where: dict[str, Any]
    ) -> EntityT | None:
        row = await self._first(where)
        if row is None:
            return None
        for column_name, value in payload.items():
            setattr(row, column_name, value)
        row.updated_at = datetime.now(UTC)
        self._session.add(row)
        await self._flush()
        await self._session.refresh(row)
        return self._to_entity(row)

    async def destroy_one(self, where: dict[str, Any]) -> EntityT | None:
        row = await self._first(where)
        if row is None:
            return None
        entity = self._to_entity(row)
        await self._session.delete(row)
        await self._flush()
        return entity
