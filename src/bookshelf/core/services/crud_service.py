"""Create/read/update/delete operations shared by the entity services.

Services never raise: validation failures, missing records and backend
exceptions all come back as an ``ErrorResponse``.
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any, ClassVar, Generic, TypeVar

from loguru import logger

from bookshelf.core.errors import (
    ErrorResponse,
    api_error,
    bad_input,
    is_error,
    not_found,
)
from bookshelf.core.services.database.db_session import DbSessionService
from bookshelf.entities._base import Entity, EntityRepository

EntityT = TypeVar("EntityT", bound=Entity)
ResultT = TypeVar("ResultT")

CreateValidator = Callable[[dict[str, Any]], dict[str, Any] | ErrorResponse]
UpdateValidator = Callable[[Any, dict[str, Any]], dict[str, Any] | ErrorResponse]
DeleteValidator = Callable[[Any], ErrorResponse | None]


class CrudService(Generic[EntityT]):
    entity_name: ClassVar[str]
    repository_class: ClassVar[type[EntityRepository]]
    validate_create: ClassVar[CreateValidator]
    validate_update: ClassVar[UpdateValidator]
    validate_delete: ClassVar[DeleteValidator]

    def __init__(self, database: DbSessionService) -> None:
        self._database = database

    @property
    def _log_prefix(self) -> str:
        return type(self).__name__

    async def _run(
        self, operation: Callable[[EntityRepository], Awaitable[ResultT]]
    ) -> ResultT:
        async with self._database.session_scope() as session:
            return await operation(self.repository_class(session))

    def _failed(self, action: str, err: Exception) -> ErrorResponse:
        logger.warning("{}.{}: Exception encountered: {}", self._log_prefix, action, err)
        return api_error(f"{self.entity_name} {action} request failed.", err)

    async def add(self, data: dict[str, Any]) -> EntityT | ErrorResponse:
        """Validate ``data`` and insert one record."""
        payload = self.validate_create(data)
        if is_error(payload):
            return payload

        try:
            result = await self._run(lambda repo: repo.create(payload))
        except Exception as err:
            return self._failed("add", err)

        logger.debug("{}.add: {} successfully added: {}", self._log_prefix, self.entity_name, result)
        return result

    async def update(self, record_id: Any, data: dict[str, Any]) -> EntityT | ErrorResponse:
        """Update one record by id; a missing record is reported as ``I_INFO``."""
        payload = self.validate_update(record_id, data)
        if is_error(payload):
            return payload

        try:
            result = await self._run(
                lambda repo: repo.update_one(payload, {"id": record_id})
            )
        except Exception as err:
            return self._failed("update", err)

        if result is None:
            return not_found(self.entity_name, record_id)
        logger.debug("{}.update: {} successfully updated: {}", self._log_prefix, self.entity_name, result)
        return result

    async def delete(self, record_id: Any) -> EntityT | ErrorResponse:
        """Delete one record by id and return it; a missing record is ``I_INFO``."""
        error = self.validate_delete(record_id)
        if error is not None:
            return error

        try:
            result = await self._run(lambda repo: repo.destroy_one({"id": record_id}))
        except Exception as err:
            return self._failed("delete", err)

        if result is None:
            return not_found(self.entity_name, record_id)
        logger.debug("{}.delete: {} successfully deleted: {}", self._log_prefix, self.entity_name, result)
        return result

    async def get(
        self, criteria: dict[str, Any]
    ) -> EntityT | list[EntityT] | ErrorResponse:
        """Fetch by ``id`` or by a ``where`` criteria map.

        ``where`` may be a dict or its JSON encoding. With an id the first
        match is returned (or ``I_INFO`` when there is none); without one the
        whole matching list is returned, possibly empty.
        """
        record_id = criteria.get("id")
        where = criteria.get("where") or {}

        if isinstance(where, str):
            try:
                where = json.loads(where)
            except json.JSONDecodeError:
                return bad_input("where", "Where clause should be a valid JSON object.")
            if where is None:
                where = {}
        if not isinstance(where, dict):
            return bad_input("where", "Where clause should be a valid JSON object.")

        where = dict(where)
        if record_id is not None:
            where["id"] = record_id

        try:
            records = await self._run(lambda repo: repo.find(where))
        except Exception as err:
            return self._failed("fetch", err)

        if record_id is not None:
            if not records:
                return not_found(self.entity_name, record_id)
            result = records[0]
        else:
            result = records
        logger.debug("{}.get: {}(s) successfully retrieved: {}", self._log_prefix, self.entity_name, result)
        return result
