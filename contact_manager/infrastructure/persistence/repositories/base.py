"""Base repository: generic CRUD over one table, keyed by its primary key.

Entity stores (int key) and association stores (composite (left, right) key)
share this implementation. Every mutation is a single statement; NotFound is
derived from the affected row count, DuplicateKey from IntegrityError.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, inspect as sa_inspect, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from contact_manager.domain.exceptions import (
    DuplicateKeyException,
    ResourceNotFoundException,
)
from contact_manager.infrastructure.persistence.database import Base


ModelType = TypeVar("ModelType", bound=Base)
ResultType = TypeVar("ResultType")


class BaseRepository(Generic[ModelType, ResultType]):
    """Base repository with get, get_all, create, update, delete.

    Subclasses set resource_type and implement _to_result (ORM -> DTO) and
    _duplicate_details (what to report on a unique-constraint violation).
    """

    resource_type: str = "resource"

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    def _to_result(self, obj: ModelType) -> ResultType:
        raise NotImplementedError

    def _duplicate_details(self, values: dict[str, Any]) -> dict[str, Any]:
        """Details for DuplicateKeyException; default reports the submitted values."""
        return values

    def _pk_columns(self) -> tuple[Any, ...]:
        """Primary key as mapped attributes, in key order (user_id, role_id, ...)."""
        mapper = sa_inspect(self.model)
        return tuple(
            getattr(self.model, mapper.get_property_by_column(col).key)
            for col in mapper.primary_key
        )

    def _key_criteria(self, key: Any) -> list[Any]:
        values = key if isinstance(key, tuple) else (key,)
        columns = self._pk_columns()
        if len(values) != len(columns):
            raise ValueError(
                f"{self.model.__name__} key needs {len(columns)} value(s), got {len(values)}"
            )
        return [col == value for col, value in zip(columns, values)]

    @staticmethod
    def _format_key(key: Any) -> Any:
        if isinstance(key, tuple):
            return ":".join(str(k) for k in key)
        return key

    def _not_found(self, key: Any) -> ResourceNotFoundException:
        return ResourceNotFoundException(self.resource_type, self._format_key(key))

    async def get_entity(self, key: Any) -> ModelType | None:
        """Return the ORM row for key (fresh from the database), or None."""
        return await self.db.get(self.model, key, populate_existing=True)

    async def _require_exists(
        self, model: type[Base], entity_id: int, resource_type: str
    ) -> None:
        """Raise ResourceNotFoundException unless model has a row with this primary key."""
        if await self.db.get(model, entity_id, populate_existing=True) is None:
            raise ResourceNotFoundException(resource_type, entity_id)

    async def _require_absent(self, key: Any, **duplicate_values: Any) -> None:
        """Raise DuplicateKeyException if a row with this primary key already exists."""
        if await self.get_entity(key) is not None:
            raise DuplicateKeyException(
                self.resource_type, self._duplicate_details(duplicate_values)
            )

    async def get(self, key: Any) -> ResultType:
        """Return the row for key as a DTO; raise ResourceNotFoundException if absent."""
        obj = await self.get_entity(key)
        if obj is None:
            raise self._not_found(key)
        return self._to_result(obj)

    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[ResultType]:
        """Return rows ordered by primary key (insertion order for autoincrement ids)."""
        query = select(self.model).order_by(*self._pk_columns()).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return [self._to_result(obj) for obj in result.scalars().all()]

    async def create(self, obj: ModelType, **duplicate_values: Any) -> ResultType:
        """Persist a new row; server-assigned fields (id, timestamps) are loaded back."""
        self.db.add(obj)
        try:
            await self.db.flush()
        except IntegrityError:
            raise DuplicateKeyException(
                self.resource_type, self._duplicate_details(duplicate_values)
            ) from None
        await self.db.refresh(obj)
        return self._to_result(obj)

    async def update(self, key: Any, **values: Any) -> ResultType:
        """Update the given attributes and bump updated_date in one statement.

        Raises ResourceNotFoundException when no row matched and
        DuplicateKeyException when a unique column collides.
        """
        assignments: dict[Any, Any] = {
            getattr(self.model, name): value for name, value in values.items()
        }
        assignments[getattr(self.model, "updated_date")] = func.now()
        stmt = (
            update(self.model)
            .where(*self._key_criteria(key))
            .values(assignments)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.db.execute(stmt)
        except IntegrityError:
            raise DuplicateKeyException(
                self.resource_type, self._duplicate_details(values)
            ) from None
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise self._not_found(key)
        return await self.get(key)

    async def delete(self, key: Any) -> None:
        """Delete the row for key; raise ResourceNotFoundException if none was deleted.

        Association rows that reference it go with it (ON DELETE CASCADE).
        """
        result = await self.db.execute(
            delete(self.model).where(*self._key_criteria(key))
        )
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise self._not_found(key)
