"""Data-access handle used by the CRUD controllers.

Controllers never see driver exceptions: every repository translates them
into a ``StorageError`` carrying one of the ``StorageOutcome`` variants.

A ``where`` mapping is AND-ed column by column. Each value is matched by
equality, or by ``Compare`` and ``AnyOf`` for ranges and alternatives.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from sqlalchemy import func, inspect, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

Record = dict[str, Any]
OrderBy = Sequence[tuple[str, str]]

# PostgreSQL SQLSTATE codes
_PG_UNIQUE_VIOLATION = "23505"
_PG_FOREIGN_KEY_VIOLATION = "23503"


_OPERATORS = {
    "lt": operator.lt,
    "lte": operator.le,
    "gt": operator.gt,
    "gte": operator.ge,
    "ne": operator.ne,
}


@dataclass(frozen=True)
class Compare:
    """
    A ``where`` value comparing the column instead of testing equality.

    Example:
        >>> where = {"end_date": Compare("lt", now)}
    """

    op: str
    value: Any

    def __post_init__(self) -> None:
        if self.op not in _OPERATORS:
            raise ValueError(f"Unsupported comparison '{self.op}'")


@dataclass(frozen=True)
class AnyOf:
    """A ``where`` value matching when any option matches (plain values, None or ``Compare``)."""

    options: tuple[Any, ...]


class StorageOutcome(str, Enum):
    """Storage failure variants the controllers know how to map."""

    UNIQUE_VIOLATION = "unique_violation"
    NOT_FOUND = "not_found"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    UNKNOWN = "unknown"


class StorageError(Exception):
    """Raised by repositories when a storage operation fails."""

    def __init__(self, outcome: StorageOutcome, message: str = "") -> None:
        super().__init__(message or outcome.value)
        self.outcome = outcome


class EntityRepository(Protocol):
    """Operations the CRUD controllers need from storage for one entity."""

    id_field: str

    def find_many(
        self,
        skip: int = 0,
        take: int | None = None,
        order_by: OrderBy | None = None,
        where: Mapping[str, Any] | None = None,
    ) -> list[Record]: ...

    def count(self, where: Mapping[str, Any] | None = None) -> int: ...

    def find_unique(self, record_id: Any) -> Record | None: ...

    def find_first(
        self, where: Mapping[str, Any], order_by: OrderBy | None = None
    ) -> Record | None: ...

    def create(self, data: Mapping[str, Any]) -> Record: ...

    def update(self, record_id: Any, data: Mapping[str, Any]) -> Record: ...

    def delete(self, record_id: Any) -> Record: ...

    def sibling(self, model: type, id_field: str) -> EntityRepository: ...


def translate_integrity_error(exc: IntegrityError) -> StorageOutcome:
    """
    Map a driver-level integrity error onto a ``StorageOutcome``.

    Understands PostgreSQL SQLSTATE codes and SQLite error messages.

    Args:
        exc: The SQLAlchemy ``IntegrityError``

    Returns:
        The matching outcome, or ``UNKNOWN``
    """
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code == _PG_UNIQUE_VIOLATION:
        return StorageOutcome.UNIQUE_VIOLATION
    if code == _PG_FOREIGN_KEY_VIOLATION:
        return StorageOutcome.FOREIGN_KEY_VIOLATION

    message = str(orig).lower()
    if "unique constraint" in message or "duplicate key" in message:
        return StorageOutcome.UNIQUE_VIOLATION
    if "foreign key constraint" in message:
        return StorageOutcome.FOREIGN_KEY_VIOLATION
    return StorageOutcome.UNKNOWN


class SQLAlchemyRepository:
    """
    ``EntityRepository`` backed by a SQLAlchemy session and mapped class.

    Each write commits immediately. Failed writes are rolled back before the
    translated ``StorageError`` is raised, so the session stays usable.
    """

    def __init__(self, db: Session, model: type, id_field: str = "id") -> None:
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: Mapped class for the entity
            id_field: Name of the primary-key attribute
        """
        self.db = db
        self.model = model
        self.id_field = id_field
        self._columns = {attr.key for attr in inspect(model).column_attrs}
        if id_field not in self._columns:
            raise ValueError(f"{model.__name__} has no column named '{id_field}'")

    def sibling(self, model: type, id_field: str) -> SQLAlchemyRepository:
        """Repository for another entity sharing this session."""
        return SQLAlchemyRepository(self.db, model, id_field)

    def to_dict(self, record: Any) -> Record:
        """Snapshot the column values of a mapped instance."""
        return {key: getattr(record, key) for key in self._columns}

    def find_many(
        self,
        skip: int = 0,
        take: int | None = None,
        order_by: OrderBy | None = None,
        where: Mapping[str, Any] | None = None,
    ) -> list[Record]:
        query = self._ordered(select(self.model).where(*self._filters(where)), order_by)
        query = query.offset(skip)
        if take is not None:
            query = query.limit(take)
        rows = self._read(lambda: self.db.scalars(query).all())
        return [self.to_dict(row) for row in rows]

    def count(self, where: Mapping[str, Any] | None = None) -> int:
        query = select(func.count()).select_from(self.model).where(*self._filters(where))
        return self._read(lambda: self.db.scalar(query)) or 0

    def find_unique(self, record_id: Any) -> Record | None:
        record = self._get(record_id)
        return self.to_dict(record) if record is not None else None

    def find_first(
        self, where: Mapping[str, Any], order_by: OrderBy | None = None
    ) -> Record | None:
        query = self._ordered(select(self.model).where(*self._filters(where)), order_by)
        record = self._read(lambda: self.db.scalars(query.limit(1)).first())
        return self.to_dict(record) if record is not None else None

    def create(self, data: Mapping[str, Any]) -> Record:
        self._check_fields(data)
        record = self.model(**data)
        self.db.add(record)
        self._commit()
        self.db.refresh(record)
        return self.to_dict(record)

    def update(self, record_id: Any, data: Mapping[str, Any]) -> Record:
        self._check_fields(data)
        record = self._get(record_id)
        if record is None:
            raise StorageError(StorageOutcome.NOT_FOUND, f"No row with {self.id_field}={record_id}")
        for key, value in data.items():
            setattr(record, key, value)
        self._commit()
        self.db.refresh(record)
        return self.to_dict(record)

    def delete(self, record_id: Any) -> Record:
        record = self._get(record_id)
        if record is None:
            raise StorageError(StorageOutcome.NOT_FOUND, f"No row with {self.id_field}={record_id}")
        snapshot = self.to_dict(record)
        self.db.delete(record)
        self._commit()
        return snapshot

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _get(self, record_id: Any) -> Any:
        id_column = getattr(self.model, self.id_field)
        query = select(self.model).where(id_column == record_id)
        return self._read(lambda: self.db.scalars(query).first())

    def _filters(self, where: Mapping[str, Any] | None) -> list[Any]:
        if not where:
            return []
        self._check_fields(where)
        return [self._condition(getattr(self.model, key), value) for key, value in where.items()]

    def _condition(self, column: Any, value: Any) -> Any:
        if isinstance(value, AnyOf):
            return or_(*(self._condition(column, option) for option in value.options))
        if isinstance(value, Compare):
            return _OPERATORS[value.op](column, value.value)
        if value is None:
            return column.is_(None)
        return column == value

    def _ordered(self, query: Any, order_by: OrderBy | None) -> Any:
        for field, direction in order_by or ():
            column = getattr(self.model, field)
            query = query.order_by(column.desc() if direction == "desc" else column.asc())
        return query

    def _check_fields(self, data: Mapping[str, Any]) -> None:
        unknown = sorted(set(data) - self._columns)
        if unknown:
            raise StorageError(
                StorageOutcome.UNKNOWN,
                f"Unknown field(s) for {self.model.__name__}: {', '.join(unknown)}",
            )

    def _read(self, fn: Any) -> Any:
        try:
            return fn()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(StorageOutcome.UNKNOWN, str(exc)) from exc

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            outcome = translate_integrity_error(exc)
            logger.debug("Integrity error on %s: %s", self.model.__name__, outcome.value)
            raise StorageError(outcome, str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(StorageOutcome.UNKNOWN, str(exc)) from exc
