"""Generic CRUD controller factory.

``create_crud_controller(config)`` returns a ``CrudController`` whose five
handlers (list, get by id, create, update, delete) share one validation,
pagination and error-mapping contract. Entity controllers subclass
``CrudController`` to replace a handler or add new ones.

Invariants:
    - Input errors (blank id, failed validation) never reach storage
    - Storage failures are mapped through ``StorageOutcome``; unclassified
      failures become a 500 naming the entity, with the cause logged only
    - Every handler returns the ``{success, data|error, statusCode}`` envelope
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ats.config import settings
from ats.crud.pagination import Paging, paginate, resolve_paging
from ats.crud.responses import send_error, send_success
from ats.crud.storage import (
    EntityRepository,
    SQLAlchemyRepository,
    StorageError,
    StorageOutcome,
)
from ats.crud.validation import validate_body

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrudConfig:
    """
    Immutable per-entity configuration for a CRUD controller.

    Attributes:
        model: SQLAlchemy mapped class (the entity handle)
        model_name: Display name used in error messages
        id_field: Primary-key attribute name
        default_limit: Page size used when ``limit`` is absent or invalid
        max_limit: Upper bound for ``limit``
        create_schema: Optional pydantic model validating POST bodies
        update_schema: Optional pydantic model validating PATCH bodies
    """

    model: type
    model_name: str
    id_field: str = "id"
    default_limit: int = field(default_factory=lambda: settings.default_page_size)
    max_limit: int = field(default_factory=lambda: settings.max_page_size)
    create_schema: type[BaseModel] | None = None
    update_schema: type[BaseModel] | None = None

    def __post_init__(self) -> None:
        if self.max_limit < 1 or not 1 <= self.default_limit <= self.max_limit:
            raise ValueError(
                f"{self.model_name}: default_limit must be between 1 and max_limit"
            )

    def repository(self, db: Session) -> SQLAlchemyRepository:
        """Repository for this entity bound to ``db``."""
        return SQLAlchemyRepository(db, self.model, self.id_field)


class CrudController:
    """The five standard handlers for one entity."""

    def __init__(self, config: CrudConfig) -> None:
        self.config = config

    @property
    def model_name(self) -> str:
        return self.config.model_name

    # ------------------------------------------------------------------
    # Helpers shared with subclasses
    # ------------------------------------------------------------------

    def resolve_paging(self, page: Any, limit: Any) -> Paging:
        return resolve_paging(page, limit, self.config.default_limit, self.config.max_limit)

    def validate(
        self, schema: type[BaseModel] | None, body: Any, partial: bool = False
    ) -> tuple[dict[str, Any] | None, JSONResponse | None]:
        """
        Validate a body and return ``(data, None)`` or ``(None, error_response)``.

        With ``partial`` only the fields present in the body are kept;
        otherwise fields left as None are dropped so column defaults apply.
        """
        if schema is None:
            if not isinstance(body, dict):
                return None, send_error("Request body must be a JSON object", 400)
            return dict(body), None

        parsed, errors = validate_body(schema, body)
        if errors:
            logger.warning(
                "Validation failed for %s: %d error(s)",
                self.model_name,
                len(errors),
                extra={"model_name": self.model_name},
            )
            return None, send_error("Validation failed", 400, errors)
        return parsed.model_dump(exclude_unset=partial, exclude_none=not partial), None

    def missing_id(self, record_id: Any) -> JSONResponse | None:
        if record_id is None or not str(record_id).strip():
            return send_error(f"{self.model_name} ID is required", 400)
        return None

    def storage_failure(self, operation: str, exc: Exception) -> JSONResponse:
        """Log an unclassified failure and return the generic 500."""
        logger.error(
            "Error during %s of %s: %s",
            operation,
            self.model_name,
            exc,
            exc_info=exc,
            extra={"model_name": self.model_name, "operation": operation},
        )
        verb = {"list": "fetch", "get": "fetch"}.get(operation, operation)
        return send_error(f"Failed to {verb} {self.model_name}", 500)

    def list_filtered(
        self,
        repo: EntityRepository,
        page: Any,
        limit: Any,
        order_by: list[tuple[str, str]],
        where: dict[str, Any],
    ) -> JSONResponse:
        """Page of the records matching ``where``; the total counts the same subset."""
        paging = self.resolve_paging(page, limit)
        try:
            result = paginate(repo, paging, order_by=order_by, where=where)
        except Exception as exc:
            return self.storage_failure("list", exc)
        return send_success(result)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def list_all(
        self, repo: EntityRepository, page: Any = None, limit: Any = None
    ) -> JSONResponse:
        """Page of records ordered by id descending, with paging metadata."""
        paging = self.resolve_paging(page, limit)
        try:
            result = paginate(repo, paging, order_by=[(self.config.id_field, "desc")])
        except Exception as exc:
            return self.storage_failure("list", exc)
        return send_success(result)

    def get_by_id(self, repo: EntityRepository, record_id: Any) -> JSONResponse:
        error = self.missing_id(record_id)
        if error is not None:
            return error
        try:
            record = repo.find_unique(record_id)
        except Exception as exc:
            return self.storage_failure("get", exc)
        if record is None:
            return send_error(f"{self.model_name} not found", 404)
        return send_success(record)

    def create(self, repo: EntityRepository, body: Any) -> JSONResponse:
        data, error = self.validate(self.config.create_schema, body)
        if error is not None:
            return error
        try:
            record = repo.create(data)
        except StorageError as exc:
            if exc.outcome is StorageOutcome.UNIQUE_VIOLATION:
                return send_error(f"{self.model_name} with this value already exists", 409)
            if exc.outcome in (StorageOutcome.FOREIGN_KEY_VIOLATION, StorageOutcome.NOT_FOUND):
                return send_error("Related record not found", 404)
            return self.storage_failure("create", exc)
        except Exception as exc:
            return self.storage_failure("create", exc)
        return send_success(record, 201)

    def update(self, repo: EntityRepository, record_id: Any, body: Any) -> JSONResponse:
        error = self.missing_id(record_id)
        if error is not None:
            return error
        data, error = self.validate(self.config.update_schema, body, partial=True)
        if error is not None:
            return error
        try:
            if repo.find_unique(record_id) is None:
                return send_error(f"{self.model_name} not found", 404)
            record = repo.update(record_id, data)
        except StorageError as exc:
            return self.map_write_error("update", exc)
        except Exception as exc:
            return self.storage_failure("update", exc)
        return send_success(record)

    def delete(self, repo: EntityRepository, record_id: Any) -> JSONResponse:
        error = self.missing_id(record_id)
        if error is not None:
            return error
        try:
            record = repo.delete(record_id)
        except StorageError as exc:
            if exc.outcome is StorageOutcome.NOT_FOUND:
                return send_error(f"{self.model_name} not found", 404)
            if exc.outcome is StorageOutcome.FOREIGN_KEY_VIOLATION:
                return send_error(f"{self.model_name} is referenced by other records", 409)
            return self.storage_failure("delete", exc)
        except Exception as exc:
            return self.storage_failure("delete", exc)
        return send_success(record)

    def map_write_error(self, operation: str, exc: StorageError) -> JSONResponse:
        """Map a storage outcome from an update onto a response."""
        if exc.outcome is StorageOutcome.UNIQUE_VIOLATION:
            return send_error(f"{self.model_name} with this value already exists", 409)
        if exc.outcome is StorageOutcome.NOT_FOUND:
            # Row deleted between the existence check and the write
            return send_error(f"{self.model_name} not found", 404)
        if exc.outcome is StorageOutcome.FOREIGN_KEY_VIOLATION:
            return send_error("Related record not found", 404)
        return self.storage_failure(operation, exc)


def create_crud_controller(config: CrudConfig) -> CrudController:
    """Build the standard controller for ``config``."""
    return CrudController(config)
