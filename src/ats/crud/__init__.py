"""Generic CRUD controller factory and its collaborators."""

from ats.crud.factory import CrudConfig, CrudController, create_crud_controller
from ats.crud.pagination import Paging, paginate, paging_meta, parse_int, resolve_paging
from ats.crud.responses import send_error, send_success
from ats.crud.router import build_crud_router, repository_dependency
from ats.crud.storage import (
    AnyOf,
    Compare,
    EntityRepository,
    SQLAlchemyRepository,
    StorageError,
    StorageOutcome,
)
from ats.crud.validation import FieldError, validate_body

__all__ = [
    "AnyOf",
    "Compare",
    "CrudConfig",
    "CrudController",
    "EntityRepository",
    "FieldError",
    "Paging",
    "SQLAlchemyRepository",
    "StorageError",
    "StorageOutcome",
    "build_crud_router",
    "create_crud_controller",
    "paginate",
    "paging_meta",
    "parse_int",
    "repository_dependency",
    "resolve_paging",
    "send_error",
    "send_success",
    "validate_body",
]
