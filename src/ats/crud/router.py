"""Mount a ``CrudController`` onto a FastAPI router."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from ats.crud.factory import CrudConfig, CrudController
from ats.crud.storage import EntityRepository
from ats.database import get_db


def repository_dependency(config: CrudConfig) -> Callable[..., EntityRepository]:
    """FastAPI dependency yielding the repository for ``config``'s entity."""

    def get_repository(db: Session = Depends(get_db)) -> EntityRepository:
        return config.repository(db)

    return get_repository


def build_crud_router(
    controller: CrudController, prefix: str, tags: list[str] | None = None
) -> APIRouter:
    """
    Create a router exposing the controller's five handlers.

    Routes:
        GET    {prefix}            list with ``page``/``limit``
        GET    {prefix}/{id}       get by id
        POST   {prefix}            create
        PATCH  {prefix}/{id}       update
        DELETE {prefix}/{id}       delete

    Entity modules add their own routes to the returned router. Those use
    two path segments, so they never collide with ``/{id}``.
    """
    router = APIRouter(prefix=prefix, tags=tags or [controller.model_name])
    get_repository = repository_dependency(controller.config)

    @router.get("")
    def list_records(
        page: str | None = None,
        limit: str | None = None,
        repo: EntityRepository = Depends(get_repository),
    ):
        return controller.list_all(repo, page, limit)

    @router.get("/{record_id}")
    def get_record(record_id: str, repo: EntityRepository = Depends(get_repository)):
        return controller.get_by_id(repo, record_id)

    @router.post("")
    def create_record(
        body: Any = Body(default=None),
        repo: EntityRepository = Depends(get_repository),
    ):
        return controller.create(repo, body)

    @router.patch("/{record_id}")
    def update_record(
        record_id: str,
        body: Any = Body(default=None),
        repo: EntityRepository = Depends(get_repository),
    ):
        return controller.update(repo, record_id, body)

    @router.delete("/{record_id}")
    def delete_record(record_id: str, repo: EntityRepository = Depends(get_repository)):
        return controller.delete(repo, record_id)

    return router
