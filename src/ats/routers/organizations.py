"""Organization and organization contact routes."""

from fastapi import Depends

from ats.controllers.organization import (
    organization_contact_controller,
    organization_controller,
)
from ats.crud import EntityRepository, build_crud_router, repository_dependency

organization_router = build_crud_router(organization_controller, prefix="/organizations")

contact_router = build_crud_router(
    organization_contact_controller, prefix="/organization-contacts"
)
get_contact_repository = repository_dependency(organization_contact_controller.config)


@contact_router.get("/organization/{organization_id}")
def list_contacts_by_organization(
    organization_id: str,
    page: str | None = None,
    limit: str | None = None,
    repo: EntityRepository = Depends(get_contact_repository),
):
    """List the contacts of one organization."""
    return organization_contact_controller.get_by_organization(repo, organization_id, page, limit)


@contact_router.get("/organization/{organization_id}/primary")
def get_primary_contact(
    organization_id: str, repo: EntityRepository = Depends(get_contact_repository)
):
    """Get the PRIMARY contact of one organization."""
    return organization_contact_controller.get_primary_contact(repo, organization_id)
