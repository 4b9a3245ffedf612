"""Organization and organization contact controllers."""

from __future__ import annotations

import logging
from typing import Any

from fastapi.responses import JSONResponse

from ats.crud import (
    Compare,
    CrudConfig,
    CrudController,
    EntityRepository,
    StorageError,
    StorageOutcome,
    create_crud_controller,
    send_error,
    send_success,
)
from ats.models.organization import Organization, OrganizationContact
from ats.schemas.organization import (
    ContactType,
    OrganizationContactCreate,
    OrganizationContactUpdate,
    OrganizationCreate,
    OrganizationUpdate,
)

logger = logging.getLogger(__name__)

organization_config = CrudConfig(
    model=Organization,
    model_name="Organization",
    id_field="organization_id",
    create_schema=OrganizationCreate,
    update_schema=OrganizationUpdate,
)

organization_contact_config = CrudConfig(
    model=OrganizationContact,
    model_name="OrganizationContact",
    id_field="organization_contact_id",
    create_schema=OrganizationContactCreate,
    update_schema=OrganizationContactUpdate,
)


class OrganizationContactController(CrudController):
    """
    Contacts of client organizations.

    Business rules on create and update:
        - the organization must exist
        - an organization has at most one PRIMARY contact
        - the same email and contact type cannot be added twice
        - name and phone are trimmed, email is trimmed and lower-cased
    """

    _IDENTITY_FIELDS = frozenset({"organization_id", "email", "contact_type"})

    def create(self, repo: EntityRepository, body: Any) -> JSONResponse:
        data, error = self.validate(self.config.create_schema, body)
        if error is not None:
            return error

        data["email"] = data["email"].strip().lower()

        try:
            error = self._check_organization(repo, data["organization_id"])
            if error is None:
                error = self._check_conflicts(repo, data)
            if error is not None:
                return error
            contact = repo.create(data)
        except StorageError as exc:
            if exc.outcome is StorageOutcome.FOREIGN_KEY_VIOLATION:
                return send_error("Related organization not found", 404)
            return self.storage_failure("create", exc)
        except Exception as exc:
            return self.storage_failure("create", exc)

        return send_success(contact, 201)

    def update(self, repo: EntityRepository, record_id: Any, body: Any) -> JSONResponse:
        error = self.missing_id(record_id)
        if error is not None:
            return error
        data, error = self.validate(self.config.update_schema, body, partial=True)
        if error is not None:
            return error

        if "email" in data:
            data["email"] = data["email"].strip().lower()

        try:
            existing = repo.find_unique(record_id)
            if existing is None:
                return send_error(f"{self.model_name} not found", 404)

            if self._IDENTITY_FIELDS & data.keys():
                merged = {**existing, **data}
                if merged["organization_id"] != existing["organization_id"]:
                    error = self._check_organization(repo, merged["organization_id"])
                if error is None:
                    error = self._check_conflicts(repo, merged, exclude_id=record_id)
                if error is not None:
                    return error

            contact = repo.update(record_id, data)
        except StorageError as exc:
            return self.map_write_error("update", exc)
        except Exception as exc:
            return self.storage_failure("update", exc)

        return send_success(contact)

    def get_by_organization(
        self,
        repo: EntityRepository,
        organization_id: str,
        page: Any = None,
        limit: Any = None,
    ) -> JSONResponse:
        """Contacts for one organization, PRIMARY first, then by name."""
        if not organization_id or not organization_id.strip():
            return send_error("Organization ID is required", 400)
        return self.list_filtered(
            repo,
            page,
            limit,
            order_by=[("contact_type", "desc"), ("name", "asc")],
            where={"organization_id": organization_id},
        )

    def get_primary_contact(self, repo: EntityRepository, organization_id: str) -> JSONResponse:
        """The PRIMARY contact of one organization."""
        if not organization_id or not organization_id.strip():
            return send_error("Organization ID is required", 400)
        try:
            contact = repo.find_first(
                {"organization_id": organization_id, "contact_type": ContactType.PRIMARY.value}
            )
        except Exception as exc:
            return self.storage_failure("get", exc)
        if contact is None:
            return send_error("Primary contact not found for this organization", 404)
        return send_success(contact)

    def _check_organization(
        self, repo: EntityRepository, organization_id: str
    ) -> JSONResponse | None:
        organizations = repo.sibling(Organization, organization_config.id_field)
        if organizations.find_unique(organization_id) is None:
            return send_error("Organization not found", 404)
        return None

    def _check_conflicts(
        self, repo: EntityRepository, contact: dict[str, Any], exclude_id: Any = None
    ) -> JSONResponse | None:
        """Enforce the single-PRIMARY and no-identical-contact rules."""
        organization_id = contact["organization_id"]
        others = {} if exclude_id is None else {self.config.id_field: Compare("ne", exclude_id)}

        if contact["contact_type"] == ContactType.PRIMARY.value:
            existing_primary = repo.find_first(
                {
                    "organization_id": organization_id,
                    "contact_type": ContactType.PRIMARY.value,
                    **others,
                }
            )
            if existing_primary is not None:
                logger.info("Rejected second primary contact for %s", organization_id)
                return send_error("Primary contact already exists for this organization", 409)

        duplicate = repo.find_first(
            {
                "organization_id": organization_id,
                "email": contact["email"],
                "contact_type": contact["contact_type"],
                **others,
            }
        )
        if duplicate is not None:
            return send_error("Identical contact already exists for this organization", 409)
        return None


organization_controller = create_crud_controller(organization_config)
organization_contact_controller = OrganizationContactController(organization_contact_config)
