"""Application and assignment controllers."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi.responses import JSONResponse

from ats.crud import (
    AnyOf,
    Compare,
    CrudConfig,
    CrudController,
    EntityRepository,
    FieldError,
    StorageError,
    StorageOutcome,
    send_error,
    send_success,
)
from ats.models.application import Application, Assignment
from ats.schemas.application import (
    ApplicationCreate,
    ApplicationStatus,
    ApplicationUpdate,
    AssignmentCreate,
    AssignmentUpdate,
    EmploymentType,
)

logger = logging.getLogger(__name__)

application_config = CrudConfig(
    model=Application,
    model_name="Application",
    id_field="application_id",
    create_schema=ApplicationCreate,
    update_schema=ApplicationUpdate,
)

assignment_config = CrudConfig(
    model=Assignment,
    model_name="Assignment",
    id_field="assignment_id",
    create_schema=AssignmentCreate,
    update_schema=AssignmentUpdate,
)


def _ends_before_start(start: datetime | None, end: datetime | None) -> bool:
    return start is not None and end is not None and end <= start


def _utcnow() -> datetime:
    # Stored timestamps are naive UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ApplicationController(CrudController):
    """Applications, plus listings per job, per applicant and per status."""

    def get_by_job(
        self, repo: EntityRepository, job_id: str, page: Any = None, limit: Any = None
    ) -> JSONResponse:
        if not job_id or not job_id.strip():
            return send_error("Job ID is required", 400)
        return self.list_filtered(
            repo, page, limit, order_by=[("applied_at", "desc")], where={"job_id": job_id}
        )

    def get_by_applicant(
        self, repo: EntityRepository, applicant_id: str, page: Any = None, limit: Any = None
    ) -> JSONResponse:
        if not applicant_id or not applicant_id.strip():
            return send_error("Applicant ID is required", 400)
        return self.list_filtered(
            repo,
            page,
            limit,
            order_by=[("applied_at", "desc")],
            where={"applicant_id": applicant_id},
        )

    def get_by_status(
        self, repo: EntityRepository, status: str, page: Any = None, limit: Any = None
    ) -> JSONResponse:
        """Paginated applications in one status, most recent first."""
        valid = [s.value for s in ApplicationStatus]
        normalized = status.strip().upper()
        if normalized not in valid:
            return send_error(f"Invalid status. Must be one of: {', '.join(valid)}", 400)
        return self.list_filtered(
            repo, page, limit, order_by=[("applied_at", "desc")], where={"status": normalized}
        )


class AssignmentController(CrudController):
    """
    Post-hire assignments.

    An assignment can only be created for a HIRED application, an
    application has at most one assignment, and ``end_date`` must fall
    after ``start_date``.

    An assignment is active while it has no ``end_date`` or the end date
    has not passed, and completed once ``end_date`` is in the past.
    """

    def create(self, repo: EntityRepository, body: Any) -> JSONResponse:
        data, error = self.validate(self.config.create_schema, body)
        if error is not None:
            return error

        if _ends_before_start(data["start_date"], data.get("end_date")):
            return send_error("End date must be after start date", 400)

        application_id = data["application_id"]
        try:
            applications = repo.sibling(Application, application_config.id_field)
            application = applications.find_unique(application_id)
            if application is None:
                return send_error("Application not found", 404)

            if application["status"] != ApplicationStatus.HIRED.value:
                return send_error(
                    "Assignment can only be created for HIRED applications",
                    400,
                    [
                        FieldError(
                            field="application_status",
                            message=(
                                f"Application status is {application['status']}. "
                                "Only HIRED applications can have assignments."
                            ),
                        )
                    ],
                )

            existing = repo.find_first({"application_id": application_id})
            if existing is not None:
                return send_error(
                    "Assignment already exists for this application",
                    409,
                    [
                        FieldError(
                            field="duplicate",
                            message=f"Assignment already exists with assignment_id: {existing['assignment_id']}",
                        )
                    ],
                )

            assignment = repo.create(data)
        except StorageError as exc:
            if exc.outcome is StorageOutcome.UNIQUE_VIOLATION:
                return send_error(
                    "Assignment already exists for this application",
                    409,
                    [
                        FieldError(
                            field="application_id",
                            message="An assignment has already been created for this application",
                        )
                    ],
                )
            if exc.outcome is StorageOutcome.FOREIGN_KEY_VIOLATION:
                return send_error("Related application not found", 404)
            return self.storage_failure("create", exc)
        except Exception as exc:
            return self.storage_failure("create", exc)

        return send_success(assignment, 201)

    def update(self, repo: EntityRepository, record_id: Any, body: Any) -> JSONResponse:
        error = self.missing_id(record_id)
        if error is not None:
            return error
        data, error = self.validate(self.config.update_schema, body, partial=True)
        if error is not None:
            return error

        try:
            existing = repo.find_unique(record_id)
            if existing is None:
                return send_error("Assignment not found", 404)

            if data.get("end_date") is not None:
                start = data.get("start_date") or existing["start_date"]
                if _ends_before_start(start, data["end_date"]):
                    return send_error("End date must be after start date", 400)

            assignment = repo.update(record_id, data)
        except StorageError as exc:
            return self.map_write_error("update", exc)
        except Exception as exc:
            return self.storage_failure("update", exc)

        return send_success(assignment)

    def get_by_application(self, repo: EntityRepository, application_id: str) -> JSONResponse:
        if not application_id or not application_id.strip():
            return send_error("Application ID is required", 400)
        try:
            assignment = repo.find_first({"application_id": application_id})
        except Exception as exc:
            return self.storage_failure("get", exc)
        if assignment is None:
            return send_error("Assignment not found for this application", 404)
        return send_success(assignment)

    def get_by_employment_type(
        self,
        repo: EntityRepository,
        employment_type: str,
        page: Any = None,
        limit: Any = None,
    ) -> JSONResponse:
        valid = [t.value for t in EmploymentType]
        normalized = employment_type.strip().upper()
        if normalized not in valid:
            return send_error(
                f"Invalid employment type. Must be one of: {', '.join(valid)}", 400
            )
        return self.list_filtered(
            repo,
            page,
            limit,
            order_by=[("start_date", "desc")],
            where={"employment_type": normalized},
        )

    def get_active(
        self,
        repo: EntityRepository,
        page: Any = None,
        limit: Any = None,
        now: datetime | None = None,
    ) -> JSONResponse:
        """Assignments without an end date or ending at or after ``now``."""
        now = now or _utcnow()
        return self.list_filtered(
            repo,
            page,
            limit,
            order_by=[("start_date", "desc")],
            where={"end_date": AnyOf((None, Compare("gte", now)))},
        )

    def get_completed(
        self,
        repo: EntityRepository,
        page: Any = None,
        limit: Any = None,
        now: datetime | None = None,
    ) -> JSONResponse:
        """Assignments whose end date has passed, most recently ended first."""
        now = now or _utcnow()
        return self.list_filtered(
            repo,
            page,
            limit,
            order_by=[("end_date", "desc")],
            where={"end_date": Compare("lt", now)},
        )


application_controller = ApplicationController(application_config)
assignment_controller = AssignmentController(assignment_config)
