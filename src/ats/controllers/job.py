"""Job and job rate controllers."""

from __future__ import annotations

import logging
from typing import Any

from fastapi.responses import JSONResponse

from ats.crud import (
    CrudConfig,
    CrudController,
    EntityRepository,
    FieldError,
    StorageError,
    StorageOutcome,
    send_error,
    send_success,
)
from ats.models.job import Job, JobRate
from ats.schemas.job import JobCreate, JobRateCreate, JobRateUpdate, JobStatus, JobUpdate

logger = logging.getLogger(__name__)

job_config = CrudConfig(
    model=Job,
    model_name="Job",
    id_field="job_id",
    create_schema=JobCreate,
    update_schema=JobUpdate,
)

job_rate_config = CrudConfig(
    model=JobRate,
    model_name="Job Rate",
    id_field="job_rate_id",
    create_schema=JobRateCreate,
    update_schema=JobRateUpdate,
)


class JobController(CrudController):
    """Jobs, plus listing by status."""

    def get_by_status(
        self, repo: EntityRepository, status: str, page: Any = None, limit: Any = None
    ) -> JSONResponse:
        """Paginated jobs in one status, newest first."""
        valid = [s.value for s in JobStatus]
        normalized = status.strip().upper()
        if normalized not in valid:
            return send_error(f"Invalid job status. Must be one of: {', '.join(valid)}", 400)

        return self.list_filtered(
            repo, page, limit, order_by=[("created_at", "desc")], where={"status": normalized}
        )


class JobRateController(CrudController):
    """Job rates. A job can only have one rate."""

    def create(self, repo: EntityRepository, body: Any) -> JSONResponse:
        data, error = self.validate(self.config.create_schema, body)
        if error is not None:
            return error

        try:
            existing = repo.find_first({"job_id": data["job_id"]})
            if existing is not None:
                return send_error(
                    "Job Rate already exists for this job",
                    409,
                    [
                        FieldError(
                            field="duplicate",
                            message=f"Job Rate already exists with job_rate_id: {existing['job_rate_id']}",
                        )
                    ],
                )
            record = repo.create(data)
        except StorageError as exc:
            if exc.outcome is StorageOutcome.UNIQUE_VIOLATION:
                return send_error("Job Rate already exists for this job", 409)
            if exc.outcome is StorageOutcome.FOREIGN_KEY_VIOLATION:
                return send_error("Related job not found", 404)
            return self.storage_failure("create", exc)
        except Exception as exc:
            return self.storage_failure("create", exc)

        return send_success(record, 201)

    def get_by_job(self, repo: EntityRepository, job_id: str) -> JSONResponse:
        if not job_id or not job_id.strip():
            return send_error("Job ID is required", 400)
        try:
            record = repo.find_first({"job_id": job_id})
        except Exception as exc:
            return self.storage_failure("get", exc)
        if record is None:
            return send_error("Job Rate not found for this job", 404)
        return send_success(record)


job_controller = JobController(job_config)
job_rate_controller = JobRateController(job_rate_config)
