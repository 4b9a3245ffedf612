"""Job and job rate routes."""

from fastapi import Depends

from ats.controllers.job import job_controller, job_rate_controller
from ats.crud import EntityRepository, build_crud_router, repository_dependency

job_router = build_crud_router(job_controller, prefix="/jobs")
get_job_repository = repository_dependency(job_controller.config)

job_rate_router = build_crud_router(job_rate_controller, prefix="/job-rates")
get_job_rate_repository = repository_dependency(job_rate_controller.config)


@job_router.get("/status/{status}")
def list_jobs_by_status(
    status: str,
    page: str | None = None,
    limit: str | None = None,
    repo: EntityRepository = Depends(get_job_repository),
):
    """List jobs in a given status (DRAFT, OPEN, CLOSED)."""
    return job_controller.get_by_status(repo, status, page, limit)


@job_rate_router.get("/job/{job_id}")
def get_job_rate_by_job(
    job_id: str, repo: EntityRepository = Depends(get_job_rate_repository)
):
    """Get the rate attached to a job."""
    return job_rate_controller.get_by_job(repo, job_id)
