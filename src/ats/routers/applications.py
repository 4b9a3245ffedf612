"""Application and assignment routes."""

from fastapi import Depends

from ats.controllers.application import application_controller, assignment_controller
from ats.crud import EntityRepository, build_crud_router, repository_dependency

application_router = build_crud_router(application_controller, prefix="/applications")
get_application_repository = repository_dependency(application_controller.config)

assignment_router = build_crud_router(assignment_controller, prefix="/assignments")
get_assignment_repository = repository_dependency(assignment_controller.config)


@application_router.get("/job/{job_id}")
def list_applications_by_job(
    job_id: str,
    page: str | None = None,
    limit: str | None = None,
    repo: EntityRepository = Depends(get_application_repository),
):
    """List the applications received for a job."""
    return application_controller.get_by_job(repo, job_id, page, limit)


@application_router.get("/applicant/{applicant_id}")
def list_applications_by_applicant(
    applicant_id: str,
    page: str | None = None,
    limit: str | None = None,
    repo: EntityRepository = Depends(get_application_repository),
):
    """List the applications submitted by an applicant."""
    return application_controller.get_by_applicant(repo, applicant_id, page, limit)


@application_router.get("/status/{status}")
def list_applications_by_status(
    status: str,
    page: str | None = None,
    limit: str | None = None,
    repo: EntityRepository = Depends(get_application_repository),
):
    return application_controller.get_by_status(repo, status, page, limit)


@assignment_router.get("/application/{application_id}")
def get_assignment_by_application(
    application_id: str, repo: EntityRepository = Depends(get_assignment_repository)
):
    """Get the assignment created from an application."""
    return assignment_controller.get_by_application(repo, application_id)


@assignment_router.get("/employment-type/{employment_type}")
def list_assignments_by_employment_type(
    employment_type: str,
    page: str | None = None,
    limit: str | None = None,
    repo: EntityRepository = Depends(get_assignment_repository),
):
    """List assignments of one employment type (W2 or CONTRACTOR_1099)."""
    return assignment_controller.get_by_employment_type(repo, employment_type, page, limit)


@assignment_router.get("/status/active")
def list_active_assignments(
    page: str | None = None,
    limit: str | None = None,
    repo: EntityRepository = Depends(get_assignment_repository),
):
    """List assignments that have not ended yet."""
    return assignment_controller.get_active(repo, page, limit)


@assignment_router.get("/status/completed")
def list_completed_assignments(
    page: str | None = None,
    limit: str | None = None,
    repo: EntityRepository = Depends(get_assignment_repository),
):
    """List assignments whose end date has passed."""
    return assignment_controller.get_completed(repo, page, limit)
