"""API routers package."""

from ats.routers.applicants import applicant_router
from ats.routers.applications import application_router, assignment_router
from ats.routers.jobs import job_rate_router, job_router
from ats.routers.organizations import contact_router, organization_router

# Mounted under /api
api_routers = [
    organization_router,
    contact_router,
    job_router,
    job_rate_router,
    applicant_router,
    application_router,
    assignment_router,
]

__all__ = ["api_routers"]
