"""Pydantic schemas package."""

from ats.schemas.applicant import ApplicantCreate, ApplicantUpdate
from ats.schemas.application import (
    ApplicationCreate,
    ApplicationStatus,
    ApplicationUpdate,
    AssignmentCreate,
    AssignmentUpdate,
    EmploymentType,
)
from ats.schemas.job import JobCreate, JobRateCreate, JobRateUpdate, JobStatus, JobType, JobUpdate
from ats.schemas.organization import (
    ContactType,
    OrganizationContactCreate,
    OrganizationContactUpdate,
    OrganizationCreate,
    OrganizationStatus,
    OrganizationUpdate,
)

__all__ = [
    "ApplicantCreate",
    "ApplicantUpdate",
    "ApplicationCreate",
    "ApplicationStatus",
    "ApplicationUpdate",
    "AssignmentCreate",
    "AssignmentUpdate",
    "ContactType",
    "EmploymentType",
    "JobCreate",
    "JobRateCreate",
    "JobRateUpdate",
    "JobStatus",
    "JobType",
    "JobUpdate",
    "OrganizationContactCreate",
    "OrganizationContactUpdate",
    "OrganizationCreate",
    "OrganizationStatus",
    "OrganizationUpdate",
]
