"""Database models package."""

from ats.models.applicant import Applicant
from ats.models.application import Application, Assignment
from ats.models.job import Job, JobRate
from ats.models.organization import Organization, OrganizationContact

__all__ = [
    "Applicant",
    "Application",
    "Assignment",
    "Job",
    "JobRate",
    "Organization",
    "OrganizationContact",
]
