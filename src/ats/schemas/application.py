"""Application and assignment Pydantic schemas."""

from enum import Enum

from pydantic import Field

from ats.schemas.common import NaiveDateTime, PartialInput, StrictInput


class ApplicationStatus(str, Enum):
    """Application status enumeration."""

    APPLIED = "APPLIED"
    SCREENED = "SCREENED"
    OFFERED = "OFFERED"
    HIRED = "HIRED"


class EmploymentType(str, Enum):
    """Assignment employment type enumeration."""

    W2 = "W2"
    CONTRACTOR_1099 = "CONTRACTOR_1099"


class ApplicationCreate(StrictInput):
    """Schema for creating an application."""

    job_id: str = Field(min_length=1)
    applicant_id: str = Field(min_length=1)
    source: str | None = None
    status: ApplicationStatus = ApplicationStatus.APPLIED
    applied_at: NaiveDateTime | None = None


class ApplicationUpdate(PartialInput):
    """Schema for updating an application. Job and applicant are fixed."""

    nullable_fields = frozenset({"source"})

    source: str | None = None
    status: ApplicationStatus | None = None
    applied_at: NaiveDateTime | None = None


class AssignmentCreate(StrictInput):
    """Schema for creating an assignment."""

    application_id: str = Field(min_length=1)
    start_date: NaiveDateTime
    end_date: NaiveDateTime | None = None
    employment_type: EmploymentType
    workers_comp_code: str | None = None


class AssignmentUpdate(PartialInput):
    """Schema for updating an assignment."""

    nullable_fields = frozenset({"end_date", "workers_comp_code"})

    application_id: str | None = Field(default=None, min_length=1)
    start_date: NaiveDateTime | None = None
    end_date: NaiveDateTime | None = None
    employment_type: EmploymentType | None = None
    workers_comp_code: str | None = None
