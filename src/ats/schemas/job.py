"""Job-related Pydantic schemas."""

from enum import Enum

from pydantic import Field

from ats.schemas.common import NaiveDateTime, PartialInput, StrictInput


class JobStatus(str, Enum):
    """Job status enumeration."""

    DRAFT = "DRAFT"
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class JobType(str, Enum):
    """Job type enumeration."""

    TEMPORARY = "TEMPORARY"
    PERMANENT = "PERMANENT"


class JobCreate(StrictInput):
    """Schema for creating a job."""

    organization_id: str = Field(min_length=1)
    job_title: str = Field(min_length=1)
    job_type: JobType
    status: JobStatus = JobStatus.DRAFT
    location: str = Field(min_length=1)
    start_date: NaiveDateTime | None = None
    end_date: NaiveDateTime | None = None


class JobUpdate(PartialInput):
    """Schema for updating a job."""

    nullable_fields = frozenset({"start_date", "end_date"})

    organization_id: str | None = Field(default=None, min_length=1)
    job_title: str | None = Field(default=None, min_length=1)
    job_type: JobType | None = None
    status: JobStatus | None = None
    location: str | None = Field(default=None, min_length=1)
    start_date: NaiveDateTime | None = None
    end_date: NaiveDateTime | None = None


class JobRateCreate(StrictInput):
    """Schema for creating a job rate."""

    job_id: str = Field(min_length=1)
    pay_rate: float | None = Field(default=None, gt=0)
    bill_rate: float = Field(gt=0)
    markup_percentage: float | None = Field(default=None, gt=0)
    overtime_rule: str | None = None
    hours: int = Field(gt=0)
    ot_pay_rate: float | None = Field(default=None, gt=0)
    ot_bill_rate: float | None = Field(default=None, gt=0)


class JobRateUpdate(PartialInput):
    """Schema for updating a job rate."""

    nullable_fields = frozenset(
        {"pay_rate", "markup_percentage", "overtime_rule", "ot_pay_rate", "ot_bill_rate"}
    )

    job_id: str | None = Field(default=None, min_length=1)
    pay_rate: float | None = Field(default=None, gt=0)
    bill_rate: float | None = Field(default=None, gt=0)
    markup_percentage: float | None = Field(default=None, gt=0)
    overtime_rule: str | None = None
    hours: int | None = Field(default=None, gt=0)
    ot_pay_rate: float | None = Field(default=None, gt=0)
    ot_bill_rate: float | None = Field(default=None, gt=0)
