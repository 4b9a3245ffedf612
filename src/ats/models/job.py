"""Job and JobRate database models."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.sql import func

from ats.database import Base
from ats.models.base import generate_uuid


class Job(Base):
    """
    Job model representing an opening at a client organization.

    Attributes:
        job_id: Primary key (UUID string)
        organization_id: Foreign key to organizations table
        job_title: Job title
        job_type: TEMPORARY or PERMANENT
        status: DRAFT, OPEN or CLOSED
        location: Job location
        start_date: Expected start date
        end_date: Expected end date
        created_at: Timestamp when record was created
    """

    __tablename__ = "jobs"

    job_id = Column(String(36), primary_key=True, default=generate_uuid)
    organization_id = Column(
        String(36), ForeignKey("organizations.organization_id"), nullable=False, index=True
    )
    job_title = Column(String, nullable=False)
    job_type = Column(String, nullable=False)
    status = Column(String, default="DRAFT", nullable=False)
    location = Column(String, nullable=False)
    start_date = Column(DateTime, nullable=True)
    end_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of Job."""
        return f"<Job(job_id={self.job_id}, job_title='{self.job_title}')>"


class JobRate(Base):
    """
    Pay and bill rates for a job. A job has at most one rate.

    Attributes:
        job_rate_id: Primary key (UUID string)
        job_id: Foreign key to jobs table (unique)
        pay_rate: Hourly pay rate
        bill_rate: Hourly bill rate
        markup_percentage: Markup over pay rate
        overtime_rule: Free-text overtime rule
        hours: Expected weekly hours
        ot_pay_rate: Overtime pay rate
        ot_bill_rate: Overtime bill rate
        created_at: Timestamp when record was created
    """

    __tablename__ = "job_rates"

    job_rate_id = Column(String(36), primary_key=True, default=generate_uuid)
    job_id = Column(
        String(36), ForeignKey("jobs.job_id"), nullable=False, unique=True, index=True
    )
    pay_rate = Column(Float, nullable=True)
    bill_rate = Column(Float, nullable=False)
    markup_percentage = Column(Float, nullable=True)
    overtime_rule = Column(String, nullable=True)
    hours = Column(Integer, nullable=False)
    ot_pay_rate = Column(Float, nullable=True)
    ot_bill_rate = Column(Float, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of JobRate."""
        return f"<JobRate(job_rate_id={self.job_rate_id}, job_id={self.job_id})>"
