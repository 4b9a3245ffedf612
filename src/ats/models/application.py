"""Application and Assignment database models."""

from sqlalchemy import Column, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.sql import func

from ats.database import Base
from ats.models.base import generate_uuid


class Application(Base):
    """
    Application linking an applicant to a job.

    Attributes:
        application_id: Primary key (UUID string)
        job_id: Foreign key to jobs table
        applicant_id: Foreign key to applicants table
        source: Where the applicant came from
        status: APPLIED, SCREENED, OFFERED or HIRED
        applied_at: When the application was submitted
        created_at: Timestamp when record was created
    """

    __tablename__ = "applications"

    application_id = Column(String(36), primary_key=True, default=generate_uuid)
    job_id = Column(String(36), ForeignKey("jobs.job_id"), nullable=False, index=True)
    applicant_id = Column(
        String(36), ForeignKey("applicants.applicant_id"), nullable=False, index=True
    )
    source = Column(String, nullable=True)
    status = Column(String, default="APPLIED", nullable=False)
    applied_at = Column(DateTime, server_default=func.now(), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    # An applicant applies to a job once
    __table_args__ = (UniqueConstraint("job_id", "applicant_id", name="_job_applicant_uc"),)

    def __repr__(self) -> str:
        """String representation of Application."""
        return (
            f"<Application(application_id={self.application_id}, job_id={self.job_id}, "
            f"applicant_id={self.applicant_id}, status='{self.status}')>"
        )


class Assignment(Base):
    """
    Post-hire assignment. An application has at most one assignment.

    Attributes:
        assignment_id: Primary key (UUID string)
        application_id: Foreign key to applications table (unique)
        start_date: Assignment start
        end_date: Assignment end, must be after start_date
        employment_type: W2 or CONTRACTOR_1099
        workers_comp_code: Workers' compensation class code
        created_at: Timestamp when record was created
    """

    __tablename__ = "assignments"

    assignment_id = Column(String(36), primary_key=True, default=generate_uuid)
    application_id = Column(
        String(36),
        ForeignKey("applications.application_id"),
        nullable=False,
        unique=True,
        index=True,
    )
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=True)
    employment_type = Column(String, nullable=False)
    workers_comp_code = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of Assignment."""
        return (
            f"<Assignment(assignment_id={self.assignment_id}, "
            f"application_id={self.application_id})>"
        )
