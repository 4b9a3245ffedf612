"""Applicant database model."""

from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from ats.database import Base
from ats.models.base import generate_uuid


class Applicant(Base):
    """
    Applicant model representing a candidate.

    Attributes:
        applicant_id: Primary key (UUID string)
        full_name: Applicant full name
        email: Applicant email (unique)
        phone: Applicant phone number
        created_at: Timestamp when record was created
    """

    __tablename__ = "applicants"

    applicant_id = Column(String(36), primary_key=True, default=generate_uuid)
    full_name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    phone = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of Applicant."""
        return f"<Applicant(applicant_id={self.applicant_id}, full_name='{self.full_name}')>"
