"""Organization database models."""

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.sql import func

from ats.database import Base
from ats.models.base import generate_uuid


class Organization(Base):
    """
    Organization model representing client companies.

    Attributes:
        organization_id: Primary key (UUID string)
        name: Organization name
        website: Organization website URL
        phone: Main phone number
        status: ACTIVE or INACTIVE
        created_at: Timestamp when record was created
    """

    __tablename__ = "organizations"

    organization_id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String, nullable=False, index=True)
    website = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    status = Column(String, default="ACTIVE", nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of Organization."""
        return f"<Organization(organization_id={self.organization_id}, name='{self.name}')>"


class OrganizationContact(Base):
    """
    Contact person at a client organization.

    Attributes:
        organization_contact_id: Primary key (UUID string)
        organization_id: Foreign key to organizations table
        name: Contact name
        email: Contact email (stored lower-cased)
        phone: Contact phone number
        contact_type: PRIMARY or EMERGENCY
        created_at: Timestamp when record was created
    """

    __tablename__ = "organization_contacts"

    organization_contact_id = Column(String(36), primary_key=True, default=generate_uuid)
    organization_id = Column(
        String(36), ForeignKey("organizations.organization_id"), nullable=False, index=True
    )
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    contact_type = Column(String, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of OrganizationContact."""
        return (
            f"<OrganizationContact(organization_contact_id={self.organization_contact_id}, "
            f"organization_id={self.organization_id}, type='{self.contact_type}')>"
        )
