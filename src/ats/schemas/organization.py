"""Organization Pydantic schemas."""

from enum import Enum

from pydantic import EmailStr, Field

from ats.schemas.common import PartialInput, StrictInput, TrimmedStr


class OrganizationStatus(str, Enum):
    """Organization status enumeration."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class ContactType(str, Enum):
    """Organization contact type enumeration."""

    PRIMARY = "PRIMARY"
    EMERGENCY = "EMERGENCY"


class OrganizationCreate(StrictInput):
    """Schema for creating a new organization."""

    name: str = Field(min_length=1)
    website: str | None = None
    phone: str | None = None
    status: OrganizationStatus = OrganizationStatus.ACTIVE


class OrganizationUpdate(PartialInput):
    """Schema for updating an organization; every field optional."""

    nullable_fields = frozenset({"website", "phone"})

    name: str | None = Field(default=None, min_length=1)
    website: str | None = None
    phone: str | None = None
    status: OrganizationStatus | None = None


class OrganizationContactCreate(StrictInput):
    """Schema for creating an organization contact."""

    organization_id: str = Field(min_length=1)
    name: TrimmedStr
    email: EmailStr
    phone: TrimmedStr
    contact_type: ContactType


class OrganizationContactUpdate(PartialInput):
    """Schema for updating an organization contact."""

    organization_id: str | None = Field(default=None, min_length=1)
    name: TrimmedStr | None = None
    email: EmailStr | None = None
    phone: TrimmedStr | None = None
    contact_type: ContactType | None = None
