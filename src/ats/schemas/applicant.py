"""Applicant Pydantic schemas."""

from pydantic import EmailStr, Field

from ats.schemas.common import PartialInput, StrictInput


class ApplicantCreate(StrictInput):
    """Schema for creating an applicant."""

    full_name: str = Field(min_length=1)
    email: EmailStr
    phone: str | None = None


class ApplicantUpdate(PartialInput):
    """Schema for updating an applicant."""

    nullable_fields = frozenset({"phone"})

    full_name: str | None = Field(default=None, min_length=1)
    email: EmailStr | None = None
    phone: str | None = None
