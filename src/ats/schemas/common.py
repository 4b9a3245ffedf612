"""Shared schema types."""

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    StringConstraints,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError


def _to_naive_utc(value: datetime) -> datetime:
    """Normalize aware datetimes to naive UTC, matching how rows are stored."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


NaiveDateTime = Annotated[datetime, AfterValidator(_to_naive_utc)]

# Trimmed before the length check, so whitespace-only values are rejected
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class StrictInput(BaseModel):
    """Base for request bodies: unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", use_enum_values=True, validate_default=True)


class PartialInput(StrictInput):
    """
    Base for update bodies.

    Every field may be omitted, but an explicit ``null`` is only accepted
    for the fields named in ``nullable_fields`` (nullable columns).
    """

    model_config = ConfigDict(validate_default=False)

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name not in cls.nullable_fields:
            raise PydanticCustomError("null_not_allowed", "Field cannot be null")
        return value
