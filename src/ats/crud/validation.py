"""Request body validation against pydantic schemas."""

from dataclasses import asdict, dataclass
from typing import Any

from pydantic import BaseModel, ValidationError


@dataclass(frozen=True)
class FieldError:
    """One violated rule: the dotted field path and a message."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def validate_body(
    schema: type[BaseModel], body: Any
) -> tuple[BaseModel | None, list[FieldError] | None]:
    """
    Validate a request body.

    Args:
        schema: Pydantic model class to validate against
        body: Decoded JSON body

    Returns:
        ``(parsed, None)`` on success, ``(None, errors)`` on failure with one
        ``FieldError`` per violated rule
    """
    if not isinstance(body, dict):
        return None, [FieldError(field="", message="Request body must be a JSON object")]
    try:
        parsed = schema.model_validate(body)
    except ValidationError as exc:
        errors = [
            FieldError(field=".".join(str(part) for part in err["loc"]), message=err["msg"])
            for err in exc.errors()
        ]
        return None, errors
    return parsed, None
