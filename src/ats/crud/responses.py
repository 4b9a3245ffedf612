"""Uniform response envelope helpers."""

from collections.abc import Sequence
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ats.crud.validation import FieldError


def send_success(data: Any, status_code: int = 200) -> JSONResponse:
    """Wrap ``data`` in a ``{success, data, statusCode}`` envelope."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"success": True, "data": data, "statusCode": status_code}),
    )


def send_error(
    message: str,
    status_code: int = 500,
    errors: Sequence[FieldError | dict[str, str]] | None = None,
) -> JSONResponse:
    """
    Build an error envelope.

    Args:
        message: Human-readable error message
        status_code: HTTP status code
        errors: Optional field-level details, included under ``errors``

    Returns:
        JSONResponse with ``{success: false, error, statusCode[, errors]}``
    """
    content: dict[str, Any] = {"success": False, "error": message, "statusCode": status_code}
    if errors is not None:
        content["errors"] = [
            err.to_dict() if isinstance(err, FieldError) else dict(err) for err in errors
        ]
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))
