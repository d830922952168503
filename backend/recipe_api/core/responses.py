"""
Response envelope shared by every endpoint.

Success: ``{"success": true, "data": ..., "message": ...}``
Failure: ``{"success": false, "message": ...}``
"""
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

_UNSET: Any = object()


def success_response(
    data: Any = _UNSET,
    message: str | None = None,
    status_code: int = status.HTTP_200_OK,
    **extra: Any,
) -> JSONResponse:
    """
    Build a successful envelope.

    Args:
        data: Payload placed under ``data`` (omitted when not given)
        message: Optional human readable message
        status_code: HTTP status of the response
        **extra: Additional top-level keys (e.g. ``accessToken``)
    """
    body: dict[str, Any] = {"success": True}
    body.update(extra)
    if data is not _UNSET:
        body["data"] = data
    if message is not None:
        body["message"] = message
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def error_response(
    message: str,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )
