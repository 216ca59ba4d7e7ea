# firmness/api/responses.py
"""
Translation of service results into HTTP responses.

Failures are classified by their message: "not found" maps to 404 and
"already exists" to 409 (both case-insensitive); anything else is a 400.
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from firmness.services.base.service_result import ServiceResult

logger = logging.getLogger(__name__)


def status_for_failure(message: str) -> int:
    lowered = message.lower()
    if "not found" in lowered:
        return status.HTTP_404_NOT_FOUND
    if "already exists" in lowered:
        return status.HTTP_409_CONFLICT
    return status.HTTP_400_BAD_REQUEST


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def failure_response(result: ServiceResult[Any]) -> JSONResponse:
    status_code = status_for_failure(result.message)
    logger.warning(f"{status_code}: {result.message}")
    return error_response(result.message, status_code)


def to_response(
    result: ServiceResult[Any],
    success_status: int = status.HTTP_200_OK,
) -> Response:
    """Render ``result`` as JSON, or an empty body for 204."""
    if result.is_failure:
        return failure_response(result)
    if success_status == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return JSONResponse(status_code=success_status, content=jsonable_encoder(result.data))
