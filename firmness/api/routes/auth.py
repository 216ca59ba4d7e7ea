# firmness/api/routes/auth.py

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from firmness.api.deps import get_auth_service
from firmness.api.responses import error_response, to_response
from firmness.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserRead
from firmness.services.auth.auth_service import AuthService
from firmness.services.base.service_result import ErrorCode

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register a customer account",
)
def register(
    payload: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> Response:
    result = service.register(payload.email, payload.password, payload.full_name)
    return to_response(result, status.HTTP_201_CREATED)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Exchange credentials for a bearer token",
)
def login(
    payload: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> Response:
    result = service.login(payload.email, payload.password)
    if result.is_failure and result.error.code is ErrorCode.VALIDATION_ERROR:
        return error_response(result.message, status.HTTP_401_UNAUTHORIZED)
    return to_response(result)
