"""HTTP route definitions for the user service."""

from __future__ import annotations

import logging
from typing import Any

import jwt
from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from pydantic import BaseModel, Field

from account_schemas import UserProfile, UserSummary

from ..domain.account import Principal
from ..domain.contracts import DeactivateAccountInput, UpdateUserInput
from ..domain.errors import UserServiceError
from ..domain.service import UserService
from ..security.tokens import decode_access_token, principal_from_claims

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1")


class UpdateUserRequest(BaseModel):
    """Partial profile update; omitted fields keep their stored value."""

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    phone_number: str | None = Field(default=None, max_length=32)


class DeactivateAccountRequest(BaseModel):
    confirmation: bool
    reason: str | None = Field(default=None, max_length=500)


class UserEnvelope(BaseModel):
    user: UserProfile


class UpdateUserResponse(BaseModel):
    status: str
    message: str
    user: UserSummary


class DeactivateAccountResponse(BaseModel):
    is_active: bool
    message: str


def get_service(request: Request) -> UserService:
    """Resolve the `UserService` stored on the FastAPI application state."""
    service: UserService = request.app.state.user_service
    return service


def get_principal(authorization: str | None = Header(default=None)) -> Principal:
    """Derive the acting principal from a ``Bearer`` token."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return principal_from_claims(decode_access_token(token))
    except (jwt.PyJWTError, ValueError) as exc:
        logger.info("rejected bearer token: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


@router.get("/users/{user_id}", response_model=UserEnvelope)
def get_user(
    user_id: str,
    service: UserService = Depends(get_service),
) -> UserEnvelope:
    """Return a user's stored data without the password."""
    try:
        data = service.get_user_data_without_password_by_id(user_id)
    except UserServiceError as exc:
        raise _http_error(exc) from exc
    return UserEnvelope(user=_profile(data["user"]))


@router.patch("/users/{user_id}", response_model=UpdateUserResponse)
def update_user(
    user_id: str,
    payload: UpdateUserRequest,
    principal: Principal = Depends(get_principal),
    service: UserService = Depends(get_service),
) -> UpdateUserResponse:
    """Update profile fields of the target user; requires ownership or a privileged role."""
    try:
        result = service.update_user(
            user_id,
            UpdateUserInput(
                first_name=payload.first_name,
                last_name=payload.last_name,
                phone_number=payload.phone_number,
            ),
            principal,
        )
    except UserServiceError as exc:
        raise _http_error(exc) from exc
    return UpdateUserResponse(
        status=result.status,
        message=result.message,
        user=UserSummary.model_validate(result.user),
    )


@router.post("/users/me/deactivate", response_model=DeactivateAccountResponse)
def deactivate_account(
    payload: DeactivateAccountRequest,
    principal: Principal = Depends(get_principal),
    service: UserService = Depends(get_service),
) -> DeactivateAccountResponse:
    """Deactivate the caller's own account."""
    try:
        result = service.deactivate_user(
            principal.id,
            DeactivateAccountInput(confirmation=payload.confirmation, reason=payload.reason),
        )
    except UserServiceError as exc:
        raise _http_error(exc) from exc
    return DeactivateAccountResponse(is_active=result.is_active, message=result.message)


def _profile(view: dict[str, Any]) -> UserProfile:
    return UserProfile.model_validate(view)


def _http_error(exc: UserServiceError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.to_dict())
