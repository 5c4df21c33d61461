# This file defines the registration and login endpoints.
# It exists so credential handling stays behind a small, explicit HTTP surface.
# Login answers with a dashboard redirect target rather than a session or token.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from legit_city.api.dependencies import get_auth_service
from legit_city.api.schemas.auth_schemas import LoginRequest, LoginResponse, RegisterRequest
from legit_city.api.schemas.common import MessageResponse
from legit_city.api.services.auth_service import AuthService

router = APIRouter(tags=["auth"])
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, service: AuthServiceDep) -> dict[str, object]:
    service.register(payload)
    return {"success": True, "message": "Registration successful"}


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, service: AuthServiceDep) -> dict[str, object]:
    return service.login(payload)
