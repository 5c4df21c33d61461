# This file defines request and response schemas for registration and login.
# It exists so missing credentials are rejected before any store access happens.
# Field aliases keep the camelCase names the browser front end already sends and reads.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from legit_city.api.schemas.common import REQUEST_MODEL_CONFIG


class RegisterRequest(BaseModel):
    model_config = REQUEST_MODEL_CONFIG

    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)
    account_type: str = Field(alias="accountType", min_length=1, max_length=50)


class LoginRequest(BaseModel):
    model_config = REQUEST_MODEL_CONFIG

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    email: str
    account_type: str = Field(alias="accountType")
    verified: int = 0
    subscription_expires_at: datetime | None = None


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    redirect_url: str = Field(alias="redirectUrl")
    user: LoginUser
