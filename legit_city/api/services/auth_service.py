# This file implements user registration and credential checks.
# It exists so routers never touch password hashes or user SQL directly.
# Login failures are deliberately uniform: an unknown email and a wrong password look identical to the client.
# No session or token is issued; login only tells the browser where to go next.

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any
from urllib.parse import quote

from sqlalchemy.exc import IntegrityError

from legit_city.api.api_config import ApiConfig
from legit_city.api.db_access import DatabaseClient
from legit_city.api.error_handlers import AuthError, ConflictError, store_errors
from legit_city.api.passwords import hash_password, verify_password
from legit_city.api.schemas.auth_schemas import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

ADMIN_ACCOUNT_TYPE = "admin"
ADMIN_DASHBOARD_PATH = "/admin-dashboard"
USER_DASHBOARD_PATH = "/user-dashboard"


@lru_cache(maxsize=None)
def placeholder_hash(rounds: int) -> str:
    """Hash checked for unknown emails, at the same cost as stored hashes."""

    return hash_password("legit-city-placeholder", rounds=rounds)


def build_redirect_url(*, account_type: str, name: str, user_id: int) -> str:
    """Dashboard URL for a freshly logged-in user, carrying name and id as query parameters."""

    target = ADMIN_DASHBOARD_PATH if account_type == ADMIN_ACCOUNT_TYPE else USER_DASHBOARD_PATH
    return f"{target}?name={quote(name, safe='')}&id={user_id}"


class AuthService:
    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        self.config = config
        self.db = db

    def register(self, request: RegisterRequest) -> int:
        hashed = hash_password(request.password, rounds=self.config.password_hash_rounds)
        query = """
        INSERT INTO users (name, email, password, account_type)
        VALUES (:name, :email, :password, :account_type)
        """
        params = {
            "name": request.name,
            "email": request.email,
            "password": hashed,
            "account_type": request.account_type,
        }
        with store_errors("Error registering user"):
            try:
                user_id = self.db.insert(query, params)
            except IntegrityError as exc:
                logger.info("Registration rejected, email already present")
                raise ConflictError("Email already registered") from exc

        logger.info("Registered user id=%s account_type=%s", user_id, request.account_type)
        return user_id

    def login(self, request: LoginRequest) -> dict[str, Any]:
        query = """
        SELECT id, name, email, password, account_type, verified, subscription_expires_at
        FROM users
        WHERE email = :email
        """
        with store_errors("Error logging in"):
            user = self.db.fetch_one(query, {"email": request.email})

        if user is None:
            verify_password(request.password, placeholder_hash(self.config.password_hash_rounds))
            raise AuthError()
        if not verify_password(request.password, str(user["password"])):
            raise AuthError()

        user_id = int(user["id"])
        return {
            "success": True,
            "message": "Login successful",
            "redirectUrl": build_redirect_url(
                account_type=user["account_type"],
                name=user["name"],
                user_id=user_id,
            ),
            "user": {
                "id": user_id,
                "name": user["name"],
                "email": user["email"],
                "accountType": user["account_type"],
                "verified": int(user["verified"] or 0),
                "subscription_expires_at": user["subscription_expires_at"],
            },
        }
