# firmness/services/auth/auth_service.py
"""
Login and registration.

Credentials are checked against the bcrypt hash held by the identity store;
a successful login returns a signed access token.
"""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from firmness.core.constants import DEFAULT_ROLE
from firmness.core.security.jwt_handler import TokenService
from firmness.core.security.password_hasher import PasswordHasher
from firmness.models import User
from firmness.repositories.user import UserRepository
from firmness.schemas.auth import TokenResponse, UserRead
from firmness.services.base.service_result import ServiceResult
from firmness.services.common.permissions import Principal

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    def register(
        self,
        email: str,
        password: str,
        full_name: Optional[str] = None,
    ) -> ServiceResult[UserRead]:
        """Create an account holding the default role."""
        email = email.strip().lower()
        try:
            if self.users.get_by_email(email) is not None:
                return ServiceResult.conflict(
                    f"A user with the email '{email}' already exists.", field="email"
                )

            user = User(
                email=email,
                full_name=full_name,
                password_hash=self.hasher.hash(password),
                roles=self.users.get_roles([DEFAULT_ROLE.value]),
            )
            self.users.add(user)
            self.users.commit()
        except SQLAlchemyError:
            logger.error("Error registering user", exc_info=True)
            self.users.rollback()
            return ServiceResult.internal_error("Error registering the user. Please try again.")

        logger.info(f"User {user.id} registered")
        return ServiceResult.success(
            UserRead(id=user.id, email=user.email, full_name=user.full_name, roles=user.role_names)
        )

    def login(self, email: str, password: str) -> ServiceResult[TokenResponse]:
        """Verify credentials and issue an access token."""
        try:
            user = self.users.get_by_email(email)
        except SQLAlchemyError:
            logger.error("Error loading user for login", exc_info=True)
            return ServiceResult.internal_error("Error signing in. Please try again.")

        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.warning("Login failed: invalid credentials")
            return ServiceResult.validation_failure(INVALID_CREDENTIALS)

        principal = Principal(subject_id=user.id, email=user.email, roles=user.role_names)
        token = self.tokens.issue(principal)
        logger.info(f"User {user.id} logged in")
        return ServiceResult.success(
            TokenResponse(access_token=token, expires_in=self.tokens.expires_in_seconds)
        )
