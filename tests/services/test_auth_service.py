"""Tests for registration and login."""

from __future__ import annotations

from firmness.core.security.jwt_handler import TokenService
from firmness.services.auth.auth_service import AuthService
from firmness.services.base.service_result import ErrorCode
from firmness.services.common.permissions import Principal


class TestRegister:
    def test_new_user_gets_customer_role(self, auth_service: AuthService) -> None:
        result = auth_service.register("Ana@Example.com", "s3cret-pass", "Ana")

        assert result.is_success
        assert result.data.email == "ana@example.com"
        assert result.data.roles == ["Customer"]
        assert result.data.id

    def test_duplicate_email_ignores_case(self, auth_service: AuthService) -> None:
        auth_service.register("ana@example.com", "s3cret-pass")

        result = auth_service.register("ANA@example.com", "other-pass")

        assert result.error.code is ErrorCode.ALREADY_EXISTS
        assert "already exists" in result.message


class TestLogin:
    def test_login_issues_token_for_user(
        self,
        auth_service: AuthService,
        token_service: TokenService,
    ) -> None:
        user = auth_service.register("ana@example.com", "s3cret-pass").data

        result = auth_service.login("ana@example.com", "s3cret-pass")

        assert result.data.token_type == "bearer"
        assert result.data.expires_in == 4 * 3600
        principal = token_service.validate(result.data.access_token)
        assert isinstance(principal, Principal)
        assert principal.subject_id == user.id
        assert principal.roles == frozenset({"Customer"})

    def test_wrong_password(self, auth_service: AuthService) -> None:
        auth_service.register("ana@example.com", "s3cret-pass")

        result = auth_service.login("ana@example.com", "wrong-pass")

        assert result.message == "Invalid credentials"

    def test_unknown_email(self, auth_service: AuthService) -> None:
        assert auth_service.login("nobody@example.com", "x").message == "Invalid credentials"
