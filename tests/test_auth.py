"""Tests for registration and sign-in."""

import pytest

from saldo.domain.auth import validate_registration
from saldo.domain.entities import Session
from saldo.domain.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    ValidationError,
)


class TestValidateRegistration:
    """Tests for registration form validation."""

    def test_valid(self):
        validate_registration("a@example.com", "ani", "secret1", "secret1")

    @pytest.mark.parametrize(
        "email,username,password,confirm,message",
        [
            ("", "ani", "secret1", "secret1", "Email is required"),
            ("a@example.com", "  ", "secret1", "secret1", "Username is required"),
            ("a@example.com", "ani", "secret1", "secret2", "Passwords do not match"),
            ("a@example.com", "ani", "12345", "12345", "at least 6 characters"),
        ],
    )
    def test_invalid(self, email, username, password, confirm, message):
        with pytest.raises(ValidationError, match=message):
            validate_registration(email, username, password, confirm)


class TestAuthService:
    """Tests for AuthService."""

    def test_register_returns_session(self, auth_service, temp_db):
        session = auth_service.register(
            username=" Ani ",
            email="Ani@Example.com",
            password="secret1",
            confirm_password="secret1",
        )

        assert isinstance(session, Session)
        assert session.email == "ani@example.com"
        assert session.username == "Ani"
        user = temp_db.get_user(session.user_id)
        assert user.email == "ani@example.com"
        assert user.created_at.tzinfo is not None

    def test_password_is_hashed(self, auth_service, temp_db, sample_session):
        stored = temp_db.get_password_hash(sample_session.user_id)

        assert stored
        assert stored != "secret123"

    def test_duplicate_email(self, auth_service, sample_session):
        with pytest.raises(ConflictError):
            auth_service.register("budi2", "BUDI@example.com", "another1", "another1")

    def test_authenticate(self, auth_service, sample_session):
        session = auth_service.authenticate("budi@example.com", "secret123")

        assert session == sample_session

    def test_authenticate_email_is_case_insensitive(self, auth_service, sample_session):
        assert auth_service.authenticate(" Budi@Example.com ", "secret123") == sample_session

    @pytest.mark.parametrize(
        "email,password",
        [("budi@example.com", "wrong-password"), ("nobody@example.com", "secret123")],
    )
    def test_bad_credentials(self, auth_service, sample_session, email, password):
        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            auth_service.authenticate(email, password)

    def test_empty_credentials(self, auth_service):
        with pytest.raises(ValidationError):
            auth_service.authenticate("", "")

    def test_resolve(self, auth_service, sample_session):
        user = auth_service.resolve(sample_session)

        assert user.uid == sample_session.user_id
        assert user.username == "budi"

    def test_resolve_without_session(self, auth_service):
        with pytest.raises(AuthenticationError, match="Not signed in"):
            auth_service.resolve(None)

    def test_resolve_unknown_user(self, auth_service):
        stale = Session(user_id="deadbeef", email="x@example.com", username="x")

        with pytest.raises(AuthenticationError):
            auth_service.resolve(stale)

    def test_domain_errors_are_value_errors(self, auth_service):
        with pytest.raises(ValueError):
            auth_service.resolve(None)
        assert issubclass(AuthenticationError, DomainError)
