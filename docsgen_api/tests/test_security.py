import pytest
from jose import JWTError

from src.core.exceptions import AuthenticationError, ConfigurationError
from src.core.security import create_access_token, decode_token, get_password_hash, verify_password
from src.core.settings import AppSettings
from src.services.authentication import ADMIN_SUBJECT, AuthenticationService

from conftest import ADMIN_PASSWORD


def test_password_hash_round_trip():
    hashed = get_password_hash("s3cret")

    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_malformed_hash_never_verifies():
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_access_token_carries_subject_and_type():
    payload = decode_token(create_access_token("admin", extra={"scope": "docs"}))

    assert payload["sub"] == "admin"
    assert payload["type"] == "access"
    assert payload["scope"] == "docs"
    assert payload["exp"] > payload["iat"]


def test_expired_token_is_rejected():
    token = create_access_token("admin", expires_minutes=-5)

    with pytest.raises(JWTError):
        decode_token(token)


def test_tampered_token_is_rejected():
    header, payload, signature = create_access_token("admin").split(".")
    forged = ".".join([header, payload, signature[::-1]])

    with pytest.raises(JWTError):
        decode_token(forged)


def test_token_requires_secret(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "")

    with pytest.raises(ConfigurationError):
        create_access_token("admin")


def test_login_with_correct_password():
    token = AuthenticationService().login(ADMIN_PASSWORD)

    assert decode_token(token)["sub"] == ADMIN_SUBJECT


def test_login_with_wrong_password():
    with pytest.raises(AuthenticationError):
        AuthenticationService().login("guess")


def test_login_without_configured_hash():
    service = AuthenticationService(AppSettings(_env_file=None, ADMIN_PASSWORD_HASH=""))

    with pytest.raises(ConfigurationError):
        service.login(ADMIN_PASSWORD)
