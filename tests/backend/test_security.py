"""
Tests for password hashing and token functions in recipe_api.core.security.
"""

from datetime import timedelta

import pytest
from jose import jwt

from recipe_api.config import get_settings
from recipe_api.core.exceptions import InvalidTokenError
from recipe_api.core.security import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    """Tests for password hashing functions."""

    def test_hash_password_returns_bcrypt_hash(self):
        hashed = hash_password("okay")

        # bcrypt hashes start with $2b$
        assert hashed.startswith("$2b$")
        assert hashed != "okay"

    def test_verify_password_correct_returns_true(self):
        hashed = hash_password("okay")

        assert verify_password("okay", hashed) is True

    def test_verify_password_wrong_returns_false(self):
        hashed = hash_password("okay")

        assert verify_password("wrongpassword", hashed) is False

    def test_hash_password_different_each_time(self):
        """Same password should produce different hashes due to salt."""
        hash1 = hash_password("okay")
        hash2 = hash_password("okay")

        assert hash1 != hash2
        assert verify_password("okay", hash1)
        assert verify_password("okay", hash2)


class TestAccessTokens:
    """Tests for JWT issuance and verification."""

    def test_token_round_trip_keeps_identity(self):
        token = create_access_token(user_id="abc123", username="admin")

        identity = decode_token(token)

        assert identity.user_id == "abc123"
        assert identity.username == "admin"

    def test_token_carries_expiry(self):
        settings = get_settings()
        token = create_access_token(user_id="abc123", username="admin")

        claims = jwt.get_unverified_claims(token)

        lifetime = claims["exp"] - claims["iat"]
        assert lifetime == settings.jwt_access_token_expire_minutes * 60

    def test_expired_token_is_rejected(self):
        token = create_access_token(
            user_id="abc123", username="admin", expires_delta=timedelta(seconds=-1)
        )

        with pytest.raises(InvalidTokenError):
            decode_token(token)

    def test_tampered_token_is_rejected(self):
        token = create_access_token(user_id="abc123", username="admin")
        header, payload, signature = token.split(".")
        tampered = ".".join([header, payload, signature[::-1]])

        with pytest.raises(InvalidTokenError):
            decode_token(tampered)

    def test_malformed_token_is_rejected(self):
        with pytest.raises(InvalidTokenError):
            decode_token("definitely.not.valid")

    def test_token_without_subject_is_rejected(self):
        settings = get_settings()
        token = jwt.encode(
            {"username": "admin"},
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(InvalidTokenError):
            decode_token(token)


class TestRejectedPasswords:
    """Passwords bcrypt cannot process never match."""

    def test_nul_byte_password_does_not_verify(self):
        hashed = hash_password("okay")

        assert verify_password("ok\x00ay", hashed) is False

    def test_unrecognized_hash_still_raises(self):
        with pytest.raises(ValueError):
            verify_password("okay", "not-a-bcrypt-hash")
