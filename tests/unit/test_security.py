"""
Unit tests for calendar_backend.core.security
"""
import jwt
import pytest
from calendar_backend.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswords:
    """bcrypt hashing and verification"""

    def test_hash_is_salted(self, mock_settings):
        first, second = hash_password("same-password"), hash_password("same-password")
        assert first != second
        assert "same-password" not in first

    def test_hash_uses_configured_rounds(self, mock_settings):
        # bcrypt hashes look like $2b$<rounds>$...
        assert hash_password("pw").split("$")[2] == "04"

    @pytest.mark.parametrize("candidate, expected", [("correct horse", True), ("Correct horse", False), ("", False)])
    def test_verify(self, mock_settings, candidate, expected):
        hashed = hash_password("correct horse")
        assert verify_password(candidate, hashed) is expected

    def test_malformed_hash_never_matches(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestAccessTokens:
    """create_access_token / decode_access_token"""

    def test_subject_and_extra_claims_survive(self, mock_settings):
        claims = decode_access_token(create_access_token("user-123", {"username": "alice"}))
        assert claims["sub"] == "user-123"
        assert claims["username"] == "alice"
        assert claims["exp"] - claims["iat"] == mock_settings.access_token_expire_minutes * 60

    def test_reserved_claims_cannot_be_overridden(self, mock_settings):
        claims = decode_access_token(create_access_token("user-1", {"sub": "someone-else"}))
        assert claims["sub"] == "user-1"

    def test_garbage_token_raises(self, mock_settings):
        with pytest.raises(ValueError) as exc_info:
            decode_access_token("invalid.jwt.token")
        assert "Invalid token" in str(exc_info.value)

    def test_foreign_signature_raises(self, mock_settings):
        forged = jwt.encode({"sub": "user-1", "iat": 0, "exp": 4102444800}, "other-secret", algorithm="HS256")
        with pytest.raises(ValueError):
            decode_access_token(forged)

    def test_expired_token_raises(self, mock_settings):
        mock_settings.access_token_expire_minutes = -5
        token = create_access_token("user-1")
        with pytest.raises(ValueError):
            decode_access_token(token)

    def test_token_without_expiry_raises(self, mock_settings):
        unbounded = jwt.encode({"sub": "user-1"}, mock_settings.jwt_secret_key, algorithm="HS256")
        with pytest.raises(ValueError):
            decode_access_token(unbounded)
