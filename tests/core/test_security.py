"""Tests for session tokens and password hashing."""

from datetime import timedelta

import pytest
from jose import jwt

from quest_api.configs import get_settings
from quest_api.core.exceptions import AuthenticationError
from quest_api.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswords:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("correct-horse")

        assert hashed != "correct-horse"
        assert verify_password("correct-horse", hashed)

    def test_wrong_password_does_not_verify(self):
        assert not verify_password("wrong", hash_password("correct-horse"))

    def test_hashes_are_salted(self):
        assert hash_password("same") != hash_password("same")


class TestTokens:
    def test_round_trip_claims(self):
        claims = decode_access_token(create_access_token("user-1"))

        assert claims["user_id"] == "user-1"
        assert claims["exp"] - claims["iat"] == 8 * 3600

    def test_expired_token_is_rejected(self):
        token = create_access_token("user-1", expires_delta=timedelta(seconds=-10))

        with pytest.raises(AuthenticationError):
            decode_access_token(token)

    def test_token_signed_with_other_key_is_rejected(self):
        token = jwt.encode({"user_id": "user-1"}, "other-secret", algorithm="HS256")

        with pytest.raises(AuthenticationError):
            decode_access_token(token)

    def test_token_without_user_id_is_rejected(self):
        auth = get_settings().auth
        token = jwt.encode({"sub": "user-1"}, auth.secret_key, algorithm=auth.algorithm)

        with pytest.raises(AuthenticationError):
            decode_access_token(token)

    def test_garbage_is_rejected(self):
        with pytest.raises(AuthenticationError):
            decode_access_token("not-a-token")
