"""Tests for token issuing and verification."""

from datetime import timedelta

import pytest
from jose import jwt

from task_api.auth.tokens import TokenService
from task_api.errors import InvalidTokenError


class TestIssue:

    def test_token_embeds_user_id(self, token_service):
        token = token_service.issue("user123")
        payload = jwt.decode(token, token_service.secret, algorithms=["HS256"])
        assert payload["id"] == "user123"
        assert "exp" in payload
        assert "iat" in payload

    def test_expiry_follows_configuration(self):
        service = TokenService(secret="expiry-test-secret", expires_minutes=15)
        payload = jwt.decode(service.issue("u1"), "expiry-test-secret", algorithms=["HS256"])
        assert payload["exp"] - payload["iat"] == 15 * 60


class TestVerify:

    def test_round_trip(self, token_service):
        assert token_service.verify(token_service.issue("user123")) == "user123"

    def test_expired_token(self, token_service):
        token = token_service.issue("user123", expires_delta=timedelta(seconds=-1))
        with pytest.raises(InvalidTokenError):
            token_service.verify(token)

    def test_wrong_secret(self, token_service):
        other = TokenService(secret="some-other-secret")
        with pytest.raises(InvalidTokenError):
            token_service.verify(other.issue("user123"))

    @pytest.mark.parametrize("token", ["", "invalidToken", "a.b.c"])
    def test_malformed_token(self, token_service, token):
        with pytest.raises(InvalidTokenError):
            token_service.verify(token)

    def test_token_without_id_claim(self, token_service):
        token = jwt.encode({"sub": "user123"}, token_service.secret, algorithm="HS256")
        with pytest.raises(InvalidTokenError) as exc_info:
            token_service.verify(token)
        assert exc_info.value.reason == "token has no user id"

    def test_error_message_is_generic(self, token_service):
        with pytest.raises(InvalidTokenError) as exc_info:
            token_service.verify("invalidToken")
        assert exc_info.value.message == "Forbidden"
        assert exc_info.value.status_code == 403
