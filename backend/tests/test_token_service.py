"""
Food Circle Backend — Token Service Unit Tests
===============================================

What:  Signing and verification of session tokens.
"""

import time

import jwt
import pytest

from foodcircle.exceptions import UnauthorizedError
from foodcircle.services.token_service import SECONDS_PER_DAY, TokenService

SECRET = "unit-test-secret-that-is-long-enough-for-hs256"


class TestTokenService:

    def setup_method(self):
        self.service = TokenService(secret=SECRET, algorithm="HS256", expire_days=365)

    def test_round_trip(self):
        token = self.service.issue("donor@example.com")
        claim = self.service.verify(token)
        assert claim.email == "donor@example.com"

    def test_expiry_is_one_year(self):
        now = int(time.time())
        token = self.service.issue("donor@example.com", now=now)
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert payload["iat"] == now
        assert payload["exp"] == now + 365 * SECONDS_PER_DAY

    def test_expired_token_rejected(self):
        token = self.service.issue("donor@example.com", now=int(time.time()) - 400 * SECONDS_PER_DAY)
        with pytest.raises(UnauthorizedError):
            self.service.verify(token)

    def test_wrong_secret_rejected(self):
        other = TokenService(secret="another-secret-that-is-long-enough-for-hs256")
        token = other.issue("donor@example.com")
        with pytest.raises(UnauthorizedError):
            self.service.verify(token)

    def test_garbage_rejected(self):
        with pytest.raises(UnauthorizedError):
            self.service.verify("not.a.token")

    def test_token_without_email_rejected(self):
        token = jwt.encode({"sub": "x", "exp": int(time.time()) + 60}, SECRET, algorithm="HS256")
        with pytest.raises(UnauthorizedError) as exc_info:
            self.service.verify(token)
        assert exc_info.value.context["reason"] == "missing_email_claim"

    def test_token_without_expiry_rejected(self):
        token = jwt.encode({"email": "donor@example.com"}, SECRET, algorithm="HS256")
        with pytest.raises(UnauthorizedError):
            self.service.verify(token)

    def test_empty_secret_rejects_instead_of_crashing(self):
        token = self.service.issue("donor@example.com")
        unconfigured = TokenService(secret="", algorithm="HS256", expire_days=365)

        with pytest.raises(UnauthorizedError):
            unconfigured.verify(token)
