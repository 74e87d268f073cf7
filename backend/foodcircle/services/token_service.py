"""
Food Circle Backend — Session Token Service
============================================

What:  Signs and verifies the session token stored in the `token` cookie.
How:   PyJWT, HMAC (HS256 by default) with SECRET_KEY. The payload is just the
       caller's email plus `iat`/`exp`; there is no refresh flow and no
       revocation list, so a token is trusted until it expires.
Who:   POST /jwt (issue) and the auth gate in auth.py (verify).
"""

import logging
import time
from typing import Optional

import jwt
from jwt import PyJWTError

from foodcircle.config import settings
from foodcircle.exceptions import UnauthorizedError
from foodcircle.schemas.common import SessionClaim

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


class TokenService:
    """
    Issues and verifies signed session tokens.

    Args:
        secret: HMAC secret; defaults to settings.secret_key
        algorithm: JWS algorithm; defaults to settings.jwt_algorithm
        expire_days: Token lifetime; defaults to settings.token_expire_days
    """

    def __init__(
        self,
        secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        expire_days: Optional[int] = None,
    ):
        self._secret = secret if secret is not None else settings.secret_key
        self.algorithm = algorithm or settings.jwt_algorithm
        self.expire_days = expire_days or settings.token_expire_days

    def issue(self, email: str, now: Optional[int] = None) -> str:
        """Return a signed token embedding `email`."""
        issued_at = int(now if now is not None else time.time())
        payload = {
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self.expire_days * SECONDS_PER_DAY,
        }
        token = jwt.encode(payload, self._secret, algorithm=self.algorithm)
        logger.info("Issued session token for %s", email)
        return token

    def verify(self, token: str) -> SessionClaim:
        """
        Decode and validate a token.

        Raises:
            UnauthorizedError: the token (or the configured key) does not verify.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp"]},
            )
        except PyJWTError as e:
            logger.debug("Session token rejected: %s", str(e))
            raise UnauthorizedError(context={"reason": type(e).__name__})

        email = payload.get("email")
        if not isinstance(email, str):
            raise UnauthorizedError(context={"reason": "missing_email_claim"})
        return SessionClaim(email=email, iat=payload.get("iat"), exp=payload.get("exp"))
