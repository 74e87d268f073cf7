"""
Food Circle Backend — Session Cookie & Auth Gate
=================================================

What:  Sets/clears the session cookie and guards routes that need a session.
How:   `require_session` is a FastAPI dependency: it reads the cookie,
       verifies it with TokenService and returns the decoded claim, or raises
       UnauthorizedError (→ 401). Ownership checks happen in the services.

Cookie attributes:
    httponly always; in production `secure=True, samesite="none"` so the
    hosted frontend can send it cross-site, otherwise `secure=False,
    samesite="strict"` for local development over plain HTTP.
"""

import logging

from fastapi import Depends, Request, Response

from foodcircle.config import settings
from foodcircle.dependencies import get_token_service
from foodcircle.exceptions import UnauthorizedError
from foodcircle.schemas.common import SessionClaim
from foodcircle.services.token_service import TokenService

logger = logging.getLogger(__name__)


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite=settings.cookie_samesite,
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.is_production,
        samesite=settings.cookie_samesite,
    )


async def require_session(
    request: Request,
    token_service: TokenService = Depends(get_token_service),
) -> SessionClaim:
    """
    Auth gate for protected routes.

    Raises:
        UnauthorizedError: no cookie, or the token fails verification
    """
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise UnauthorizedError(message="Unauthorized access!", context={"reason": "no_cookie"})
    return token_service.verify(token)
