"""
Food Circle Backend — Session Route Handlers
=============================================

What:  POST /jwt (issue the session cookie) and GET /logout (clear it).
Who:   Called by the web client right after Firebase sign-in / sign-out.

Neither route is gated: /jwt signs whatever email the client sends. The
cookie is HTTP-only, so the client never reads the token itself.
"""

import logging

from fastapi import APIRouter, Depends, Response

from foodcircle.auth import clear_session_cookie, set_session_cookie
from foodcircle.dependencies import get_token_service
from foodcircle.schemas.common import SessionRequest, SuccessResponse
from foodcircle.services.token_service import TokenService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Session"])


@router.post(
    "/jwt",
    response_model=SuccessResponse,
    summary="Issue a session cookie",
    description="Signs a token for the given email and sets it as the HTTP-only `token` cookie.",
)
async def issue_session(
    body: SessionRequest,
    response: Response,
    token_service: TokenService = Depends(get_token_service),
) -> SuccessResponse:
    token = token_service.issue(body.email)
    set_session_cookie(response, token)
    return SuccessResponse(success=True)


@router.get(
    "/logout",
    response_model=SuccessResponse,
    summary="Clear the session cookie",
)
async def logout(response: Response) -> SuccessResponse:
    clear_session_cookie(response)
    return SuccessResponse(success=True)
