"""
Food Circle Backend — Food Request Route Handlers
==================================================

What:  GET /my-request/{email} and POST /food-request.
Who:   Called by the web client's My Requests page and the Request button on
       the food details page.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from foodcircle.auth import require_session
from foodcircle.dependencies import get_request_service
from foodcircle.schemas.common import ErrorResponse, InsertResponse, SessionClaim
from foodcircle.schemas.food import FoodRequestIn
from foodcircle.services.request_service import FoodRequestService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Food Requests"])


@router.get(
    "/my-request/{email}",
    response_model=List[Dict[str, Any]],
    responses={
        401: {"description": "Missing or invalid session cookie", "model": ErrorResponse},
        403: {"description": "Session email is not `email`", "model": ErrorResponse},
    },
    summary="Requests made by a user",
)
async def list_my_requests(
    email: str,
    claim: SessionClaim = Depends(require_session),
    request_service: FoodRequestService = Depends(get_request_service),
) -> List[Dict[str, Any]]:
    return await request_service.list_mine(email, caller_email=claim.email)


@router.post(
    "/food-request",
    response_model=InsertResponse,
    responses={401: {"description": "Missing or invalid session cookie", "model": ErrorResponse}},
    summary="Request a food",
)
async def create_food_request(
    body: FoodRequestIn,
    claim: SessionClaim = Depends(require_session),
    request_service: FoodRequestService = Depends(get_request_service),
) -> InsertResponse:
    return await request_service.create(body, caller_email=claim.email)
