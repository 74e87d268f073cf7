"""
Food Circle Backend — Food Catalog Route Handlers
=================================================

What:  Public catalog reads and the session-gated donation management routes.
How:   Each handler extracts path/query/body values and delegates to
       FoodService; the returned documents or driver acknowledgement are
       sent as-is.
Who:   Called by the web client's Available Foods, Featured, Details,
       Add Food and Manage My Foods pages.

Route Inventory:
    GET    /foods                 public   available foods (search, sort)
    GET    /all-foods             public   featured foods (top by quantity)
    GET    /food/{id}             public   single food (null if absent)
    POST   /foods                 session + donator must be caller
    PATCH  /requestFoods/{id}     session  set status
    GET    /food-manage/{email}   session + email must be caller
    PUT    /update-food/{id}      session  upsert fields
    DELETE /delete-food/{id}      session  delete
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from foodcircle.auth import require_session
from foodcircle.dependencies import get_food_service
from foodcircle.schemas.common import (
    DeleteResponse,
    ErrorResponse,
    InsertResponse,
    SessionClaim,
    UpdateResponse,
)
from foodcircle.schemas.food import FoodItemIn, StatusUpdate
from foodcircle.services.food_service import FoodService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Foods"])

_GATED = {
    401: {"description": "Missing or invalid session cookie", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}
_OWNED = {
    **_GATED,
    403: {"description": "Session email does not own the target", "model": ErrorResponse},
}


# ══════════════════════════════════════════════════════════════════════════
# Public Reads
# ══════════════════════════════════════════════════════════════════════════


@router.get(
    "/foods",
    response_model=List[Dict[str, Any]],
    summary="List available foods",
    description=(
        "Returns every food whose status is `available`. `search` filters by a "
        "case-insensitive substring of the name; `sort=asc|dsc` orders by expiry date."
    ),
)
async def list_available_foods(
    search: Optional[str] = Query(default=None, description="Substring of the food name"),
    sort: Optional[str] = Query(default=None, description="'asc' or 'dsc' on expiredDate"),
    food_service: FoodService = Depends(get_food_service),
) -> List[Dict[str, Any]]:
    return await food_service.list_available(search=search, sort=sort)


@router.get(
    "/all-foods",
    response_model=List[Dict[str, Any]],
    summary="Featured foods",
    description="The six foods with the largest quantity.",
)
async def list_featured_foods(
    food_service: FoodService = Depends(get_food_service),
) -> List[Dict[str, Any]]:
    return await food_service.list_featured()


@router.get(
    "/food/{food_id}",
    response_model=Optional[Dict[str, Any]],
    summary="Food details",
    description="Returns the food document, or `null` when no food has this id.",
)
async def get_food(
    food_id: str,
    food_service: FoodService = Depends(get_food_service),
) -> Optional[Dict[str, Any]]:
    return await food_service.get_by_id(food_id)


# ══════════════════════════════════════════════════════════════════════════
# Session-Gated Writes
# ══════════════════════════════════════════════════════════════════════════


@router.post(
    "/foods",
    response_model=InsertResponse,
    responses=_OWNED,
    summary="Add a food donation",
)
async def create_food(
    item: FoodItemIn,
    claim: SessionClaim = Depends(require_session),
    food_service: FoodService = Depends(get_food_service),
) -> InsertResponse:
    """
    Insert a new donation.

    The session email must equal `donator.donatorEmail` in the body.
    """
    return await food_service.create(item, caller_email=claim.email)


@router.patch(
    "/requestFoods/{food_id}",
    response_model=UpdateResponse,
    responses=_GATED,
    summary="Change a food's status",
)
async def update_food_status(
    food_id: str,
    body: StatusUpdate,
    claim: SessionClaim = Depends(require_session),
    food_service: FoodService = Depends(get_food_service),
) -> UpdateResponse:
    return await food_service.update_status(food_id, body.status, caller_email=claim.email)


@router.get(
    "/food-manage/{email}",
    response_model=List[Dict[str, Any]],
    responses=_OWNED,
    summary="Foods donated by a user",
)
async def list_owned_foods(
    email: str,
    claim: SessionClaim = Depends(require_session),
    food_service: FoodService = Depends(get_food_service),
) -> List[Dict[str, Any]]:
    return await food_service.list_by_owner(email, caller_email=claim.email)


@router.put(
    "/update-food/{food_id}",
    response_model=UpdateResponse,
    responses=_GATED,
    summary="Update (or create) a food",
)
async def update_food(
    food_id: str,
    item: FoodItemIn,
    claim: SessionClaim = Depends(require_session),
    food_service: FoodService = Depends(get_food_service),
) -> UpdateResponse:
    return await food_service.replace(food_id, item, caller_email=claim.email)


@router.delete(
    "/delete-food/{food_id}",
    response_model=DeleteResponse,
    responses=_GATED,
    summary="Delete a food",
)
async def delete_food(
    food_id: str,
    claim: SessionClaim = Depends(require_session),
    food_service: FoodService = Depends(get_food_service),
) -> DeleteResponse:
    return await food_service.remove(food_id, caller_email=claim.email)
