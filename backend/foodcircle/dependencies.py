"""
Food Circle Backend — Dependency Wiring
========================================

What:  FastAPI dependency providers that build services per request.
How:   Collections come from the database handle bound to the running app
       (see database.py); the token service is a process-wide singleton
       built from settings. Tests replace any of these through
       `app.dependency_overrides`.
"""

from functools import lru_cache

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorCollection

from foodcircle.database import get_foods_collection, get_requests_collection
from foodcircle.services.food_service import FoodService
from foodcircle.services.request_service import FoodRequestService
from foodcircle.services.token_service import TokenService


@lru_cache(maxsize=1)
def get_token_service() -> TokenService:
    return TokenService()


def get_food_service(
    collection: AsyncIOMotorCollection = Depends(get_foods_collection),
) -> FoodService:
    return FoodService(collection)


def get_request_service(
    collection: AsyncIOMotorCollection = Depends(get_requests_collection),
) -> FoodRequestService:
    return FoodRequestService(collection)
