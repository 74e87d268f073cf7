"""
Food Circle Backend — Food Catalog Service
===========================================

What:  Reads and writes against the `foods` collection.
How:   Every public method issues exactly one MongoDB call and returns the
       documents (ObjectIds rendered as strings) or the driver
       acknowledgement.
Who:   Route handlers in routes/foods.py.

Operations:
    list_available()  find {status: "available"} [+ name regex] [+ sort]
    list_featured()   find {} → rank by numeric quantity → top N
    get_by_id()       find_one {_id}
    create()          ownership check → insert_one
    update_status()   update_one {$set: {status}}
    replace()         update_one {$set: body}, upsert
    remove()          delete_one {_id}
    list_by_owner()   ownership check → find {"donator.donatorEmail"}

Ownership:
    create() and list_by_owner() compare the session email with the target
    email. update_status(), replace() and remove() only require a session;
    they accept the caller email so the write is attributed in the logs.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from foodcircle.config import settings
from foodcircle.schemas.common import (
    DeleteResponse,
    InsertResponse,
    UpdateResponse,
    to_json_document,
)
from foodcircle.schemas.food import FoodItemIn
from foodcircle.services.collection_base import CollectionService

logger = logging.getLogger(__name__)

AVAILABLE_STATUS = "available"

# Query value → MongoDB sort direction on expiredDate
SORT_DIRECTIONS = {"asc": ASCENDING, "dsc": DESCENDING}

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_quantity(value: Any) -> Optional[int]:
    """
    Leading integer of a quantity value ("12 kg" → 12, 3.7 → 3).

    Returns None when the value has no numeric prefix.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def rank_by_quantity(documents: List[Dict[str, Any]], limit: int) -> List[Dict[str, Any]]:
    """
    Order documents by descending numeric quantity and keep the first `limit`.

    Documents without a numeric quantity go last, in their original order.
    """

    def sort_key(document: Dict[str, Any]):
        quantity = parse_quantity(document.get("quantity"))
        return (quantity is not None, quantity or 0)

    return sorted(documents, key=sort_key, reverse=True)[:limit]


class FoodService(CollectionService):
    """Accessor for the `foods` collection."""

    resource = "food"

    async def list_available(
        self,
        search: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Items whose status is "available".

        Args:
            search: Case-insensitive substring of `name` (matched literally)
            sort: "asc" / "dsc" on `expiredDate`; anything else leaves the
                natural order
        """
        query: Dict[str, Any] = {"status": AVAILABLE_STATUS}
        if search:
            query["name"] = {"$regex": re.escape(search), "$options": "i"}

        options: Dict[str, Any] = {}
        direction = SORT_DIRECTIONS.get(sort) if sort else None
        if direction is not None:
            options["sort"] = [("expiredDate", direction)]

        try:
            documents = await self.collection.find(query, **options).to_list(length=None)
        except PyMongoError as e:
            raise self._store_error("list_available", e)
        return [to_json_document(document) for document in documents]

    async def list_featured(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Top items by quantity across the whole collection (any status)."""
        try:
            documents = await self.collection.find().to_list(length=None)
        except PyMongoError as e:
            raise self._store_error("list_featured", e)
        featured = rank_by_quantity(documents, limit or settings.featured_limit)
        return [to_json_document(document) for document in featured]

    async def get_by_id(self, food_id: str) -> Optional[Dict[str, Any]]:
        """One item, or None when no document has this id."""
        object_id = self._object_id(food_id)
        try:
            document = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            raise self._store_error("get_by_id", e)
        return to_json_document(document)

    async def create(self, item: FoodItemIn, caller_email: str) -> InsertResponse:
        """
        Insert a donation on behalf of its donator.

        Raises:
            ForbiddenError: caller is not `item.donator.donatorEmail`
        """
        self._ensure_owner(caller_email, item.donator_email, "create_food")
        document = item.to_document()
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            raise self._store_error("create", e)
        logger.info("Food %s created by %s", result.inserted_id, caller_email)
        return self._insert_response(result)

    async def update_status(
        self, food_id: str, status: Any, caller_email: str
    ) -> UpdateResponse:
        object_id = self._object_id(food_id)
        logger.debug("Status of food %s set by %s without ownership check", food_id, caller_email)
        try:
            result = await self.collection.update_one(
                {"_id": object_id}, {"$set": {"status": status}}
            )
        except PyMongoError as e:
            raise self._store_error("update_status", e)
        logger.info("Food %s status → %s (%s)", food_id, status, caller_email)
        return self._update_response(result)

    async def replace(self, food_id: str, item: FoodItemIn, caller_email: str) -> UpdateResponse:
        """
        Upsert the item at `food_id` with the given fields.

        `_id` is never part of the $set; it is immutable in MongoDB.
        """
        object_id = self._object_id(food_id)
        fields = item.to_document()
        fields.pop("_id", None)
        logger.debug("Food %s replaced by %s without ownership check", food_id, caller_email)
        try:
            result = await self.collection.update_one(
                {"_id": object_id}, {"$set": fields}, upsert=True
            )
        except PyMongoError as e:
            raise self._store_error("replace", e)
        logger.info("Food %s updated by %s", food_id, caller_email)
        return self._update_response(result)

    async def remove(self, food_id: str, caller_email: str) -> DeleteResponse:
        object_id = self._object_id(food_id)
        logger.debug("Food %s deleted by %s without ownership check", food_id, caller_email)
        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            raise self._store_error("remove", e)
        logger.info("Food %s deleted by %s (%d removed)", food_id, caller_email, result.deleted_count)
        return self._delete_response(result)

    async def list_by_owner(self, email: str, caller_email: str) -> List[Dict[str, Any]]:
        """
        Items donated by `email`.

        Raises:
            ForbiddenError: caller is not `email`
        """
        self._ensure_owner(caller_email, email, "list_by_owner")
        try:
            documents = await self.collection.find(
                {"donator.donatorEmail": email}
            ).to_list(length=None)
        except PyMongoError as e:
            raise self._store_error("list_by_owner", e)
        return [to_json_document(document) for document in documents]
