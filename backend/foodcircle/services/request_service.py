"""
Food Circle Backend — Food Request Service
===========================================

What:  Reads and writes against the `foodRequest` collection.
Who:   Route handlers in routes/requests.py.

Requests are append-only: this service inserts them and lists them per
requester, nothing else.
"""

import logging
from typing import Any, Dict, List

from pymongo.errors import PyMongoError

from foodcircle.schemas.common import InsertResponse, to_json_document
from foodcircle.schemas.food import FoodRequestIn
from foodcircle.services.collection_base import CollectionService

logger = logging.getLogger(__name__)


class FoodRequestService(CollectionService):
    """Accessor for the `foodRequest` collection."""

    resource = "food request"

    async def list_mine(self, email: str, caller_email: str) -> List[Dict[str, Any]]:
        """
        Requests submitted by `email`.

        Raises:
            ForbiddenError: caller is not `email`
        """
        self._ensure_owner(caller_email, email, "list_my_requests")
        try:
            documents = await self.collection.find({"userEmail": email}).to_list(length=None)
        except PyMongoError as e:
            raise self._store_error("list_mine", e)
        return [to_json_document(document) for document in documents]

    async def create(self, request_data: FoodRequestIn, caller_email: str) -> InsertResponse:
        # The embedded userEmail is stored as sent, even when it differs from the session.
        if request_data.user_email != caller_email:
            logger.debug(
                "Food request for %s submitted by session %s", request_data.user_email, caller_email
            )
        try:
            result = await self.collection.insert_one(request_data.to_document())
        except PyMongoError as e:
            raise self._store_error("create", e)
        logger.info("Food request %s created by %s", result.inserted_id, caller_email)
        return self._insert_response(result)
