"""
Food Circle Backend — Collection Accessor Base
===============================================

What:  Shared plumbing for the two MongoDB accessors (foods, food requests).
How:   Subclasses receive their Motor collection in the constructor, so a
       route (or a test) decides which collection they talk to. This class
       converts path identifiers to ObjectIds, turns driver acknowledgements
       into response models, applies the ownership check, and wraps driver
       failures in DatabaseError.
"""

import logging
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId

from foodcircle.exceptions import DatabaseError, ForbiddenError
from foodcircle.schemas.common import DeleteResponse, InsertResponse, UpdateResponse

logger = logging.getLogger(__name__)


class CollectionService:
    """
    Base class for services bound to a single collection.

    Attributes:
        collection: Motor collection (or any object with the same async API)
    """

    resource = "document"

    def __init__(self, collection: Any):
        self.collection = collection

    # ── Identity ──────────────────────────────────────────────────────────

    def _object_id(self, value: str) -> ObjectId:
        """
        Parse a path identifier.

        A malformed identifier is a server error, like any other failure to
        issue the query.
        """
        try:
            return ObjectId(value)
        except (InvalidId, TypeError) as e:
            logger.error("Malformed %s id %r: %s", self.resource, value, str(e))
            raise DatabaseError(
                message=f"Could not look up the {self.resource}. Please try again.",
                context={"id": str(value), "error_type": type(e).__name__},
            )

    def _ensure_owner(self, caller_email: str | None, target_email: str | None, operation: str) -> None:
        """Ownership check: the session email must equal the targeted email."""
        if caller_email is None or caller_email != target_email:
            logger.warning(
                "Forbidden %s: session %s targeted %s", operation, caller_email, target_email
            )
            raise ForbiddenError(context={"operation": operation})

    # ── Failures ──────────────────────────────────────────────────────────

    def _store_error(self, operation: str, exc: Exception) -> DatabaseError:
        logger.error(
            "Database error during %s on %s: %s", operation, self.resource, str(exc), exc_info=True
        )
        return DatabaseError(
            message=f"Could not complete the {self.resource} operation. Please try again.",
            context={"operation": operation, "error_type": type(exc).__name__},
        )

    # ── Acknowledgements ──────────────────────────────────────────────────

    @staticmethod
    def _insert_response(result: Any) -> InsertResponse:
        return InsertResponse(
            acknowledged=result.acknowledged,
            inserted_id=str(result.inserted_id),
        )

    @staticmethod
    def _update_response(result: Any) -> UpdateResponse:
        upserted_id = result.upserted_id
        return UpdateResponse(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=1 if upserted_id is not None else 0,
            upserted_id=str(upserted_id) if upserted_id is not None else None,
        )

    @staticmethod
    def _delete_response(result: Any) -> DeleteResponse:
        return DeleteResponse(
            acknowledged=result.acknowledged,
            deleted_count=result.deleted_count,
        )
