"""
Food Circle Backend — Shared Response Schemas
==============================================

What:  Session bodies, driver acknowledgement models, error and health
       responses, plus the BSON → JSON document conversion.
Who:   Route handlers (response models) and services (result conversion).

Driver acknowledgements are serialized with the camelCase keys existing
clients read (`insertedId`, `modifiedCount`, ...). FastAPI serializes
response models by alias, so Python code uses snake_case attributes.
"""

from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Session
# ══════════════════════════════════════════════════════════════════════════


class SessionRequest(BaseModel):
    """Body of POST /jwt."""

    email: str = Field(description="Email to embed in the session token")


class SessionClaim(BaseModel):
    """Decoded payload of a verified session token."""

    email: str
    iat: Optional[int] = None
    exp: Optional[int] = None


class SuccessResponse(BaseModel):
    success: bool = True


# ══════════════════════════════════════════════════════════════════════════
# Driver Acknowledgements
# ══════════════════════════════════════════════════════════════════════════


class InsertResponse(BaseModel):
    """Result of insert_one."""

    acknowledged: bool
    inserted_id: str = Field(serialization_alias="insertedId")


class UpdateResponse(BaseModel):
    """Result of update_one (with or without upsert)."""

    acknowledged: bool
    matched_count: int = Field(serialization_alias="matchedCount")
    modified_count: int = Field(serialization_alias="modifiedCount")
    upserted_count: int = Field(serialization_alias="upsertedCount")
    upserted_id: Optional[str] = Field(default=None, serialization_alias="upsertedId")


class DeleteResponse(BaseModel):
    """Result of delete_one."""

    acknowledged: bool
    deleted_count: int = Field(serialization_alias="deletedCount")


# ══════════════════════════════════════════════════════════════════════════
# Errors & Health
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body for every handled failure.

    `message` is what the web client displays; `error` is the machine code.
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


# ══════════════════════════════════════════════════════════════════════════
# Document Conversion
# ══════════════════════════════════════════════════════════════════════════


def to_json_value(value: Any) -> Any:
    """Recursively replace ObjectIds with their 24-hex string form."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: to_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    return value


def to_json_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if document is None:
        return None
    return to_json_value(document)
