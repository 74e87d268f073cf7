"""
Food Circle Backend — Food & Food Request Schemas
==================================================

What:  Pydantic models for the request bodies of the catalog and request
       routes.
How:   The documents are schema-less in MongoDB; these models name the fields
       the service reads (donator email, status, requester email) and keep
       every other client field as-is (`extra="allow"`). Field names on the
       wire are the camelCase names the web client already sends.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class Donator(BaseModel):
    """The user who submitted the food item."""

    donator_email: Optional[str] = Field(default=None, alias="donatorEmail")
    donator_name: Optional[Any] = Field(default=None, alias="donatorName")
    donator_image: Optional[Any] = Field(default=None, alias="donatorImage")

    model_config = {"extra": "allow", "populate_by_name": True}


class FoodItemIn(BaseModel):
    """
    Body of POST /foods and PUT /update-food/{id}.

    Only `donator.donatorEmail` carries meaning for the service (ownership
    check on create). `quantity` is kept as sent; the featured ranking reads
    its numeric prefix.
    """

    name: Optional[Any] = None
    quantity: Optional[Any] = None
    expired_date: Optional[Any] = Field(default=None, alias="expiredDate")
    status: Optional[Any] = None
    donator: Optional[Donator] = None

    model_config = {"extra": "allow", "populate_by_name": True}

    @property
    def donator_email(self) -> Optional[str]:
        return self.donator.donator_email if self.donator else None

    def to_document(self) -> Dict[str, Any]:
        """Fields exactly as the client sent them, ready for insert/$set."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class StatusUpdate(BaseModel):
    """Body of PATCH /requestFoods/{id}."""

    status: Optional[Any] = Field(default=None, description="New item status, e.g. 'requested'")


class FoodRequestIn(BaseModel):
    """
    Body of POST /food-request.

    Carries a copy of the requested food's data plus the requester's email.
    """

    user_email: Optional[str] = Field(default=None, alias="userEmail")

    model_config = {"extra": "allow", "populate_by_name": True}

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)
