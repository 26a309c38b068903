"""Schemas for pantry inventory"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field

from domain.schemas.base import CamelModel, EntryModel, StrictCamelModel


class PantryItemEntry(EntryModel):
    """One entry of an add-to-pantry request.

    Entries are validated one at a time by the batch writer. An entry without
    a name is dropped; a bad optional value falls back to its default.
    """

    name: str = Field(..., min_length=1)
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    category: Optional[str] = None
    expiry_date: Optional[datetime] = None
    purchase_date: Optional[datetime] = None
    custom_image: Optional[str] = None
    is_custom: Optional[bool] = None


class PantryAddRequest(CamelModel):
    user_id: str = Field(..., min_length=1)
    items: List[Any]


class PantryItemUpdate(StrictCamelModel):
    """Partial update of a pantry item; unknown fields are rejected"""

    name: Optional[str] = Field(None, min_length=1)
    quantity: Optional[float] = Field(None, gt=0)
    unit: Optional[str] = None
    category: Optional[str] = None
    expiry_date: Optional[datetime] = None
    purchase_date: Optional[datetime] = None
    custom_image: Optional[str] = None
    is_custom: Optional[bool] = None


class PantryItemResponse(CamelModel):
    id: str
    name: str
    quantity: float
    unit: str
    category: str
    expiry_date: Optional[datetime] = None
    purchase_date: Optional[datetime] = None
    custom_image: Optional[str] = None
    is_custom: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PantryResponse(CamelModel):
    items: List[PantryItemResponse]


class ShoppingListToPantryRequest(CamelModel):
    """Move purchased shopping list items into the pantry"""

    user_id: str = Field(..., min_length=1)
    list_id: str = Field(..., min_length=1)
    purchased_items: List[str]
