"""Schemas for shopping lists"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field

from domain.schemas.base import CamelModel, EntryModel, StrictCamelModel


class ListItemEntry(EntryModel):
    name: str = Field(..., min_length=1)
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    category: Optional[str] = None
    is_checked: Optional[bool] = None


class ShoppingListCreateRequest(CamelModel):
    user_id: str = Field(..., min_length=1)
    name: Optional[str] = None
    items: Optional[List[Any]] = None


class ShoppingListAddRequest(CamelModel):
    items: List[Any]


class ListItemUpdate(StrictCamelModel):
    name: Optional[str] = Field(None, min_length=1)
    quantity: Optional[float] = Field(None, gt=0)
    unit: Optional[str] = None
    category: Optional[str] = None
    is_checked: Optional[bool] = None


class ListItemResponse(CamelModel):
    id: str
    name: str
    quantity: float
    unit: str
    category: str
    is_checked: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ShoppingListResponse(CamelModel):
    id: str
    owner_id: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ShoppingListsResponse(CamelModel):
    lists: List[ShoppingListResponse]


class ShoppingListDetailResponse(CamelModel):
    list: ShoppingListResponse
    items: List[ListItemResponse]
