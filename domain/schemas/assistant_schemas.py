"""Schemas for language-model backed features and recognition"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from domain.schemas.base import CamelModel


class AIChefQueryRequest(CamelModel):
    user_id: str = Field(..., min_length=1)
    query: str = Field(..., min_length=1)


class AIChefQueryResponse(CamelModel):
    response: str


class MicronutritionRequest(CamelModel):
    food_name: str = Field(..., min_length=1)


class MicronutritionResponse(CamelModel):
    food_name: str
    analysis: str


class ImageRequest(CamelModel):
    image_url: str = Field(..., min_length=1)


class ReceiptTextRequest(CamelModel):
    """Raw text from an OCR pass over a receipt"""

    user_id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)


class BarcodeRequest(CamelModel):
    barcode: str = Field(..., min_length=1)


class RecognizedFoodItem(CamelModel):
    name: str
    category: str
    confidence: float


class ReceiptItem(CamelModel):
    name: str
    price: float
    quantity: float = 1
    total: float


class ParsedReceipt(CamelModel):
    store: Optional[str] = None
    date: Optional[str] = None
    items: List[ReceiptItem] = Field(default_factory=list)
    total: Optional[float] = None


class NotificationResponse(CamelModel):
    id: str
    owner_id: str
    type: str
    items: list = Field(default_factory=list)
    read: bool = False
    created_at: Optional[datetime] = None


class NotificationsResponse(CamelModel):
    notifications: List[NotificationResponse]
