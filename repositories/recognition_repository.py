"""
Recognition Repositories - stored results of receipt scans and food recognition
"""

from repositories.base import BaseRepository


class ReceiptRepository(BaseRepository):
    collection = "receipts"


class FoodRecognitionRepository(BaseRepository):
    collection = "food_recognitions"
