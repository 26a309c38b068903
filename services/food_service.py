from typing import Any, Dict, Optional
import logging

from adapters.food_database_adapter import DEFAULT_MEASURE_URI, FoodDatabaseClient
from app.exceptions import NotFoundError

logger = logging.getLogger("pantrykeeper.food")


class FoodService:
    """Thin layer over the food database; search and nutrition are passed through"""

    @staticmethod
    def search(food_db: FoodDatabaseClient, query: str) -> Dict[str, Any]:
        return food_db.search(query)

    @staticmethod
    def nutrition(
        food_db: FoodDatabaseClient,
        food_id: str,
        quantity: float = 1,
        measure_uri: Optional[str] = None,
    ) -> Dict[str, Any]:
        return food_db.nutrients(food_id, quantity, measure_uri or DEFAULT_MEASURE_URI)

    @staticmethod
    def lookup_barcode(food_db: FoodDatabaseClient, barcode: str) -> Dict[str, Any]:
        """Product summary for a UPC/EAN code from the first database hint"""
        result = food_db.lookup_barcode(barcode)
        hints = result.get("hints") or []
        parsed = result.get("parsed") or []
        entry = (parsed[0] if parsed else None) or (hints[0] if hints else None)
        if not entry or "food" not in entry:
            logger.info(f"barcode_not_found barcode={barcode}")
            raise NotFoundError("Product not found")

        food = entry["food"]
        return {
            "food_id": food.get("foodId"),
            "name": food.get("label"),
            "brand": food.get("brand"),
            "category": food.get("category"),
            "image": food.get("image"),
            "nutrition": food.get("nutrients") or {},
        }
