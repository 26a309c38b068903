"""
Pantry Repository - Data access layer for pantry operations
"""

from datetime import datetime
from typing import Any, Dict, List

from repositories.base import ContainerRepository


class PantryRepository(ContainerRepository):
    """Pantries are keyed by their owner's subject id"""

    collection = "pantries"
    child_collection = "pantry_items"
    parent_field = "pantry_id"

    def get_all_pantries(self) -> List[Dict[str, Any]]:
        return self.store.find(self.collection)

    def get_expiring_items(
        self, pantry_id: str, start: datetime, end: datetime
    ) -> List[Dict[str, Any]]:
        """Items with start <= expiry_date <= end, soonest first"""
        return self.store.find(
            self.child_collection,
            [
                (self.parent_field, "==", pantry_id),
                ("expiry_date", ">=", start),
                ("expiry_date", "<=", end),
            ],
            order_by="expiry_date",
        )
