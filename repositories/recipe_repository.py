"""
Recipe Repository - Data access layer for saved recipes
"""

from typing import Any, Dict, List

from repositories.base import BaseRepository


class RecipeRepository(BaseRepository):
    collection = "recipes"

    def find_by_tag(self, tag: str, limit: int = 5) -> List[Dict[str, Any]]:
        """Recipes whose tag list contains ``tag``"""
        return self.store.find(
            self.collection, [("tags", "array-contains", tag)], limit=limit
        )
