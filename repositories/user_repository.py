"""
User Repository - Data access layer for user profiles
"""

from typing import Any, Dict, Optional

from repositories.base import BaseRepository


class UserRepository(BaseRepository):
    """Repository for user profile documents, keyed by subject id"""

    collection = "users"

    def upsert(self, user_id: str, data: Dict[str, Any]) -> None:
        """Merge fields into the profile, creating it when missing"""
        self.store.set(self.collection, user_id, data, merge=True)

    def get_profile(self, user_id: str) -> Optional[Dict[str, Any]]:
        return self.get_by_id(user_id)
