from typing import Any, Dict, Optional, Tuple
import logging

from adapters.auth_adapter import Principal
from adapters.document_store import DocumentStore
from domain.schemas.profile_schemas import ProfileUpsertRequest
from repositories import UserRepository, utcnow
from app.exceptions import NotFoundError

logger = logging.getLogger("pantrykeeper.profile")


class ProfileService:
    """Business logic for profile management"""

    @staticmethod
    def get_profile(store: DocumentStore, user_id: str) -> Dict[str, Any]:
        """Retrieve a stored profile"""
        profile = UserRepository(store).get_profile(user_id)
        if profile is None:
            logger.warning(f"profile_not_found user_id={user_id}")
            raise NotFoundError("User not found")

        logger.info(f"profile_fetched user_id={user_id}")
        return profile

    @staticmethod
    def upsert_profile(
        store: DocumentStore, principal: Principal, data: ProfileUpsertRequest
    ) -> Tuple[Dict[str, Any], bool]:
        """
        Create or update the caller's profile.

        The profile is keyed by the authenticated subject; the email is taken
        from the credential when the profile is first created.
        Returns a tuple of (profile, created_flag).
        """
        repo = UserRepository(store)
        user_id = principal.subject_id
        now = utcnow()
        preferences: Optional[Dict[str, Any]] = (
            data.preferences.model_dump(exclude_none=True)
            if data.preferences is not None
            else None
        )

        existing = repo.get_profile(user_id)
        created = existing is None
        if created:
            repo.upsert(
                user_id,
                {
                    "display_name": data.display_name,
                    "email": principal.email,
                    "preferences": preferences,
                    "created_at": now,
                    "updated_at": now,
                },
            )
            logger.info(f"profile_created user_id={user_id}")
        else:
            repo.update(
                user_id,
                {
                    "display_name": data.display_name,
                    "preferences": preferences,
                    "updated_at": now,
                },
            )
            logger.info(f"profile_updated user_id={user_id}")

        return repo.get_profile(user_id), created
