from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional
import logging

from adapters.document_store import DocumentStore
from domain.enums import NotificationType
from repositories import NotificationRepository, PantryRepository, utcnow
from app.exceptions import NotFoundError, StoreError

logger = logging.getLogger("pantrykeeper.notifications")

EXPIRING_ITEM_FIELDS = ("id", "name", "quantity", "unit", "category", "expiry_date")


class NotificationService:
    @staticmethod
    def check_expiring_items(
        store: DocumentStore, now: Optional[datetime] = None, window_days: int = 3
    ) -> int:
        """
        Write one notification per pantry holding items that expire within
        ``window_days`` from ``now``. A failing pantry is logged and skipped.

        Returns:
            Number of notifications written
        """
        now = now or utcnow()
        until = now + timedelta(days=window_days)
        pantries = PantryRepository(store)
        notifications = NotificationRepository(store)

        written = 0
        for pantry in pantries.get_all_pantries():
            user_id = pantry.get("owner_id") or pantry["id"]
            try:
                expiring = pantries.get_expiring_items(pantry["id"], now, until)
                if not expiring:
                    continue
                notifications.create(
                    {
                        "owner_id": user_id,
                        "type": NotificationType.EXPIRING_ITEMS.value,
                        "items": [
                            {k: item.get(k) for k in EXPIRING_ITEM_FIELDS}
                            for item in expiring
                        ],
                        "read": False,
                        "created_at": utcnow(),
                    }
                )
            except StoreError:
                logger.exception(f"expiry_check_failed user_id={user_id}")
                continue
            written += 1
            logger.info(f"expiring_items user_id={user_id} count={len(expiring)}")

        logger.info(f"expiry_check_done notifications={written}")
        return written

    @staticmethod
    def get_notifications(store: DocumentStore, user_id: str) -> List[Dict[str, Any]]:
        return NotificationRepository(store).find_by_owner(user_id)

    @staticmethod
    def mark_read(store: DocumentStore, user_id: str, notification_id: str) -> None:
        repo = NotificationRepository(store)
        notification = repo.get_by_id(notification_id)
        if notification is None or notification.get("owner_id") != user_id:
            raise NotFoundError("Notification not found")
        repo.update(notification_id, {"read": True, "updated_at": utcnow()})
