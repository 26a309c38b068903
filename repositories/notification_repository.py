"""
Notification Repository - Data access layer for user notifications
"""

from repositories.base import BaseRepository


class NotificationRepository(BaseRepository):
    collection = "notifications"
