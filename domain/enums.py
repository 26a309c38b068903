"""
Domain enums for PantryKeeper.
Contains all enumeration types used across the domain schemas.
"""

import enum


class NotificationType(str, enum.Enum):
    """Kinds of notification documents written by background jobs"""

    EXPIRING_ITEMS = "expiring-items"
