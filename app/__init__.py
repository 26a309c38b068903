"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and the scheduled expiry check.
"""

from app.config import settings
from app.exceptions import (
    PantryKeeperError,
    ServiceValidationError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    DependencyUnavailableError,
    StoreError,
)

__all__ = [
    "settings",
    "PantryKeeperError",
    "ServiceValidationError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "DependencyUnavailableError",
    "StoreError",
]
