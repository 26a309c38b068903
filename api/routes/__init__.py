"""API routes package"""

from . import (
    health,
    profiles,
    pantry,
    shopping,
    meal_plans,
    recipes,
    assistant,
    food,
    recognition,
    notifications,
)

__all__ = [
    "health",
    "profiles",
    "pantry",
    "shopping",
    "meal_plans",
    "recipes",
    "assistant",
    "food",
    "recognition",
    "notifications",
]
