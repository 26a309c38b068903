"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, ContainerRepository, as_utc, utcnow
from repositories.user_repository import UserRepository
from repositories.pantry_repository import PantryRepository
from repositories.shopping_repository import ShoppingListRepository
from repositories.meal_plan_repository import MealPlanRepository
from repositories.recipe_repository import RecipeRepository
from repositories.notification_repository import NotificationRepository
from repositories.recognition_repository import (
    ReceiptRepository,
    FoodRecognitionRepository,
)

__all__ = [
    "BaseRepository",
    "ContainerRepository",
    "as_utc",
    "utcnow",
    "UserRepository",
    "PantryRepository",
    "ShoppingListRepository",
    "MealPlanRepository",
    "RecipeRepository",
    "NotificationRepository",
    "ReceiptRepository",
    "FoodRecognitionRepository",
]
