"""Services package - Business logic layer"""

from services.batch_writer import BatchWriter, BatchWriteResult, ChildSpec
from services.ownership import ensure_owner
from services.profile_service import ProfileService
from services.pantry_service import PantryService
from services.shopping_service import ShoppingListService
from services.meal_plan_service import MealPlanService
from services.recipe_service import RecipeService
from services.assistant_service import AIChefService
from services.recognition_service import RecognitionService
from services.food_service import FoodService
from services.notification_service import NotificationService

__all__ = [
    "BatchWriter",
    "BatchWriteResult",
    "ChildSpec",
    "ensure_owner",
    "ProfileService",
    "PantryService",
    "ShoppingListService",
    "MealPlanService",
    "RecipeService",
    "AIChefService",
    "RecognitionService",
    "FoodService",
    "NotificationService",
]
