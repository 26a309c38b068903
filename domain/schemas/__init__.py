"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.base import CamelModel, EntryModel, StrictCamelModel
from domain.schemas.profile_schemas import (
    Preferences,
    ProfileUpsertRequest,
    ProfileResponse,
)
from domain.schemas.pantry_schemas import (
    PantryItemEntry,
    PantryAddRequest,
    PantryItemUpdate,
    PantryItemResponse,
    PantryResponse,
    ShoppingListToPantryRequest,
)
from domain.schemas.shopping_schemas import (
    ListItemEntry,
    ShoppingListCreateRequest,
    ShoppingListAddRequest,
    ListItemUpdate,
    ListItemResponse,
    ShoppingListResponse,
    ShoppingListsResponse,
    ShoppingListDetailResponse,
)
from domain.schemas.plan_schemas import (
    MealEntryIn,
    MealPlanCreateRequest,
    MealEntryResponse,
    MealPlanResponse,
    MealPlansResponse,
    MealPlanDetailResponse,
)
from domain.schemas.recipe_schemas import (
    RecipeIn,
    RecipeSaveRequest,
    RecipeSearchRequest,
    RecipeResponse,
    RecipesResponse,
    RecipeSearchResponse,
)
from domain.schemas.assistant_schemas import (
    AIChefQueryRequest,
    AIChefQueryResponse,
    MicronutritionRequest,
    MicronutritionResponse,
    ImageRequest,
    ReceiptTextRequest,
    BarcodeRequest,
    RecognizedFoodItem,
    ReceiptItem,
    ParsedReceipt,
    NotificationResponse,
    NotificationsResponse,
)

__all__ = [
    "CamelModel",
    "EntryModel",
    "StrictCamelModel",
    # Profile schemas
    "Preferences",
    "ProfileUpsertRequest",
    "ProfileResponse",
    # Pantry schemas
    "PantryItemEntry",
    "PantryAddRequest",
    "PantryItemUpdate",
    "PantryItemResponse",
    "PantryResponse",
    "ShoppingListToPantryRequest",
    # Shopping list schemas
    "ListItemEntry",
    "ShoppingListCreateRequest",
    "ShoppingListAddRequest",
    "ListItemUpdate",
    "ListItemResponse",
    "ShoppingListResponse",
    "ShoppingListsResponse",
    "ShoppingListDetailResponse",
    # Meal plan schemas
    "MealEntryIn",
    "MealPlanCreateRequest",
    "MealEntryResponse",
    "MealPlanResponse",
    "MealPlansResponse",
    "MealPlanDetailResponse",
    # Recipe schemas
    "RecipeIn",
    "RecipeSaveRequest",
    "RecipeSearchRequest",
    "RecipeResponse",
    "RecipesResponse",
    "RecipeSearchResponse",
    # Assistant and recognition schemas
    "AIChefQueryRequest",
    "AIChefQueryResponse",
    "MicronutritionRequest",
    "MicronutritionResponse",
    "ImageRequest",
    "ReceiptTextRequest",
    "BarcodeRequest",
    "RecognizedFoodItem",
    "ReceiptItem",
    "ParsedReceipt",
    "NotificationResponse",
    "NotificationsResponse",
]
