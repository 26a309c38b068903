from __future__ import annotations

from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import AliasChoices, Field, model_validator

from domain.schemas.base import CamelModel, EntryModel


class MealEntryIn(EntryModel):
    """A meal slot inside a plan; ``type`` is accepted as in older clients.

    Any non-empty meal type is kept (breakfast, lunch, dinner, snack, brunch...).
    """

    meal_date: date = Field(..., alias="date")
    meal_type: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("type", "mealType", "meal_type")
    )
    recipe_id: Optional[str] = None
    recipe_name: Optional[str] = None
    notes: Optional[str] = None


class MealPlanCreateRequest(CamelModel):
    user_id: str = Field(..., min_length=1)
    start_date: date
    end_date: Optional[date] = None
    name: Optional[str] = None
    meals: Optional[List[Any]] = None

    @model_validator(mode="after")
    def end_not_before_start(self) -> "MealPlanCreateRequest":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class MealEntryResponse(CamelModel):
    id: str
    date: str
    meal_type: str
    recipe_id: Optional[str] = None
    recipe_name: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MealPlanResponse(CamelModel):
    id: str
    owner_id: str
    name: str
    start_date: str
    end_date: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MealPlansResponse(CamelModel):
    plans: List[MealPlanResponse]


class MealPlanDetailResponse(CamelModel):
    plan: MealPlanResponse
    meals: List[MealEntryResponse]
