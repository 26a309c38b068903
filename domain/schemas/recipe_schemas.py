"""Schemas for saved recipes and recipe search"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from domain.schemas.base import CamelModel


class RecipeIn(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    ingredients: List[Any] = Field(default_factory=list)
    instructions: List[Any] = Field(default_factory=list)
    prep_time: Optional[int] = Field(None, ge=0, description="Minutes")
    cook_time: Optional[int] = Field(None, ge=0, description="Minutes")
    servings: Optional[int] = Field(None, ge=1)
    nutrition: Dict[str, Any] = Field(default_factory=dict)
    image: Optional[str] = None
    source: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    is_favorite: bool = False

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: List[str]) -> List[str]:
        # keyword search matches lowercase tags
        return [t.strip().lower() for t in v if t and t.strip()]


class RecipeSaveRequest(CamelModel):
    user_id: str = Field(..., min_length=1)
    recipe: RecipeIn


class RecipeSearchRequest(CamelModel):
    query: str = Field(..., min_length=1)


class RecipeResponse(CamelModel):
    id: str
    owner_id: str
    name: str
    description: str = ""
    ingredients: List[Any] = Field(default_factory=list)
    instructions: List[Any] = Field(default_factory=list)
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    servings: Optional[int] = None
    nutrition: Dict[str, Any] = Field(default_factory=dict)
    image: Optional[str] = None
    source: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    is_favorite: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RecipesResponse(CamelModel):
    recipes: List[RecipeResponse]


class RecipeSearchResponse(CamelModel):
    results: List[RecipeResponse]
