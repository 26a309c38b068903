"""Schemas for user profiles"""

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from domain.schemas.base import CamelModel


class Preferences(CamelModel):
    """Free-form preferences; dietary restrictions must be a list when given"""

    dietary_restrictions: Optional[List[str]] = None

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )


class ProfileUpsertRequest(CamelModel):
    """Create or update the caller's profile. Identity comes from the token."""

    user_id: Optional[str] = Field(None, description="Must match the caller if given")
    display_name: str = Field(..., description="Name shown in the app")
    preferences: Optional[Preferences] = None

    @field_validator("display_name")
    @classmethod
    def display_name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Display name is required and must be a non-empty string")
        return v


class ProfileResponse(CamelModel):
    id: Optional[str] = None
    display_name: Optional[str] = None
    email: Optional[str] = None
    preferences: Optional[Preferences] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
