"""Shared base model for request and response schemas.

Clients send and receive camelCase field names; services and stored
documents use snake_case. Both spellings are accepted on input.
"""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class StrictCamelModel(CamelModel):
    """Rejects unknown fields, used for partial updates."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class EntryModel(CamelModel):
    """
    One child entry of a batched write.

    Only required fields can reject an entry. An optional field holding an
    unusable value is reset to None so the service default applies.
    Strings are stripped, so a blank name counts as missing.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def drop_invalid_optional(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            if cls.model_fields[info.field_name].is_required():
                raise
            return None
