from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, EmailStr
from pydantic.alias_generators import to_camel


def _strip(v: Any) -> Any:
    return v.strip() if isinstance(v, str) else v


# Every email entry point strips surrounding whitespace before validation
Email = Annotated[EmailStr, BeforeValidator(_strip)]


class CamelModel(BaseModel):
    """Base schema exposing camelCase JSON while keeping snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    message: str
