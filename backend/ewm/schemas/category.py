"""Category Schemas — admin category payloads and public category view."""

from pydantic import Field, field_validator

from ewm.schemas.common import CamelModel


class NewCategoryDto(CamelModel):
    name: str = Field(min_length=1, max_length=50)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class CategoryDto(NewCategoryDto):
    id: int
