"""User Schemas — admin user management payloads."""

from pydantic import Field, field_validator

from ewm.schemas.common import CamelModel


class NewUserRequest(CamelModel):
    name: str = Field(min_length=2, max_length=250)
    email: str = Field(
        min_length=6, max_length=254, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class UserDto(CamelModel):
    id: int
    name: str
    email: str


class UserShortDto(CamelModel):
    id: int
    name: str
