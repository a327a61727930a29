"""Compilation Schemas."""

from pydantic import Field, field_validator

from ewm.schemas.common import CamelModel
from ewm.schemas.event import EventShortDto


class NewCompilationDto(CamelModel):
    events: list[int] = Field(default_factory=list)
    pinned: bool = False
    title: str = Field(min_length=1, max_length=50)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class CompilationDto(CamelModel):
    id: int
    events: list[EventShortDto]
    pinned: bool
    title: str
