"""Common Schema Pieces — camelCase base model and the wire datetime type.

Invariants:
    - Datetimes travel as "yyyy-MM-dd HH:mm:ss" in both directions
    - Models accept both camelCase (wire) and snake_case (Python) names
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from ewm.core.domain_types import DATETIME_FORMAT


def _parse_datetime(value: object) -> object:
    if isinstance(value, str):
        try:
            return datetime.strptime(value, DATETIME_FORMAT)
        except ValueError:
            return value  # let pydantic try ISO-8601 and report the error
    return value


def format_datetime(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


EwmDateTime = Annotated[
    datetime,
    BeforeValidator(_parse_datetime),
    PlainSerializer(format_datetime, return_type=str, when_used="json"),
]


class CamelModel(BaseModel):
    """Base for every API schema."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
