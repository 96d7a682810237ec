"""
Shared model plumbing — camelCase wire names and the strict timestamp type.
"""

from datetime import datetime
from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from humane_center.transport.timestamps import format_timestamp, parse_timestamp

Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str),
]


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


T = TypeVar("T")


class Pageable(WireModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    page_number: int = 0
    page_size: int = 0


class Page(WireModel, Generic[T]):
    """One page of a server-side paginated collection."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    content: list[T] = []
    pageable: Pageable = Pageable()
    total_pages: int = 0
    total_elements: int = 0

    @property
    def page_number(self) -> int:
        return self.pageable.page_number
