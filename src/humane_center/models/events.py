"""
Notable events — calls, music, translations and the like.
"""

from enum import Enum
from typing import Any, Optional
from uuid import UUID

from pydantic import Field

from humane_center.models.common import Timestamp, WireModel


class EventDomain(str, Enum):
    CAPTURES = "captures"
    CALLS = "calls"
    MUSIC = "music"
    NOTES = "notes"
    TRANSLATIONS = "translations"
    AIMIC = "aimic"


class EventEnvelope(WireModel):
    """Identity is the ``event_identifier`` alone."""

    event_identifier: UUID
    event_type: str = ""
    event_creation_time: Optional[Timestamp] = None
    feedback_uuid: Optional[UUID] = Field(default=None, alias="feedbackUUID")
    event_data: dict[str, Any] = {}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EventEnvelope):
            return NotImplemented
        return self.event_identifier == other.event_identifier

    def __hash__(self) -> int:
        return hash(self.event_identifier)

