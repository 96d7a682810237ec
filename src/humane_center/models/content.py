"""
Memory content models — captures, notes and the envelope that wraps them.
"""

from enum import Enum
from typing import Any, Optional, Union
from uuid import UUID

from pydantic import Field

from humane_center.models.common import Timestamp, WireModel


class FileAsset(WireModel):
    file_uuid: UUID = Field(alias="fileUUID")
    access_token: str


class CaptureEnvelope(WireModel):
    thumbnail: FileAsset
    closeup_asset: Optional[FileAsset] = None
    video: Optional[FileAsset] = None
    type: Optional[str] = None

    @property
    def image_asset(self) -> FileAsset:
        return self.closeup_asset or self.thumbnail


class Note(WireModel):
    text: str = ""
    title: str = ""


class NoteEnvelope(WireModel):
    note: Note


class ContentEnvelope(WireModel):
    """A single memory. Identity is the ``uuid`` alone."""

    uuid: UUID
    favorite: bool = False
    user_created_at: Optional[Timestamp] = None
    user_last_modified: Optional[Timestamp] = None
    original_client_created_at: Optional[Timestamp] = None
    location: Optional[str] = None
    data: Union[CaptureEnvelope, NoteEnvelope, dict[str, Any]] = Field(
        default_factory=dict, union_mode="left_to_right",
    )

    @property
    def kind(self) -> str:
        if isinstance(self.data, CaptureEnvelope):
            return "capture"
        if isinstance(self.data, NoteEnvelope):
            return "note"
        return "unknown"

    @property
    def capture(self) -> Optional[CaptureEnvelope]:
        return self.data if isinstance(self.data, CaptureEnvelope) else None

    @property
    def note(self) -> Optional[Note]:
        return self.data.note if isinstance(self.data, NoteEnvelope) else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentEnvelope):
            return NotImplemented
        return self.uuid == other.uuid

    def __hash__(self) -> int:
        return hash(self.uuid)


class ContentCategory(str, Enum):
    CAPTURES = "captures"
    NOTES = "notes"


class SearchHit(WireModel):
    uuid: UUID


class SearchResponse(WireModel):
    memories: Optional[list[SearchHit]] = None

    @property
    def ids(self) -> Optional[list[UUID]]:
        if self.memories is None:
            return None
        return [m.uuid for m in self.memories]

