"""
Memories REST API — captures, notes, favorites, search and media downloads.
"""

from __future__ import annotations

from typing import Union
from uuid import UUID

from humane_center.errors import NotFoundError
from humane_center.models.common import Page
from humane_center.models.content import ContentEnvelope, Note, SearchResponse
from humane_center.models.events import EventDomain
from humane_center.transport.http import HttpClient

CAPTURE = "capture"
MEMORY = "capture/memory"
NOTE = "capture/note"
AI_BUS = "ai-bus"


def _memory_id(memory: Union[ContentEnvelope, UUID, str]) -> str:
    if isinstance(memory, ContentEnvelope):
        return str(memory.uuid)
    return str(memory)


class MemoriesAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def captures(
        self,
        page: int = 0,
        size: int = 10,
        sort: str = "userCreatedAt,DESC",
        only_favorited: bool = False,
    ) -> Page[ContentEnvelope]:
        return await self._http.get(f"{CAPTURE}/captures", Page[ContentEnvelope], params={
            "page": page,
            "size": size,
            "sort": sort,
            "onlyContainingFavorited": "true" if only_favorited else "false",
        })

    async def notes(self, page: int = 0, size: int = 10) -> Page[ContentEnvelope]:
        return await self._http.get(f"{CAPTURE}/notes", Page[ContentEnvelope], params={
            "page": page,
            "size": size,
        })

    async def memory(self, memory_id: Union[UUID, str]) -> ContentEnvelope:
        """Fetch a single memory by id."""
        return await self._http.get(f"{MEMORY}/{memory_id}", ContentEnvelope)

    async def search(self, query: str, domain: EventDomain = EventDomain.CAPTURES) -> SearchResponse:
        """Full-text search; the response carries matching ids only."""
        return await self._http.get(f"{AI_BUS}/search", SearchResponse, params={
            "query": query,
            "domain": domain.value,
        })

    async def create_note(self, note: Note) -> ContentEnvelope:
        return await self._http.post(f"{NOTE}/create", ContentEnvelope, note.model_dump(by_alias=True))

    async def update_note(self, note_id: Union[UUID, str], note: Note) -> ContentEnvelope:
        return await self._http.post(f"{NOTE}/{note_id}", ContentEnvelope, note.model_dump(by_alias=True))

    async def favorite(self, memory: Union[ContentEnvelope, UUID, str]) -> None:
        await self._http.post(f"{MEMORY}/{_memory_id(memory)}/favorite")

    async def unfavorite(self, memory: Union[ContentEnvelope, UUID, str]) -> None:
        await self._http.post(f"{MEMORY}/{_memory_id(memory)}/unfavorite")

    async def delete(self, memory: Union[ContentEnvelope, UUID, str]) -> str:
        return await self._http.delete(f"{MEMORY}/{_memory_id(memory)}", str)

    def _download_path(self, memory: ContentEnvelope, file_uuid: UUID) -> str:
        return f"{MEMORY}/{memory.uuid}/file/{file_uuid}/download"

    async def download_image(self, memory: ContentEnvelope) -> bytes:
        """Download the close-up (or thumbnail) image using its per-asset token."""
        capture = memory.capture
        if capture is None:
            raise NotFoundError(f"Memory {memory.uuid} has no image asset")
        asset = capture.image_asset
        return await self._http.get_bytes(
            self._download_path(memory, asset.file_uuid),
            params={"token": asset.access_token, "rawData": "false"},
        )

    async def download_video(self, memory: ContentEnvelope) -> bytes:
        """Download the video asset; needs both the asset token and the session bearer."""
        capture = memory.capture
        if capture is None or capture.video is None:
            raise NotFoundError(f"Memory {memory.uuid} has no video asset")
        return await self._http.get_bytes(
            self._download_path(memory, capture.video.file_uuid),
            params={"token": capture.video.access_token, "rawData": "false"},
            bearer=True,
        )
