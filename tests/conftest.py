"""Shared fixtures: an in-memory ContentService and wire payload builders."""

import asyncio
import math
from typing import Optional
from uuid import UUID

import pytest

from humane_center.errors import TransportError, UnauthorizedError
from humane_center.models import (
    CaptureEnvelope,
    ContentEnvelope,
    FileAsset,
    Page,
    Pageable,
    SearchResponse,
)
from humane_center.models.content import SearchHit


def make_item(n: int, favorite: bool = False, video: bool = False) -> ContentEnvelope:
    return ContentEnvelope(
        uuid=UUID(int=n),
        favorite=favorite,
        data=CaptureEnvelope(
            thumbnail=FileAsset(file_uuid=UUID(int=10_000 + n), access_token=f"thumb-{n}"),
            video=FileAsset(file_uuid=UUID(int=20_000 + n), access_token=f"video-{n}") if video else None,
        ),
    )


def wire_item(n: int, favorite: bool = False) -> dict:
    return {
        "uuid": str(UUID(int=n)),
        "favorite": favorite,
        "userCreatedAt": "2024-04-20T18:30:00.123456Z",
        "data": {
            "thumbnail": {"fileUUID": str(UUID(int=10_000 + n)), "accessToken": f"thumb-{n}"},
            "closeupAsset": None,
        },
    }


def wire_page(items: list[dict], page: int, size: int, total: int) -> dict:
    return {
        "content": items,
        "pageable": {"pageNumber": page, "pageSize": size},
        "totalPages": math.ceil(total / size),
        "totalElements": total,
    }


class FakeContentService:
    """In-memory stand-in for MemoriesAPI."""

    def __init__(self, total: int = 65):
        self.items = [make_item(n) for n in range(1, total + 1)]
        self.extra: dict[UUID, ContentEnvelope] = {}
        self.search_results: dict[str, Optional[list[UUID]]] = {}

        self.requested_pages: list[int] = []
        self.note_pages: list[int] = []
        self.search_calls: list[tuple[str, str]] = []
        self.memory_calls: list[UUID] = []
        self.deleted: list[UUID] = []
        self.favorited: list[UUID] = []
        self.unfavorited: list[UUID] = []
        self.cancelled_fetches = 0

        self.fail_list = False
        self.fail_delete = False
        self.fail_favorite = False
        self.list_gate: Optional[asyncio.Event] = None
        self.search_gates: dict[str, asyncio.Event] = {}
        self.memory_gate: Optional[asyncio.Event] = None

    def _page(self, page: int, size: int) -> Page[ContentEnvelope]:
        chunk = self.items[page * size:(page + 1) * size]
        return Page[ContentEnvelope](
            content=chunk,
            pageable=Pageable(page_number=page, page_size=size),
            total_pages=math.ceil(len(self.items) / size),
            total_elements=len(self.items),
        )

    async def captures(self, page: int = 0, size: int = 10) -> Page[ContentEnvelope]:
        self.requested_pages.append(page)
        if self.list_gate is not None:
            await self.list_gate.wait()
        if self.fail_list:
            raise TransportError("offline")
        return self._page(page, size)

    async def notes(self, page: int = 0, size: int = 10) -> Page[ContentEnvelope]:
        self.note_pages.append(page)
        return self._page(page, size)

    async def memory(self, memory_id) -> ContentEnvelope:
        self.memory_calls.append(memory_id)
        if self.memory_gate is not None:
            try:
                await self.memory_gate.wait()
            except asyncio.CancelledError:
                self.cancelled_fetches += 1
                raise
        if memory_id not in self.extra:
            raise UnauthorizedError("HTTP 404", details={"status": 404})
        return self.extra[memory_id]

    async def search(self, query, domain=None) -> SearchResponse:
        self.search_calls.append((query, getattr(domain, "value", domain)))
        gate = self.search_gates.get(query)
        if gate is not None:
            await gate.wait()
        ids = self.search_results.get(query)
        if ids is None:
            return SearchResponse(memories=None)
        return SearchResponse(memories=[SearchHit(uuid=i) for i in ids])

    async def favorite(self, memory) -> None:
        if self.fail_favorite:
            raise UnauthorizedError("HTTP 500", details={"status": 500})
        self.favorited.append(memory.uuid)

    async def unfavorite(self, memory) -> None:
        if self.fail_favorite:
            raise UnauthorizedError("HTTP 500", details={"status": 500})
        self.unfavorited.append(memory.uuid)

    async def delete(self, memory) -> str:
        if self.fail_delete:
            raise TransportError("connection reset")
        self.deleted.append(memory.uuid)
        return str(memory.uuid)

    async def download_image(self, memory) -> bytes:
        return b"image:" + str(memory.uuid).encode()

    async def download_video(self, memory) -> bytes:
        return b"video:" + str(memory.uuid).encode()


@pytest.fixture
def service() -> FakeContentService:
    return FakeContentService()
