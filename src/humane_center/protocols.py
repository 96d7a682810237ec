"""
The slice of the API the content repository depends on.

``MemoriesAPI`` satisfies it over HTTP; tests pass an in-memory fake.
"""

from typing import Protocol, Union
from uuid import UUID

from humane_center.models.common import Page
from humane_center.models.content import ContentEnvelope, SearchResponse
from humane_center.models.events import EventDomain


class ContentService(Protocol):
    async def captures(self, page: int = 0, size: int = 10) -> Page[ContentEnvelope]: ...

    async def notes(self, page: int = 0, size: int = 10) -> Page[ContentEnvelope]: ...

    async def memory(self, memory_id: Union[UUID, str]) -> ContentEnvelope: ...

    async def search(self, query: str, domain: EventDomain = EventDomain.CAPTURES) -> SearchResponse: ...

    async def favorite(self, memory: ContentEnvelope) -> None: ...

    async def unfavorite(self, memory: ContentEnvelope) -> None: ...

    async def delete(self, memory: ContentEnvelope) -> str: ...

    async def download_image(self, memory: ContentEnvelope) -> bytes: ...

    async def download_video(self, memory: ContentEnvelope) -> bytes: ...
