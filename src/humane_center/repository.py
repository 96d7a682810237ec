"""
Incremental content repository — one growing, de-duplicated list per category.

Turns the page-at-a-time listing calls into a single ordered collection for
infinite-scroll style rendering:

- ``initial()`` / ``reload()`` / ``load_more()`` page through the server,
  merging by uuid (first-seen order wins, a reload replaces everything).
- ``remove()`` / ``toggle_favorite()`` patch the local collection after a
  single-item change instead of reloading.
- ``search()`` swaps the collection for the matching memories, reusing local
  items and fetching the rest concurrently.

Only one load runs at a time; a second one while the first is in flight is
dropped, not queued. Background failures (loads, searches) are logged and
kept in ``last_error``; the collection is left as it was.

State is read by polling the properties or by registering a listener with
``add_listener()``. All mutations happen on the event loop between awaits.
"""

import asyncio
import logging
from typing import Callable, Iterable, Optional, Union
from uuid import UUID

from humane_center.config import get_settings
from humane_center.errors import HumaneCenterError
from humane_center.models.common import Page
from humane_center.models.content import ContentCategory, ContentEnvelope
from humane_center.models.events import EventDomain
from humane_center.protocols import ContentService

logger = logging.getLogger(__name__)

SEARCH_DOMAINS = {
    ContentCategory.CAPTURES: EventDomain.CAPTURES,
    ContentCategory.NOTES: EventDomain.NOTES,
}

Listener = Callable[["ContentRepository"], None]


class ContentRepository:
    def __init__(
        self,
        service: ContentService,
        category: ContentCategory = ContentCategory.CAPTURES,
        page_size: Optional[int] = None,
        search_debounce: Optional[float] = None,
        search_concurrency: Optional[int] = None,
    ):
        settings = get_settings()
        self._service = service
        self.category = category
        self.page_size = page_size or settings.page_size
        self._search_debounce = settings.search_debounce if search_debounce is None else search_debounce
        self._search_concurrency = search_concurrency or settings.search_concurrency

        self._items: dict[UUID, ContentEnvelope] = {}
        self.page: Optional[Page[ContentEnvelope]] = None
        self.is_loading = False
        self.is_finished = False
        self.has_more_data = False
        self.is_searching = False
        self.showing_search_results = False
        self.last_error: Optional[HumaneCenterError] = None

        self._listeners: list[Listener] = []
        self._search_generation = 0
        self._search_fetches: set[asyncio.Future] = set()

    # -- state -------------------------------------------------------------

    @property
    def content(self) -> list[ContentEnvelope]:
        return list(self._items.values())

    @property
    def has_content(self) -> bool:
        return bool(self._items)

    @property
    def search_domain(self) -> EventDomain:
        return SEARCH_DOMAINS[self.category]

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, ContentEnvelope):
            return item.uuid in self._items
        return item in self._items

    def add_listener(self, listener: Listener) -> Callable[[], None]:
        """Register a change callback. Returns a function that unregisters it."""
        self._listeners.append(listener)

        def remove() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass
        return remove

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # -- paging ------------------------------------------------------------

    async def _fetch(self, page: int, size: int) -> Page[ContentEnvelope]:
        if self.category is ContentCategory.NOTES:
            return await self._service.notes(page, size)
        return await self._service.captures(page, size)

    async def load(self, page: int = 0, size: Optional[int] = None, reload: bool = False) -> None:
        if self.is_loading:
            logger.debug(f"Load of {self.category.value} page {page} dropped; another load is in flight")
            return
        self.is_loading = True
        self._notify()
        try:
            data = await self._fetch(page, size or self.page_size)
        except HumaneCenterError as e:
            logger.warning(f"Loading {self.category.value} page {page} failed: {e}")
            self.last_error = e
        else:
            self.page = data
            if reload:
                self._items = {}
                self.showing_search_results = False
            for item in data.content:
                self._items.setdefault(item.uuid, item)
            self.has_more_data = page < data.total_pages - 1
            self.last_error = None
        finally:
            self.is_finished = True
            self.is_loading = False
            self._notify()

    async def initial(self) -> None:
        """First load; does nothing once any load has completed."""
        if self.is_finished:
            return
        await self.load()

    async def reload(self) -> None:
        """Replace the collection with page 0 (pull-to-refresh)."""
        self._supersede_search()
        await self.load(reload=True)

    async def load_more(self) -> None:
        """Append the next catalogue page.

        Does nothing while a search runs or its results are shown; ``reload()``
        returns to the catalogue.
        """
        if self.page is None or not self.has_more_data or self.is_loading:
            return
        if self.is_searching or self.showing_search_results:
            return
        next_page = min(self.page.page_number + 1, self.page.total_pages)
        logger.debug(f"next page: {next_page}")
        await self.load(page=next_page)

    # -- local mutations ---------------------------------------------------

    async def _delete_remote(self, item: ContentEnvelope) -> bool:
        try:
            await self._service.delete(item)
        except HumaneCenterError as e:
            # Local removal is kept.
            logger.warning(f"Deleting {item.uuid} failed: {e}")
            self.last_error = e
            self._notify()
            return False
        return True

    async def remove(self, identifier: Union[ContentEnvelope, UUID]) -> bool:
        """Drop an item locally, then delete it remotely.

        Returns whether the remote delete succeeded. The item stays removed
        either way.
        """
        uid = identifier.uuid if isinstance(identifier, ContentEnvelope) else identifier
        item = self._items.pop(uid, None)
        if item is None:
            return False
        self._notify()
        return await self._delete_remote(item)

    async def remove_at(self, offsets: Iterable[int]) -> bool:
        """Like ``remove()`` for positions in ``content``; offsets resolve before anything moves."""
        items = self.content
        targets = [items[i] for i in sorted(set(offsets)) if 0 <= i < len(items)]
        if not targets:
            return False
        for item in targets:
            self._items.pop(item.uuid, None)
        self._notify()
        ok = True
        for item in targets:
            ok = await self._delete_remote(item) and ok
        return ok

    async def toggle_favorite(self, item: ContentEnvelope) -> bool:
        """Favorite/unfavorite remotely; flip the local flag only once the server agrees."""
        try:
            if item.favorite:
                await self._service.unfavorite(item)
            else:
                await self._service.favorite(item)
        except HumaneCenterError as e:
            logger.warning(f"Toggling favorite on {item.uuid} failed: {e}")
            self.last_error = e
            self._notify()
            return False
        local = self._items.get(item.uuid)
        if local is not None:
            local.favorite = not item.favorite
            self._notify()
        return True

    # -- search ------------------------------------------------------------

    def _supersede_search(self) -> int:
        self._search_generation += 1
        for fut in self._search_fetches:
            fut.cancel()
        self._search_fetches.clear()
        if self.is_searching:
            self.is_searching = False
            self._notify()
        return self._search_generation

    def _is_current(self, generation: int) -> bool:
        return generation == self._search_generation

    async def _resolve(self, ids: list[UUID], generation: int) -> list[ContentEnvelope]:
        local = dict(self._items)
        semaphore = asyncio.Semaphore(self._search_concurrency)

        async def _one(memory_id: UUID) -> Optional[ContentEnvelope]:
            if memory_id in local:
                return local[memory_id]
            async with semaphore:
                if not self._is_current(generation):
                    return None
                try:
                    return await self._service.memory(memory_id)
                except HumaneCenterError as e:
                    logger.debug(f"Fetching search hit {memory_id} failed: {e}")
                    return None

        futures = [asyncio.ensure_future(_one(memory_id)) for memory_id in ids]
        self._search_fetches.update(futures)
        try:
            results = await asyncio.gather(*futures, return_exceptions=True)
        finally:
            self._search_fetches.difference_update(futures)
        for r in results:
            if isinstance(r, Exception):
                raise r
        return [r for r in results if isinstance(r, ContentEnvelope)]

    async def search(self, query: str) -> None:
        """Replace the collection with the memories matching ``query``.

        A blank query does nothing except cancel any search in progress.
        A newer search (or a reload) makes an older one drop its results.
        """
        query = query.strip()
        generation = self._supersede_search()
        if not query:
            return
        self.is_searching = True
        self._notify()
        try:
            await asyncio.sleep(self._search_debounce)
            if not self._is_current(generation):
                return
            response = await self._service.search(query, self.search_domain)
            if not self._is_current(generation):
                return
            ids = response.ids
            if not ids:
                self._items = {}
                self.showing_search_results = True
                return
            results = await self._resolve(ids, generation)
            if not self._is_current(generation):
                logger.debug(f"Search {query!r} superseded")
                return
            self._items = {}
            for item in results:
                self._items.setdefault(item.uuid, item)
            self.showing_search_results = True
            self.last_error = None
        except HumaneCenterError as e:
            logger.warning(f"Search {query!r} failed: {e}")
            if self._is_current(generation):
                self.last_error = e
        finally:
            if self._is_current(generation):
                self.is_searching = False
                self._notify()

    # -- export ------------------------------------------------------------

    async def download(self, item: ContentEnvelope) -> bytes:
        """Raw media for a capture: the video when there is one, else the image."""
        capture = item.capture
        if capture is not None and capture.video is not None:
            return await self._service.download_video(item)
        return await self._service.download_image(item)
