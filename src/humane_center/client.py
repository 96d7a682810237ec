"""
HumaneCenter / AsyncHumaneCenter — main SDK clients.
"""

import asyncio
from typing import Any, Optional

import httpx

from humane_center.account import AccountAPI
from humane_center.auth import SessionAuth
from humane_center.config import HumaneCenterSettings, get_settings
from humane_center.events import EventsAPI
from humane_center.memories import MemoriesAPI
from humane_center.models.content import ContentCategory
from humane_center.repository import ContentRepository
from humane_center.token_store import FileTokenStore, TokenStore
from humane_center.transport.http import HttpClient


class AsyncHumaneCenter:
    """Async Humane Center client (primary)."""

    def __init__(
        self,
        settings: Optional[HumaneCenterSettings] = None,
        token_store: Optional[TokenStore] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.token_store = token_store or FileTokenStore(self.settings.token_file)

        self.http = HttpClient(
            base_url=self.settings.api_base_url,
            session_url=self.settings.session_url,
            user_agent=self.settings.user_agent,
            timeout=self.settings.timeout,
            token_store=self.token_store,
            session_cookie=self.settings.session_cookie,
            always_refresh=self.settings.always_refresh,
            session_timeout=self.settings.session_timeout,
            transport=transport,
        )
        self.auth = SessionAuth(self.http)
        self.memories = MemoriesAPI(self.http)
        self.events = EventsAPI(self.http)
        self.account = AccountAPI(self.http, devices_url=self.settings.devices_url)

    @property
    def is_logged_in(self) -> bool:
        return self.auth.is_logged_in

    def repository(self, category: ContentCategory = ContentCategory.CAPTURES) -> ContentRepository:
        """A fresh incremental repository over this client's memories API."""
        return ContentRepository(
            self.memories,
            category=category,
            page_size=self.settings.page_size,
            search_debounce=self.settings.search_debounce,
            search_concurrency=self.settings.search_concurrency,
        )

    def logout(self) -> None:
        self.auth.logout()

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncHumaneCenter":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()


class HumaneCenter:
    """Sync wrapper around AsyncHumaneCenter. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncHumaneCenter(**kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def is_logged_in(self) -> bool:
        return self._async.is_logged_in

    def refresh(self) -> str:
        return self._run(self._async.auth.refresh())

    def logout(self) -> None:
        self._async.logout()

    def captures(self, **kwargs: Any):
        return self._run(self._async.memories.captures(**kwargs))

    def notes(self, **kwargs: Any):
        return self._run(self._async.memories.notes(**kwargs))

    def memory(self, memory_id: Any):
        return self._run(self._async.memories.memory(memory_id))

    def search(self, query: str, **kwargs: Any):
        return self._run(self._async.memories.search(query, **kwargs))

    def create_note(self, note: Any):
        return self._run(self._async.memories.create_note(note))

    def update_note(self, note_id: Any, note: Any):
        return self._run(self._async.memories.update_note(note_id, note))

    def favorite(self, memory: Any) -> None:
        self._run(self._async.memories.favorite(memory))

    def unfavorite(self, memory: Any) -> None:
        self._run(self._async.memories.unfavorite(memory))

    def delete(self, memory: Any) -> str:
        return self._run(self._async.memories.delete(memory))

    def events(self, domain: Any, **kwargs: Any):
        return self._run(self._async.events.list(domain, **kwargs))

    def subscription(self):
        return self._run(self._async.account.subscription())

    def feature_flag(self, name: str):
        return self._run(self._async.account.feature_flag(name))

    def detailed_device_info(self):
        return self._run(self._async.account.detailed_device_info())

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()
