"""
REST HTTP client for the Humane Center API.

Owns the session token. Every authenticated call first makes sure a token is
held (by default by fetching a fresh session each time), then sends it as a
bearer header. Any status outside 200..304 is treated as a rejected session.
"""

import asyncio
import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from humane_center.config import DEFAULT_API_BASE_URL, DEFAULT_SESSION_URL, DEFAULT_USER_AGENT
from humane_center.errors import DecodeError, TransportError, UnauthorizedError
from humane_center.models.session import Session
from humane_center.token_store import MemoryTokenStore, TokenStore

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "__Secure-next-auth.session-token"

_adapter = lru_cache(maxsize=None)(TypeAdapter)


def _is_ok(status_code: int) -> bool:
    return 200 <= status_code <= 304


class HttpClient:
    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        session_url: str = DEFAULT_SESSION_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        token_store: Optional[TokenStore] = None,
        session_cookie: Optional[str] = None,
        always_refresh: bool = True,
        session_timeout: float = 300.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/") + "/"
        self._session_url = session_url
        self._token_store = token_store or MemoryTokenStore()
        self._session_cookie = session_cookie
        self._always_refresh = always_refresh
        self._session_timeout = session_timeout
        self._token: Optional[str] = self._token_store.get()
        self._refreshed_at: Optional[datetime] = None
        self._lock = asyncio.Lock()
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    # -- session state -----------------------------------------------------

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def refreshed_at(self) -> Optional[datetime]:
        return self._refreshed_at

    @property
    def authenticated(self) -> bool:
        return self._token is not None

    def set_token(self, token: Optional[str]) -> None:
        self._token = token
        self._refreshed_at = datetime.now(timezone.utc) if token else None
        self._token_store.set(token)

    def clear_token(self) -> None:
        self.set_token(None)

    def _is_fresh(self) -> bool:
        if self._token is None:
            return False
        if self._refreshed_at is None:
            # Resumed from the token store; trust it until a call is rejected.
            return True
        age = (datetime.now(timezone.utc) - self._refreshed_at).total_seconds()
        return age < self._session_timeout

    def _cookie_headers(self) -> dict[str, str]:
        if not self._session_cookie:
            return {}
        return {"Cookie": f"{SESSION_COOKIE_NAME}={self._session_cookie}"}

    async def fetch_session(self) -> Session:
        """Unauthenticated call to the session endpoint."""
        resp = await self._send("GET", self._session_url, headers=self._cookie_headers(), reject_clears=False)
        return self._decode(resp, Session)

    async def _refresh(self) -> str:
        try:
            session = await self.fetch_session()
        except UnauthorizedError:
            self.clear_token()
            raise
        if not session.access_token:
            self.clear_token()
            raise UnauthorizedError("No access token in session")
        self.set_token(session.access_token)
        logger.debug("Session token refreshed")
        return session.access_token

    async def ensure_token(self) -> str:
        async with self._lock:
            if not self._always_refresh and self._is_fresh():
                return self._token  # type: ignore[return-value]
            return await self._refresh()

    async def refresh(self) -> str:
        """Force a session fetch regardless of the refresh policy."""
        async with self._lock:
            return await self._refresh()

    # -- requests ----------------------------------------------------------

    async def _auth_headers(self) -> dict[str, str]:
        token = await self.ensure_token()
        if not token:
            raise UnauthorizedError("No access token")
        return {"Authorization": f"Bearer {token}"}

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Any = None,
        headers: Optional[dict[str, str]] = None,
        reject_clears: bool = True,
    ) -> httpx.Response:
        try:
            resp = await self._client.request(method, url, params=params, json=json, headers=headers)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        if not _is_ok(resp.status_code):
            if reject_clears and self._token is not None:
                logger.debug(f"{method} {url} rejected with HTTP {resp.status_code}; dropping session")
                self.clear_token()
            raise UnauthorizedError(
                f"HTTP {resp.status_code}: {resp.text[:200]}",
                details={"status": resp.status_code, "url": str(resp.request.url)},
            )
        return resp

    @staticmethod
    def _decode(resp: httpx.Response, model: Any) -> Any:
        try:
            return _adapter(model).validate_json(resp.content)
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected response from {resp.request.url}: {e.error_count()} validation error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e

    async def request(
        self,
        method: str,
        path: str,
        model: Any = None,
        *,
        params: Optional[dict[str, Any]] = None,
        body: Any = None,
        authenticated: bool = True,
    ) -> Any:
        headers = await self._auth_headers() if authenticated else {}
        resp = await self._send(method, path, params=params, json=body, headers=headers)
        if model is None:
            return None
        return self._decode(resp, model)

    async def get(self, path: str, model: Any, params: Optional[dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, model, params=params)

    async def post(self, path: str, model: Any = None, body: Any = None) -> Any:
        return await self.request("POST", path, model, body=body)

    async def delete(self, path: str, model: Any = None) -> Any:
        return await self.request("DELETE", path, model)

    async def get_bytes(
        self, url: str, params: Optional[dict[str, Any]] = None, bearer: bool = False,
    ) -> bytes:
        """Fetch a binary asset. ``bearer`` adds the session token on top of the URL token."""
        headers = await self._auth_headers() if bearer else {}
        resp = await self._send("GET", url, params=params, headers=headers, reject_clears=bearer)
        return resp.content

    async def get_text(self, url: str) -> str:
        resp = await self._send("GET", url, headers=self._cookie_headers(), reject_clears=False)
        return resp.text

    async def close(self) -> None:
        await self._client.aclose()
