"""
Session auth — bootstraps and refreshes the bearer token.

The session endpoint is unauthenticated; it answers with the access token for
whatever browser session the cookie belongs to.
"""

from humane_center.models.session import Session
from humane_center.transport.http import HttpClient


class SessionAuth:
    def __init__(self, http: HttpClient):
        self._http = http

    @property
    def is_logged_in(self) -> bool:
        return self._http.authenticated

    async def fetch_session(self) -> Session:
        """Fetch the session payload without touching the held token."""
        return await self._http.fetch_session()

    async def refresh(self) -> str:
        """Fetch a session and store its token (memory + token store)."""
        return await self._http.refresh()

    def logout(self) -> None:
        self._http.clear_token()
