"""
Notable events REST API.
"""

from humane_center.models.common import Page
from humane_center.models.events import EventDomain, EventEnvelope
from humane_center.transport.http import HttpClient


class EventsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self,
        domain: EventDomain,
        page: int = 0,
        size: int = 10,
        sort: str = "eventCreationTime,ASC",
    ) -> Page[EventEnvelope]:
        return await self._http.get("notable-events/mydata", Page[EventEnvelope], params={
            "domain": domain.value,
            "page": page,
            "size": size,
            "sort": sort,
        })
