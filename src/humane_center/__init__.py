"""
humane-center — Humane Center SDK for Python.

REST client for the Ai Pin cloud backend, plus an incremental,
de-duplicated repository for browsing captures and notes.
"""

from humane_center.client import HumaneCenter, AsyncHumaneCenter
from humane_center.auth import SessionAuth
from humane_center.memories import MemoriesAPI
from humane_center.events import EventsAPI
from humane_center.account import AccountAPI
from humane_center.repository import ContentRepository
from humane_center.config import HumaneCenterSettings, get_settings
from humane_center.log import setup_logging
from humane_center.errors import (
    HumaneCenterError,
    UnauthorizedError,
    TransportError,
    DecodeError,
    NotFoundError,
)
from humane_center.models import ContentCategory, ContentEnvelope, EventDomain, Note, Page

__version__ = "0.1.0"
__all__ = [
    "HumaneCenter",
    "AsyncHumaneCenter",
    "SessionAuth",
    "MemoriesAPI",
    "EventsAPI",
    "AccountAPI",
    "ContentRepository",
    "HumaneCenterSettings",
    "get_settings",
    "setup_logging",
    "HumaneCenterError",
    "UnauthorizedError",
    "TransportError",
    "DecodeError",
    "NotFoundError",
    "ContentCategory",
    "ContentEnvelope",
    "EventDomain",
    "Note",
    "Page",
]
