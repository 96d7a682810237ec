from humane_center.models.account import DetailedDeviceInfo, FeatureFlagEnvelope, Subscription
from humane_center.models.common import Page, Pageable, Timestamp
from humane_center.models.content import (
    CaptureEnvelope,
    ContentCategory,
    ContentEnvelope,
    FileAsset,
    Note,
    NoteEnvelope,
    SearchResponse,
)
from humane_center.models.events import EventDomain, EventEnvelope
from humane_center.models.session import Session

__all__ = [
    "CaptureEnvelope",
    "ContentCategory",
    "ContentEnvelope",
    "DetailedDeviceInfo",
    "EventDomain",
    "EventEnvelope",
    "FeatureFlagEnvelope",
    "FileAsset",
    "Note",
    "NoteEnvelope",
    "Page",
    "Pageable",
    "SearchResponse",
    "Session",
    "Subscription",
    "Timestamp",
]
