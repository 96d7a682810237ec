"""Wire model decoding."""

from datetime import timezone
from uuid import UUID

import pytest
from pydantic import ValidationError

from conftest import make_item, wire_item, wire_page
from humane_center.models import ContentEnvelope, Page
from humane_center.models.content import SearchResponse
from humane_center.models.events import EventEnvelope
from humane_center.transport.timestamps import format_timestamp, parse_timestamp


class TestTimestamps:

    def test_utc_suffix(self):
        dt = parse_timestamp("2024-04-20T18:30:00.123456Z")
        assert dt.tzinfo == timezone.utc
        assert (dt.hour, dt.microsecond) == (18, 123456)

    @pytest.mark.parametrize("raw", ["2024-04-20T18:30:00.123456-0500", "2024-04-20T18:30:00.123456-05:00", "2024-04-20T18:30:00.123456-05"])
    def test_offsets_normalize_to_utc(self, raw):
        dt = parse_timestamp(raw)
        assert dt.hour == 23
        assert dt.utcoffset().total_seconds() == 0

    @pytest.mark.parametrize("raw", [
        "2024-04-20T18:30:00Z",
        "2024-04-20T18:30:00.123Z",
        "2024-04-20T18:30:00.1234567Z",
        "2024-04-20T18:30:00.123456",
        "2024-04-20 18:30:00.123456Z",
    ])
    def test_other_shapes_are_rejected(self, raw):
        with pytest.raises(ValueError):
            parse_timestamp(raw)

    def test_format(self):
        assert format_timestamp(parse_timestamp("2024-04-20T18:30:00.000001+01:00")) == "2024-04-20T17:30:00.000001Z"


class TestContentEnvelope:

    def test_identity_is_uuid_only(self):
        a = make_item(1)
        b = make_item(1, favorite=True)
        assert a == b
        assert len({a, b, make_item(2)}) == 2

    def test_unknown_payload_is_kept_raw(self):
        env = ContentEnvelope.model_validate({"uuid": str(UUID(int=1)), "data": {"audio": {"len": 3}}})
        assert env.kind == "unknown"
        assert env.capture is None
        assert env.note is None
        assert env.data == {"audio": {"len": 3}}

    def test_image_asset_prefers_closeup(self):
        raw = wire_item(1)
        raw["data"]["closeupAsset"] = {"fileUUID": str(UUID(int=5)), "accessToken": "close"}
        env = ContentEnvelope.model_validate(raw)
        assert env.capture.image_asset.access_token == "close"

    def test_missing_uuid_fails(self):
        with pytest.raises(ValidationError):
            ContentEnvelope.model_validate({"favorite": True})


class TestPage:

    def test_page_is_frozen(self):
        page = Page[ContentEnvelope].model_validate(wire_page([wire_item(1)], 0, 10, 1))
        assert page.page_number == 0
        assert page.total_elements == 1
        with pytest.raises(ValidationError):
            page.total_pages = 5

    def test_event_identity(self):
        raw = {"eventIdentifier": str(UUID(int=3)), "eventType": "music"}
        assert EventEnvelope.model_validate(raw) == EventEnvelope.model_validate({**raw, "eventType": "calls"})

    def test_search_response_ids(self):
        assert SearchResponse.model_validate({"memories": None}).ids is None
        assert SearchResponse.model_validate({}).ids is None
        assert SearchResponse.model_validate({"memories": [{"uuid": str(UUID(int=2))}]}).ids == [UUID(int=2)]
