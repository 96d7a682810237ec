"""
Wire timestamps: ``yyyy-MM-dd'T'HH:mm:ss.SSSSSSX``, always six fractional digits.

Anything else is rejected instead of truncated.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Any

_TIMESTAMP_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})\.(\d{6})"
    r"(Z|[+-]\d{2}(?::?\d{2})?)$"
)


def _offset(raw: str) -> timezone:
    if raw == "Z":
        return timezone.utc
    sign = -1 if raw[0] == "-" else 1
    digits = raw[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:4]) if len(digits) > 2 else 0
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_timestamp(value: Any) -> datetime:
    """Parse a wire timestamp into an aware UTC datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise ValueError("naive datetime")
        return value.astimezone(timezone.utc)
    if not isinstance(value, str):
        raise ValueError(f"expected timestamp string, got {type(value).__name__}")
    m = _TIMESTAMP_RE.match(value)
    if not m:
        raise ValueError(f"timestamp {value!r} does not match yyyy-MM-dd'T'HH:mm:ss.SSSSSSX")
    year, month, day, hour, minute, second, micros = (int(g) for g in m.groups()[:7])
    dt = datetime(year, month, day, hour, minute, second, micros, tzinfo=_offset(m.group(8)))
    return dt.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
