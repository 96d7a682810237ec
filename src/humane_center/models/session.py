"""
Session models — the auth bootstrap payload.
"""

from typing import Any, Optional

from humane_center.models.common import WireModel


class Session(WireModel):
    access_token: Optional[str] = None
    expires: Optional[str] = None
    user: Optional[dict[str, Any]] = None
