"""
Account REST API — subscription, feature flags, device details.
"""

import re
from typing import Optional

from humane_center.config import DEFAULT_DEVICES_URL
from humane_center.models.account import UNKNOWN, DetailedDeviceInfo, FeatureFlagEnvelope, Subscription
from humane_center.transport.http import HttpClient

# field name on DetailedDeviceInfo -> key in the devices page payload
DEVICE_INFO_KEYS = {
    "id": "deviceID",
    "iccid": "iccid",
    "serial_number": "deviceSerialNumber",
    "sku": "sku",
    "color": "deviceColor",
}


def extract_value(text: str, key: str) -> Optional[str]:
    """Find ``"key":"value"`` in text, tolerating backslash-escaped quotes."""
    pattern = r'\\?"' + re.escape(key) + r'\\?"\s*:\s*\\?"([^"\\]+)\\?"'
    m = re.search(pattern, text)
    return m.group(1) if m else None


class AccountAPI:
    def __init__(self, http: HttpClient, devices_url: str = DEFAULT_DEVICES_URL):
        self._http = http
        self._devices_url = devices_url

    async def subscription(self) -> Subscription:
        return await self._http.get("subscription/v3/subscription", Subscription)

    async def feature_flag(self, name: str) -> FeatureFlagEnvelope:
        return await self._http.get(f"feature-flags/v0/feature-flag/flags/{name}", FeatureFlagEnvelope)

    async def detailed_device_info(self) -> DetailedDeviceInfo:
        """Best-effort scrape of the devices page. Missing fields become UNKNOWN."""
        text = await self._http.get_text(self._devices_url)
        return DetailedDeviceInfo(**{
            field: extract_value(text, key) or UNKNOWN
            for field, key in DEVICE_INFO_KEYS.items()
        })
