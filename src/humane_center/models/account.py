"""
Account models — subscription, feature flags, device details.
"""

from typing import Optional

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from humane_center.models.common import WireModel

UNKNOWN = "UNKNOWN"


class Subscription(WireModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    status: str = ""
    plan_type: Optional[str] = None
    plan_price: Optional[float] = None
    phone_number: Optional[str] = None
    account_number: Optional[str] = None


class FeatureFlagEnvelope(WireModel):
    state: str = "disabled"

    @property
    def is_enabled(self) -> bool:
        return self.state.lower() == "enabled"


class DetailedDeviceInfo(WireModel):
    """Scraped from the account page; absent fields are ``UNKNOWN``."""

    id: str = UNKNOWN
    iccid: str = UNKNOWN
    serial_number: str = UNKNOWN
    sku: str = UNKNOWN
    color: str = UNKNOWN
