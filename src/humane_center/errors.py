"""
Humane Center error types.

Every failure collapses to one of four kinds so callers can tell a rejected
token from a dead network or an unexpected payload.
"""

from typing import Any, Optional


class HumaneCenterError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class UnauthorizedError(HumaneCenterError):
    """Missing token, or a response outside 200..304."""

    def __init__(self, message: str, code: str = "not_authorized", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class TransportError(HumaneCenterError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("transport_error", message, details)


class DecodeError(HumaneCenterError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("decode_error", message, details)


class NotFoundError(HumaneCenterError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("not_found", message, details)
