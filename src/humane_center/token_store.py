"""
Durable key-value store for the access token.

One key (``access_token``) is read at start-up and rewritten on every refresh.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = "access_token"


class TokenStore(Protocol):
    def get(self) -> Optional[str]: ...

    def set(self, token: Optional[str]) -> None: ...


class MemoryTokenStore:
    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: Optional[str]) -> None:
        self._token = token


class FileTokenStore:
    """JSON file store; other keys in the file are preserved."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict:
        try:
            data = json.loads(self._path.read_text())
        except (FileNotFoundError, json.JSONDecodeError):
            return {}
        return data if isinstance(data, dict) else {}

    def get(self) -> Optional[str]:
        return self._load().get(ACCESS_TOKEN_KEY)

    def set(self, token: Optional[str]) -> None:
        cfg = self._load()
        if token is None:
            cfg.pop(ACCESS_TOKEN_KEY, None)
        else:
            cfg[ACCESS_TOKEN_KEY] = token
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(cfg, indent=2))
        except OSError as e:
            logger.warning(f"Could not persist access token to {self._path}: {e}")
