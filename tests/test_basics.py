"""Basic unit tests for humane-center package."""

import logging

from humane_center import (
    AsyncHumaneCenter,
    HumaneCenter,
    HumaneCenterError,
    UnauthorizedError,
    TransportError,
    DecodeError,
    NotFoundError,
    ContentCategory,
    EventDomain,
    __version__,
    setup_logging,
)
from humane_center.config import HumaneCenterSettings
from humane_center.token_store import FileTokenStore, MemoryTokenStore


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert HumaneCenter is not None
    assert AsyncHumaneCenter is not None


def test_error_hierarchy():
    assert issubclass(UnauthorizedError, HumaneCenterError)
    assert issubclass(TransportError, HumaneCenterError)
    assert issubclass(DecodeError, HumaneCenterError)
    assert issubclass(NotFoundError, HumaneCenterError)


def test_error_attributes():
    err = HumaneCenterError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    err_with_details = UnauthorizedError("HTTP 401", details={"status": 401})
    assert err_with_details.code == "not_authorized"
    assert err_with_details.details == {"status": 401}
    assert DecodeError("bad").code == "decode_error"


def test_enum_values():
    assert ContentCategory.CAPTURES == "captures"
    assert EventDomain.TRANSLATIONS.value == "translations"


def test_settings_defaults_and_env(monkeypatch):
    settings = HumaneCenterSettings()
    assert settings.page_size == 30
    assert settings.always_refresh is True
    assert settings.session_timeout == 300

    monkeypatch.setenv("HUMANE_PAGE_SIZE", "12")
    monkeypatch.setenv("HUMANE_LOG_LEVEL", "debug")
    settings = HumaneCenterSettings()
    assert settings.page_size == 12
    assert settings.log_level == "DEBUG"


def test_file_token_store_round_trip(tmp_path):
    path = tmp_path / "nested" / "config.json"
    path.parent.mkdir()
    path.write_text('{"email": "me@example.com"}')
    store = FileTokenStore(path)
    assert store.get() is None

    store.set("tok")
    assert FileTokenStore(path).get() == "tok"

    store.set(None)
    assert store.get() is None
    assert '"email"' in path.read_text()


def test_file_token_store_tolerates_garbage(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("not json")
    assert FileTokenStore(path).get() is None


def test_memory_token_store():
    store = MemoryTokenStore("a")
    store.set("b")
    assert store.get() == "b"


def test_setup_logging_is_idempotent():
    logger = setup_logging("debug")
    setup_logging("debug")
    assert logger.level == logging.DEBUG
    assert sum(1 for h in logger.handlers if getattr(h, "_humane_center", False)) == 1
