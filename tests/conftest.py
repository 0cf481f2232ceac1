from __future__ import annotations

from collections.abc import Iterator

import pytest

from sms_bridge.config import get_settings

_ENV_VARS = (
    "TWILIO_ACCOUNT_SID",
    "TWILIO_AUTH_TOKEN",
    "TWILIO_PHONE_NUMBER",
    "CHAT_BACKEND_URL",
    "CHAT_BACKEND_TIMEOUT",
    "SMS_BRIDGE_AGENT",
    "SMS_BRIDGE_PORT",
    "SMS_BRIDGE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from an empty environment and a fresh Settings cache."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
