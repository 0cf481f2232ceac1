from __future__ import annotations

from typing import Any

import pytest
import requests
from twilio.base.exceptions import TwilioRestException

from sms_bridge.errors import ConfigurationError, SmsSendError
from sms_bridge.twilio_client import TwilioSender, get_sms_sender


class FakeMessages:
    """Stands in for client.messages; records create() kwargs."""

    def __init__(self, sid: str | None = "SM123", error: Exception | None = None) -> None:
        self.sid = sid
        self.error = error
        self.created: list[dict[str, Any]] = []

    def create(self, **kwargs: Any) -> Any:
        self.created.append(kwargs)
        if self.error is not None:
            raise self.error
        return type("MessageInstance", (), {"sid": self.sid})()


class FakeClient:
    def __init__(self, messages: FakeMessages) -> None:
        self.messages = messages


def test_sender_uses_configured_from_number() -> None:
    messages = FakeMessages()
    sender = TwilioSender(FakeClient(messages), from_number="+15550000000")  # type: ignore[arg-type]

    sid = sender(to="+15551230001", body="Hi Alice")

    assert sid == "SM123"
    assert messages.created == [
        {"to": "+15551230001", "from_": "+15550000000", "body": "Hi Alice"}
    ]


@pytest.mark.parametrize(
    "error",
    [
        TwilioRestException(400, "https://api.twilio.com/Messages.json", msg="bad number"),
        requests.ConnectionError("no route to host"),
    ],
)
def test_provider_failures_become_send_errors(error: Exception) -> None:
    sender = TwilioSender(FakeClient(FakeMessages(error=error)), from_number="+15550000000")  # type: ignore[arg-type]

    with pytest.raises(SmsSendError):
        sender(to="+15551230001", body="Hi Alice")


def test_get_sms_sender_requires_from_number(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC" + "0" * 32)
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", "secret")

    with pytest.raises(ConfigurationError):
        get_sms_sender()


def test_get_sms_sender_requires_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TWILIO_PHONE_NUMBER", "+15550000000")

    with pytest.raises(ConfigurationError):
        get_sms_sender()


def test_get_sms_sender_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC" + "0" * 32)
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", "secret")
    monkeypatch.setenv("TWILIO_PHONE_NUMBER", "+15550000000")

    sender = get_sms_sender()

    assert sender.from_number == "+15550000000"
