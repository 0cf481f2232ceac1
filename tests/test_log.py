from __future__ import annotations

import logging

import pytest

from sms_bridge.log import _normalise_level


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (logging.DEBUG, logging.DEBUG),
        ("warning", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("not-a-level", logging.INFO),
        (None, logging.INFO),
    ],
)
def test_normalise_level(value: int | str | None, expected: int) -> None:
    assert _normalise_level(value) == expected


def test_level_falls_back_to_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SMS_BRIDGE_LOG_LEVEL", "debug")
    assert _normalise_level(None) == logging.DEBUG
