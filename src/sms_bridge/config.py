from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field

from .errors import ConfigurationError

DEFAULT_CHAT_BACKEND_URL = "http://localhost:8080/chat/send"
DEFAULT_PORT = 6000


def _env(name: str, default: str | None = None):
    return lambda: os.getenv(name, default)


def _env_number(name: str, cast: type, default: object = None):
    def factory():
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            return cast(raw)
        except ValueError:
            raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None

    return factory


class Settings(BaseModel):
    # Defaults are read from the environment when Settings() is built,
    # so get_settings.cache_clear() picks up changed env vars.

    # --- Twilio credentials + the number replies are sent from ---
    twilio_account_sid: str | None = Field(default_factory=_env("TWILIO_ACCOUNT_SID"))
    twilio_auth_token: str | None = Field(default_factory=_env("TWILIO_AUTH_TOKEN"))
    twilio_phone_number: str | None = Field(default_factory=_env("TWILIO_PHONE_NUMBER"))

    # --- Chat backend ---
    chat_backend_url: str = Field(
        default_factory=_env("CHAT_BACKEND_URL", DEFAULT_CHAT_BACKEND_URL)
    )
    # None: no timeout on the backend call
    chat_backend_timeout: float | None = Field(
        default_factory=_env_number("CHAT_BACKEND_TIMEOUT", float)
    )
    agent_name: str = Field(default_factory=_env("SMS_BRIDGE_AGENT", "Rose"))

    # --- Server ---
    port: int = Field(default_factory=_env_number("SMS_BRIDGE_PORT", int, DEFAULT_PORT))


@lru_cache
def get_settings() -> Settings:
    """Settings from the environment; bad numeric values raise ConfigurationError."""
    return Settings()
