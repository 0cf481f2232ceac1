from __future__ import annotations


class BridgeError(Exception):
    """Base class for every error raised by sms_bridge."""


class ConfigurationError(BridgeError):
    """A required setting (Twilio credentials, sending number) is missing."""


# --- Directory file ---


class DirectoryError(BridgeError):
    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DirectoryFileError(DirectoryError):
    """The directory file is missing, unreadable or unwritable."""


class DirectoryParseError(DirectoryError):
    """The directory file is not a JSON object of phone -> name strings."""


# --- Chat backend ---


class RelayError(BridgeError):
    pass


class RelayNetworkError(RelayError):
    pass


class RelayStatusError(RelayError):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"chat backend returned HTTP {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body


class RelayDecodeError(RelayError):
    pass


# --- Provider ---


class SmsSendError(BridgeError):
    """Twilio refused the outbound message or could not be reached."""
