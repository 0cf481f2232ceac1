from __future__ import annotations

import requests
from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from .config import get_settings
from .errors import ConfigurationError, SmsSendError


def get_twilio_client() -> Client:
    settings = get_settings()

    if not settings.twilio_account_sid or not settings.twilio_auth_token:
        raise ConfigurationError("TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN must be set")

    return Client(settings.twilio_account_sid, settings.twilio_auth_token)


class TwilioSender:
    """
    Sends reply SMS through the Twilio REST API from a fixed number.

    Returns the message SID Twilio assigned, which may be None.
    """

    def __init__(self, client: Client, from_number: str) -> None:
        self.client = client
        self.from_number = from_number

    def __call__(self, to: str, body: str) -> str | None:
        try:
            message = self.client.messages.create(
                to=to,
                from_=self.from_number,
                body=body,
            )
        except (TwilioException, requests.RequestException) as e:
            # twilio-python lets transport errors from requests through unwrapped
            raise SmsSendError(f"could not send SMS to {to}: {e}") from e
        return message.sid


def get_sms_sender() -> TwilioSender:
    """Sender for the configured account; raises ConfigurationError if unset."""
    settings = get_settings()
    if not settings.twilio_phone_number:
        raise ConfigurationError("TWILIO_PHONE_NUMBER is not configured")

    return TwilioSender(get_twilio_client(), settings.twilio_phone_number)
