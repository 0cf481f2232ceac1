from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from .config import get_settings
from .errors import ConfigurationError, RelayDecodeError, RelayNetworkError, RelayStatusError
from .models import ChatMessage, ChatReply

logger = logging.getLogger(__name__)


class ChatRelayClient:
    """
    Blocking client for the chat backend.

    One POST per message, JSON in and JSON out. No retries and no auth.
    `timeout=None` waits for the backend indefinitely.
    """

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)

    def send(self, message: ChatMessage) -> ChatReply:
        logger.debug("Relaying message %s to %s", message.id, self.url)
        try:
            resp = self._client.post(
                self.url,
                content=message.model_dump_json(),
                headers={"Content-Type": "application/json"},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RelayNetworkError(f"chat backend request failed: {e}") from e

        logger.debug("Chat backend answered %s", resp.status_code)
        if resp.is_error:
            raise RelayStatusError(resp.status_code, resp.text)

        try:
            return ChatReply.model_validate_json(resp.content)
        except ValidationError as e:
            raise RelayDecodeError(f"chat backend returned an unreadable reply: {e}") from e

    def close(self) -> None:
        self._client.close()


def get_relay_client() -> ChatRelayClient:
    settings = get_settings()
    try:
        httpx.URL(settings.chat_backend_url)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"CHAT_BACKEND_URL is not a valid URL: {e}") from e

    return ChatRelayClient(
        url=settings.chat_backend_url,
        timeout=settings.chat_backend_timeout,
    )
