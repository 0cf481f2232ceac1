from __future__ import annotations

import enum
import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from .directory import lookup
from .errors import RelayError, SmsSendError
from .models import ChatMessage, ChatReply

logger = logging.getLogger(__name__)


class Relay(Protocol):
    def send(self, message: ChatMessage) -> ChatReply: ...

    def close(self) -> None: ...


class SmsSender(Protocol):
    def __call__(self, to: str, body: str) -> str | None: ...


class Outcome(str, enum.Enum):
    MALFORMED = "malformed"
    UNKNOWN_SENDER = "unknown_sender"
    RELAY_FAILED = "relay_failed"
    SEND_FAILED = "send_failed"
    REPLIED = "replied"


@dataclass
class Bridge:
    """
    Everything a running server needs to answer a text.

    Built once at startup. The directory is a snapshot and is never
    reloaded while serving; the conversation id is shared by every sender.
    """

    directory: Mapping[str, str]
    relay: Relay
    send_sms: SmsSender
    agent_name: str = "Rose"
    conversation_id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class HandleResult:
    outcome: Outcome
    reply_text: str | None = None
    message_sid: str | None = None


def build_chat_message(bridge: Bridge, name: str, text: str) -> ChatMessage:
    return ChatMessage(
        conversation=bridge.conversation_id,
        user=name,
        agent=bridge.agent_name,
        content=text,
        tone="",
    )


def handle_inbound(bridge: Bridge, from_number: str | None, body: str | None) -> HandleResult:
    """
    Core flow for one inbound SMS:
    - look the sender up in the directory (unknown numbers are dropped)
    - forward the text to the chat backend
    - text the backend's reply back to the sender

    Failures are logged and end the flow; nothing is raised to the caller.
    """
    # 1. Malformed webhook
    if not from_number:
        logger.warning("Error parsing message data: missing From field")
        return HandleResult(outcome=Outcome.MALFORMED)
    text = body or ""

    # 2. Directory lookup
    name = lookup(bridge.directory, from_number)
    if name is None:
        logger.info("Unknown number %s", from_number)
        return HandleResult(outcome=Outcome.UNKNOWN_SENDER)

    logger.info("Received message from %s | %s: %s", from_number, name, text)

    # 3. Ask the chat backend
    message = build_chat_message(bridge, name=name, text=text)
    try:
        reply = bridge.relay.send(message)
    except RelayError as e:
        logger.error("Error thrown sending message %s: %s", message.id, e)
        return HandleResult(outcome=Outcome.RELAY_FAILED)

    # 4. Text the answer back
    try:
        sid = bridge.send_sms(to=from_number, body=reply.content)
    except SmsSendError as e:
        logger.error("Error creating sms response to %s: %s", from_number, e)
        return HandleResult(outcome=Outcome.SEND_FAILED, reply_text=reply.content)

    logger.info("Twilio message sid: %s", sid if sid is not None else "<none>")
    logger.info("Sent reply to %s", from_number)
    return HandleResult(outcome=Outcome.REPLIED, reply_text=reply.content, message_sid=sid)
