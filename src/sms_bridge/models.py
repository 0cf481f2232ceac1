from __future__ import annotations

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(UTC)


def new_id() -> str:
    return str(uuid.uuid4())


class ChatMessage(BaseModel):
    """Payload POSTed to the chat backend for each inbound SMS."""

    id: str = Field(default_factory=new_id)
    conversation: str
    user: str
    agent: str
    content: str
    tone: str = ""
    created_at: datetime = Field(default_factory=utcnow)


class ChatReply(BaseModel):
    """What the chat backend answers with. Only `content` is sent back by SMS."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    tone: str = ""
    content: str = ""
