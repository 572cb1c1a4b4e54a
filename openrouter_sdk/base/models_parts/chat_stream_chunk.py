"""
Streaming chunk for the chat completions endpoint.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .usage import Usage
from .wire_model import WireModel


class ChatDelta(WireModel):
    """Incremental message content.

    ``role`` is present only on the first chunk of a message. ``content`` is
    ``None`` when the chunk carries no text at all, which is not the same as
    an empty string fragment.
    """

    role: Optional[str] = None
    content: Optional[str] = None


class ChatStreamingChoice(WireModel):
    """One choice delta in a chat stream chunk."""

    index: int = 0
    delta: ChatDelta = Field(default_factory=ChatDelta)
    finish_reason: Optional[str] = None


class ChatCompletionStreamChunk(WireModel):
    """A single decoded ``data:`` frame of a chat completion stream."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[ChatStreamingChoice] = Field(default_factory=list)
    usage: Optional[Usage] = None


__all__ = ["ChatDelta", "ChatStreamingChoice", "ChatCompletionStreamChunk"]
