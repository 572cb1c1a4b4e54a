"""
Non-streaming chat completion response.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .chat_request import ChatMessage
from .usage import Usage
from .wire_model import WireModel


class ChatChoice(WireModel):
    index: int = 0
    message: ChatMessage = Field(default_factory=ChatMessage)
    finish_reason: Optional[str] = None


class ChatCompletionResponse(WireModel):
    """Full result of a synchronous chat completion call."""

    id: str = ""
    provider: Optional[str] = None
    model: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    choices: List[ChatChoice] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)

    def first_content(self) -> str:
        """Return the assistant content of the first choice, or an empty string."""
        return self.choices[0].message.content if self.choices else ""


__all__ = ["ChatChoice", "ChatCompletionResponse"]
