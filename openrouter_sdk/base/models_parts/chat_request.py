"""
Request body for the chat completions endpoint.
"""
from __future__ import annotations

from typing import List, Optional

from .generation_params import GenerationParams
from .wire_model import WireModel


class ChatMessage(WireModel):
    """One conversation turn (``system``, ``user``, ``assistant``)."""

    role: str = ""
    content: str = ""


class ChatCompletionRequest(GenerationParams):
    """Chat completion request.

    ``user`` is an opaque end-user identifier forwarded for abuse tracking.
    """

    model: str
    messages: List[ChatMessage]
    user: Optional[str] = None


__all__ = ["ChatMessage", "ChatCompletionRequest"]
