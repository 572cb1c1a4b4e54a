"""
Streaming chunk for the plain text completions endpoint.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .logprobs import LogProbs
from .usage import Usage
from .wire_model import WireModel


class StreamingChoice(WireModel):
    """One choice fragment in a completion stream chunk.

    Attributes:
        index: Position of the choice among the request's choices.
        text: Text fragment carried by this chunk (may be empty).
        finish_reason: Normalized stop reason; ``None`` until the final
            fragment of the choice.
        native_finish_reason: Stop reason as reported by the upstream model
            provider.
        logprobs: Log-probability detail when requested.
    """

    index: int = 0
    text: str = ""
    finish_reason: Optional[str] = None
    native_finish_reason: Optional[str] = None
    logprobs: Optional[LogProbs] = None


class CompletionStreamChunk(WireModel):
    """A single decoded ``data:`` frame of a completion stream.

    The last chunk of a stream commonly carries ``usage`` and an empty text
    fragment. ``model`` may change mid-stream when fallback routing kicks in;
    the reader does not enforce consistency across chunks.
    """

    id: str = ""
    provider: str = ""
    model: str = ""
    object: str = ""
    created: int = 0
    choices: List[StreamingChoice] = Field(default_factory=list)
    system_fingerprint: Optional[str] = None
    usage: Optional[Usage] = None


__all__ = ["StreamingChoice", "CompletionStreamChunk"]
