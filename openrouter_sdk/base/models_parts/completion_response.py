"""
Non-streaming completion response.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .logprobs import LogProbs
from .usage import Usage
from .wire_model import WireModel


class CompletionChoice(WireModel):
    index: int = 0
    text: str = ""
    finish_reason: Optional[str] = None
    native_finish_reason: Optional[str] = None
    reasoning: Optional[str] = None
    logprobs: Optional[LogProbs] = None


class CompletionResponse(WireModel):
    """Full result of a synchronous completion call."""

    id: str = ""
    provider: str = ""
    model: str = ""
    object: str = ""
    created: int = 0
    choices: List[CompletionChoice] = Field(default_factory=list)
    system_fingerprint: Optional[str] = None
    usage: Usage = Field(default_factory=Usage)

    def first_text(self) -> str:
        """Return the text of the first choice, or an empty string."""
        return self.choices[0].text if self.choices else ""


__all__ = ["CompletionChoice", "CompletionResponse"]
