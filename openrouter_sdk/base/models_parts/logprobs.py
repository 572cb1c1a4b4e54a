"""
Log-probability detail attached to completion choices when requested.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .wire_model import WireModel


class LogProbToken(WireModel):
    """One alternative token and its log probability."""

    token: str = ""
    bytes: List[int] = Field(default_factory=list)
    logprob: float = 0.0


class TokenLogProbs(WireModel):
    """Log probability of an emitted token plus its most likely alternatives."""

    token: str = ""
    bytes: List[int] = Field(default_factory=list)
    logprob: float = 0.0
    top_logprobs: List[LogProbToken] = Field(default_factory=list)


class LogProbs(WireModel):
    """Token-by-token log probabilities for content (and refusal, if any)."""

    content: List[TokenLogProbs] = Field(default_factory=list)
    refusal: Optional[List[TokenLogProbs]] = None


__all__ = ["LogProbToken", "TokenLogProbs", "LogProbs"]
