"""
Token usage accounting returned with responses and final stream chunks.
"""
from __future__ import annotations

from typing import Optional

from .wire_model import WireModel


class PromptTokensDetails(WireModel):
    """Breakdown of prompt tokens.

    Attributes:
        cached_tokens: Prompt tokens served from the provider's prompt cache.
    """

    cached_tokens: int = 0


class CompletionTokensDetails(WireModel):
    """Breakdown of completion tokens.

    Attributes:
        reasoning_tokens: Completion tokens spent on internal reasoning.
    """

    reasoning_tokens: int = 0


class Usage(WireModel):
    """Token consumption for one request.

    The detail objects are optional and stay ``None`` when the service omits
    them, which is distinct from a detail object reporting zero tokens.
    """

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    prompt_tokens_details: Optional[PromptTokensDetails] = None
    completion_tokens_details: Optional[CompletionTokensDetails] = None


__all__ = ["PromptTokensDetails", "CompletionTokensDetails", "Usage"]
