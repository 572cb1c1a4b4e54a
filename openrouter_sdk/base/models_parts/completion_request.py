"""
Request body for the plain text completions endpoint.
"""
from __future__ import annotations

from .generation_params import GenerationParams


class CompletionRequest(GenerationParams):
    """Prompt completion request.

    Example:
        CompletionRequest(model="openai/gpt-4o-mini", prompt="Say hi", max_tokens=16)
    """

    model: str
    prompt: str


__all__ = ["CompletionRequest"]
