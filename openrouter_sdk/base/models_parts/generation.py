"""
Generation statistics (``GET /generation?id=...``).

The service computes cost and native token counts asynchronously, so a lookup
made right after a request may briefly return ``404``.
"""
from __future__ import annotations

from typing import Optional

from pydantic import Field

from .wire_model import WireModel


class GenerationData(WireModel):
    """Cost, latency and token accounting for one generation.

    Latency fields are milliseconds. ``native_*`` token counts use the
    upstream model's own tokenizer.
    """

    id: str = ""
    total_cost: float = 0.0
    created_at: str = ""
    model: str = ""
    origin: Optional[str] = None
    usage: float = 0.0
    is_byok: bool = False
    upstream_id: Optional[str] = None
    cache_discount: Optional[float] = None
    app_id: Optional[int] = None
    streamed: Optional[bool] = None
    cancelled: Optional[bool] = None
    provider_name: Optional[str] = None
    latency: Optional[int] = None
    moderation_latency: Optional[int] = None
    generation_time: Optional[int] = None
    finish_reason: Optional[str] = None
    native_finish_reason: Optional[str] = None
    tokens_prompt: Optional[int] = None
    tokens_completion: Optional[int] = None
    native_tokens_prompt: Optional[int] = None
    native_tokens_completion: Optional[int] = None
    native_tokens_reasoning: Optional[int] = None
    num_media_prompt: Optional[int] = None
    num_media_completion: Optional[int] = None
    num_search_results: Optional[int] = None


class GenerationResponse(WireModel):
    data: GenerationData = Field(default_factory=GenerationData)


__all__ = ["GenerationData", "GenerationResponse"]
