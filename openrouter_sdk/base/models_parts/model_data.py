"""
Model catalogue entries (``GET /models``).
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .wire_model import WireModel


class ModelArchitecture(WireModel):
    input_modalities: List[str] = Field(default_factory=list)
    output_modalities: List[str] = Field(default_factory=list)
    tokenizer: str = ""
    instruct_type: Optional[str] = None


class ModelTopProvider(WireModel):
    is_moderated: bool = False
    context_length: Optional[float] = None
    max_completion_tokens: Optional[float] = None


class ModelPricing(WireModel):
    """Prices as decimal strings in USD per token (or per unit)."""

    prompt: str = ""
    completion: str = ""
    image: Optional[str] = None
    request: Optional[str] = None
    input_cache_read: Optional[str] = None
    input_cache_write: Optional[str] = None
    web_search: Optional[str] = None
    internal_reasoning: Optional[str] = None


class ModelData(WireModel):
    """One model as listed in the catalogue."""

    id: str = ""
    name: str = ""
    created: float = 0
    description: str = ""
    architecture: ModelArchitecture = Field(default_factory=ModelArchitecture)
    top_provider: ModelTopProvider = Field(default_factory=ModelTopProvider)
    pricing: ModelPricing = Field(default_factory=ModelPricing)
    context_length: Optional[float] = None
    per_request_limits: Optional[Dict[str, Any]] = None
    supported_parameters: Optional[List[str]] = None


class ModelsResponse(WireModel):
    data: List[ModelData] = Field(default_factory=list)


__all__ = [
    "ModelArchitecture",
    "ModelTopProvider",
    "ModelPricing",
    "ModelData",
    "ModelsResponse",
]
