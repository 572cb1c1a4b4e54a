"""
Provider endpoints serving one model (``GET /models/{author}/{slug}/endpoints``).
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .wire_model import WireModel


class EndpointArchitecture(WireModel):
    input_modalities: List[str] = Field(default_factory=list)
    output_modalities: List[str] = Field(default_factory=list)
    tokenizer: str = ""
    instruct_type: Optional[str] = None


class EndpointPricing(WireModel):
    request: Optional[str] = None
    image: Optional[str] = None
    prompt: str = ""
    completion: str = ""


class EndpointDetail(WireModel):
    """A single provider deployment of the model."""

    name: str = ""
    context_length: float = 0
    pricing: EndpointPricing = Field(default_factory=EndpointPricing)
    provider_name: str = ""
    supported_parameters: List[str] = Field(default_factory=list)


class EndpointData(WireModel):
    id: str = ""
    name: str = ""
    created: float = 0
    description: str = ""
    architecture: EndpointArchitecture = Field(default_factory=EndpointArchitecture)
    endpoints: List[EndpointDetail] = Field(default_factory=list)


class EndpointsResponse(WireModel):
    data: EndpointData = Field(default_factory=EndpointData)


__all__ = [
    "EndpointArchitecture",
    "EndpointPricing",
    "EndpointDetail",
    "EndpointData",
    "EndpointsResponse",
]
