"""
Account credit balance (``GET /credits``).
"""
from __future__ import annotations

from pydantic import Field

from .wire_model import WireModel


class CreditsData(WireModel):
    """Credits purchased and consumed, in USD."""

    total_credits: float = 0.0
    total_usage: float = 0.0

    @property
    def remaining(self) -> float:
        return self.total_credits - self.total_usage


class CreditsResponse(WireModel):
    data: CreditsData = Field(default_factory=CreditsData)


__all__ = ["CreditsData", "CreditsResponse"]
