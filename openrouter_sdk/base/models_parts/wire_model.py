"""
Common pydantic base for every wire-level model.

Field names are the snake_case JSON keys of the service contract. Unknown keys
are ignored so new upstream fields never break decoding. Optional fields
default to ``None`` meaning *absent*; they are dropped again on serialization.

A JSON ``null`` is read as "absent" for every field, so a non-optional field
sent as ``null`` takes its zero default (``""``, ``0``, ``[]``) instead of
failing validation of the whole object.
"""
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, model_validator


class WireModel(BaseModel):
    """Base class for request, response and chunk models."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _null_is_absent(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_payload(self) -> Dict[str, Any]:
        """Return a JSON-ready dict without absent (``None``) fields."""
        return self.model_dump(mode="json", exclude_none=True)


__all__ = ["WireModel"]
