"""Streaming metrics data structures.

Isolated within the streaming package to keep the reader loop small and cohesive.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..models import Usage


@dataclass
class StreamMetrics:
    """Counters collected over the life of one stream reader.

    Attributes:
        emitted: Chunks returned to the caller.
        skipped: ``data:`` payloads dropped because they failed to decode.
        time_to_first_chunk_ms: Milliseconds from reader creation to the first
            emitted chunk.
        total_duration_ms: Milliseconds from reader creation to the terminal
            transition.
        prompt_tokens, completion_tokens, total_tokens: Usage reported by the
            last chunk that carried a ``usage`` object.
    """

    emitted: int = 0
    skipped: int = 0
    time_to_first_chunk_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    @property
    def tokens(self) -> Optional[Dict[str, Any]]:
        """Canonical token mapping, or ``None`` when no usage was reported."""
        if self.total_tokens is None and self.prompt_tokens is None and self.completion_tokens is None:
            return None
        return {
            "prompt": self.prompt_tokens,
            "completion": self.completion_tokens,
            "total": self.total_tokens,
        }


def apply_usage(metrics: StreamMetrics, usage: Optional[Usage]) -> None:
    """Copy token counts from ``usage`` onto ``metrics`` (no-op for ``None``)."""
    if usage is None:
        return
    metrics.prompt_tokens = usage.prompt_tokens
    metrics.completion_tokens = usage.completion_tokens
    metrics.total_tokens = usage.total_tokens or (usage.prompt_tokens + usage.completion_tokens)


__all__ = ["StreamMetrics", "apply_usage"]
