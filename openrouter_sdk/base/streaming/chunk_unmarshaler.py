"""Lenient JSON payload decoding for stream chunks.

A :class:`ChunkUnmarshaler` binds the shared scan loop in
:class:`~openrouter_sdk.base.streaming.stream_reader.StreamReader` to one
chunk schema. Decoding never raises: a payload that is not valid JSON, is not
a JSON object, or does not fit the schema yields ``None`` and the reader skips
it.
"""
from __future__ import annotations

from typing import Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..models import ChatCompletionStreamChunk, CompletionStreamChunk

T = TypeVar("T", bound=BaseModel)


class ChunkUnmarshaler(Generic[T]):
    """Decode one ``data:`` payload into a ``model`` instance."""

    def __init__(self, model: Type[T]) -> None:
        self.model = model

    def unmarshal(self, payload: str) -> Optional[T]:
        try:
            return self.model.model_validate_json(payload)
        except ValidationError:
            return None

    def __repr__(self) -> str:
        return f"ChunkUnmarshaler({self.model.__name__})"


COMPLETION_CHUNKS: ChunkUnmarshaler[CompletionStreamChunk] = ChunkUnmarshaler(CompletionStreamChunk)
CHAT_CHUNKS: ChunkUnmarshaler[ChatCompletionStreamChunk] = ChunkUnmarshaler(ChatCompletionStreamChunk)


__all__ = ["ChunkUnmarshaler", "COMPLETION_CHUNKS", "CHAT_CHUNKS"]
