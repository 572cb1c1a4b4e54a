"""Chunk unmarshaler leniency tests."""
from __future__ import annotations

import pytest

from openrouter_sdk.base.models import ChatCompletionStreamChunk, CompletionStreamChunk
from openrouter_sdk.base.streaming import CHAT_CHUNKS, COMPLETION_CHUNKS


def test_completion_chunk_decodes_wire_names():
    payload = (
        '{"id":"gen-1","provider":"OpenAI","model":"openai/gpt-4o","object":"text_completion",'
        '"created":1700000000,"system_fingerprint":"fp_1",'
        '"choices":[{"index":0,"text":"Hi","finish_reason":null,"native_finish_reason":null}],'
        '"usage":{"prompt_tokens":3,"completion_tokens":1,"total_tokens":4,'
        '"prompt_tokens_details":{"cached_tokens":2},'
        '"completion_tokens_details":{"reasoning_tokens":0}}}'
    )
    chunk = COMPLETION_CHUNKS.unmarshal(payload)
    assert isinstance(chunk, CompletionStreamChunk)  # nosec B101
    assert chunk.system_fingerprint == "fp_1"  # nosec B101
    assert chunk.choices[0].finish_reason is None  # nosec B101
    assert chunk.usage.prompt_tokens_details.cached_tokens == 2  # nosec B101
    assert chunk.usage.completion_tokens_details.reasoning_tokens == 0  # nosec B101


def test_chat_chunk_keeps_absent_and_empty_distinct():
    chunk = CHAT_CHUNKS.unmarshal(
        '{"id":"c","choices":[{"index":0,"delta":{"content":""},"finish_reason":"stop"}]}'
    )
    assert isinstance(chunk, ChatCompletionStreamChunk)  # nosec B101
    delta = chunk.choices[0].delta
    assert delta.role is None  # nosec B101
    assert delta.content == ""  # nosec B101
    assert chunk.choices[0].finish_reason == "stop"  # nosec B101
    assert chunk.usage is None  # nosec B101


def test_unknown_keys_are_ignored():
    chunk = CHAT_CHUNKS.unmarshal('{"id":"c","choices":[],"brand_new_field":{"x":1}}')
    assert chunk is not None and chunk.id == "c"  # nosec B101


@pytest.mark.parametrize(
    "payload",
    [
        "{invalid json}",
        "",
        "null",
        "[1, 2]",
        '"text"',
        '{"choices":"not-a-list"}',
        '{"id":"x","choices":[{"index":"zero"}]}',
    ],
)
def test_bad_payloads_yield_none(payload):
    assert COMPLETION_CHUNKS.unmarshal(payload) is None  # nosec B101


@pytest.mark.parametrize(
    "payload",
    [
        '{"id":"x","provider":null,"choices":[{"index":0,"text":"Hello"}]}',
        '{"id":"x","model":null,"created":null,"choices":[{"index":0,"text":"Hello"}]}',
    ],
)
def test_null_top_level_fields_take_zero_values(payload):
    chunk = COMPLETION_CHUNKS.unmarshal(payload)
    assert chunk is not None  # nosec B101
    assert (chunk.provider, chunk.model, chunk.created) == ("", "", 0)  # nosec B101
    assert chunk.choices[0].text == "Hello"  # nosec B101


def test_null_text_on_final_fragment_keeps_finish_reason_and_usage():
    chunk = COMPLETION_CHUNKS.unmarshal(
        '{"id":"x","choices":[{"index":0,"text":null,"finish_reason":"stop"}],'
        '"usage":{"prompt_tokens":2,"completion_tokens":5,"total_tokens":7}}'
    )
    assert chunk is not None  # nosec B101
    assert chunk.choices[0].text == ""  # nosec B101
    assert chunk.choices[0].finish_reason == "stop"  # nosec B101
    assert chunk.usage.total_tokens == 7  # nosec B101


def test_null_chat_delta_and_choices():
    chunk = CHAT_CHUNKS.unmarshal('{"id":"c","choices":[{"index":0,"delta":null,"finish_reason":"length"}]}')
    assert chunk is not None  # nosec B101
    delta = chunk.choices[0].delta
    assert delta.role is None and delta.content is None  # nosec B101
    assert chunk.choices[0].finish_reason == "length"  # nosec B101

    empty = CHAT_CHUNKS.unmarshal('{"id":"c","choices":null}')
    assert empty is not None and empty.choices == []  # nosec B101
