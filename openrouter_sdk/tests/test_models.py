"""Wire model serialization tests."""
from __future__ import annotations

from openrouter_sdk.base.models import (
    ChatCompletionRequest,
    ChatMessage,
    CompletionRequest,
    Effort,
    MaxPrice,
    ProviderOptions,
    Quantization,
    ReasoningOptions,
    UsageOptions,
)


def test_minimal_request_omits_absent_fields():
    payload = CompletionRequest(model="m", prompt="p").to_payload()
    assert payload == {"model": "m", "prompt": "p"}  # nosec B101


def test_zero_values_are_kept_distinct_from_absent():
    payload = CompletionRequest(model="m", prompt="p", temperature=0.0, seed=0, stream=False).to_payload()
    assert payload["temperature"] == 0.0  # nosec B101
    assert payload["seed"] == 0  # nosec B101
    assert payload["stream"] is False  # nosec B101


def test_nested_options_serialize_with_wire_names():
    request = ChatCompletionRequest(
        model="openai/gpt-4o",
        messages=[ChatMessage(role="user", content="hi")],
        provider=ProviderOptions(
            order=["openai", "azure"],
            allow_fallbacks=False,
            quantizations=[Quantization.FP8],
            max_price=MaxPrice(prompt=1.5),
        ),
        reasoning=ReasoningOptions(effort=Effort.LOW),
        usage=UsageOptions(include=True),
        user="u-1",
        logit_bias={"50256": -100.0},
    )
    payload = request.to_payload()
    assert payload["messages"] == [{"role": "user", "content": "hi"}]  # nosec B101
    assert payload["provider"] == {  # nosec B101
        "allow_fallbacks": False,
        "order": ["openai", "azure"],
        "quantizations": ["fp8"],
        "max_price": {"prompt": 1.5},
    }
    assert payload["reasoning"] == {"effort": "low"}  # nosec B101
    assert payload["usage"] == {"include": True}  # nosec B101
    assert payload["user"] == "u-1"  # nosec B101
    assert payload["logit_bias"] == {"50256": -100.0}  # nosec B101


def test_wants_stream_only_for_explicit_true():
    assert not CompletionRequest(model="m", prompt="p").wants_stream()  # nosec B101
    assert not CompletionRequest(model="m", prompt="p", stream=False).wants_stream()  # nosec B101
    assert CompletionRequest(model="m", prompt="p", stream=True).wants_stream()  # nosec B101
