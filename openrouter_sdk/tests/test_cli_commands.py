"""openrouter-cli subcommands driven through ``main`` with a mock transport."""
from __future__ import annotations

import json

import httpx
import pytest

from openrouter_sdk.cli import main
from openrouter_sdk.cli.cli_parser import build_parser


def _run(make_client, handler, argv):
    return main(argv, client_factory=lambda: make_client(handler))


def test_parser_stream_flag_shapes():
    parser = build_parser()
    assert parser.parse_args(["complete", "hi", "--stream"]).stream is True  # nosec B101
    assert parser.parse_args(["complete", "hi", "--stream", "false"]).stream is False  # nosec B101
    assert parser.parse_args(["chat", "hi", "--no-stream"]).stream is False  # nosec B101
    assert parser.parse_args(["chat", "hi"]).model == "openrouter/auto"  # nosec B101
    with pytest.raises(SystemExit):
        parser.parse_args([])


def test_complete_prints_first_choice(make_client, capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        assert body == {"model": "m/x", "prompt": "Say hi", "max_tokens": 4}  # nosec B101
        return httpx.Response(200, json={"id": "g", "choices": [{"index": 0, "text": "hi!"}]})

    code = _run(make_client, handler, ["complete", "Say hi", "--model", "m/x", "--max-tokens", "4"])
    assert code == 0  # nosec B101
    assert capsys.readouterr().out == "hi!\n"  # nosec B101


def test_chat_stream_writes_deltas_and_requests_usage(make_client, sse_body, capsys):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(
            200,
            content=sse_body(
                {"id": "c", "choices": [{"index": 0, "delta": {"role": "assistant", "content": "Hel"}}]},
                ": OPENROUTER PROCESSING",
                {"id": "c", "choices": [{"index": 0, "delta": {"content": "lo"}}]},
                {"id": "c", "choices": [], "usage": {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5}},
            ),
        )

    code = _run(make_client, handler, ["chat", "hey", "--system", "be brief", "--stream"])
    assert code == 0  # nosec B101
    assert capsys.readouterr().out == "Hello\n"  # nosec B101
    body = seen[0]
    assert body["stream"] is True and body["usage"] == {"include": True}  # nosec B101
    assert [m["role"] for m in body["messages"]] == ["system", "user"]  # nosec B101


def test_api_error_exits_one_with_json_on_stderr(make_client, capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"code": 401, "message": "No auth credentials found"}})

    code = _run(make_client, handler, ["credits"])
    assert code == 1  # nosec B101
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert err["type"] == "APIError" and err["code"] == "auth"  # nosec B101


def test_transport_error_exits_one(make_client, capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    assert _run(make_client, handler, ["models"]) == 1  # nosec B101
    assert "ConnectError" in capsys.readouterr().err  # nosec B101


def test_models_and_credits_output(make_client, capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/models"):
            return httpx.Response(200, json={"data": [{"id": "a/b", "name": "Model B"}]})
        return httpx.Response(200, json={"data": {"total_credits": 10, "total_usage": 4}})

    assert _run(make_client, handler, ["models"]) == 0  # nosec B101
    assert capsys.readouterr().out == "a/b\tModel B\n"  # nosec B101
    assert _run(make_client, handler, ["credits"]) == 0  # nosec B101
    assert json.loads(capsys.readouterr().out)["remaining"] == 6.0  # nosec B101


def test_endpoints_requires_author_slug(make_client, capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    assert _run(make_client, handler, ["endpoints", "noslash"]) == 2  # nosec B101
    assert "author/slug" in capsys.readouterr().err  # nosec B101


def test_generation_lookup(make_client, capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": {"id": request.url.params["id"], "total_cost": 0.5}})

    assert _run(make_client, handler, ["generation", "gen-9"]) == 0  # nosec B101
    out = json.loads(capsys.readouterr().out)
    assert out["id"] == "gen-9" and out["total_cost"] == 0.5  # nosec B101
