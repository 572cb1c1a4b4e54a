"""Base shared constants for the SDK.

Central location for wire-level literals (SSE framing, header names and
values, API paths) so they are not scattered across modules.
"""
from __future__ import annotations

# ---- Server-Sent Events framing ----
SSE_DATA_PREFIX = "data: "
SSE_COMMENT_PREFIX = ":"
SSE_DONE_SENTINEL = "[DONE]"

# ---- Headers ----
EVENT_STREAM_MEDIA_TYPE = "text/event-stream"
JSON_MEDIA_TYPE = "application/json"
NO_CACHE = "no-cache"
HEADER_REFERER = "HTTP-Referer"
HEADER_TITLE = "X-Title"

# ---- API paths (relative to the base URL) ----
COMPLETIONS_PATH = "/completions"
CHAT_COMPLETIONS_PATH = "/chat/completions"
CREDITS_PATH = "/credits"
GENERATION_PATH = "/generation"
MODELS_PATH = "/models"
ENDPOINTS_PATH_TEMPLATE = "/models/{author}/{slug}/endpoints"

__all__ = [
    "SSE_DATA_PREFIX",
    "SSE_COMMENT_PREFIX",
    "SSE_DONE_SENTINEL",
    "EVENT_STREAM_MEDIA_TYPE",
    "JSON_MEDIA_TYPE",
    "NO_CACHE",
    "HEADER_REFERER",
    "HEADER_TITLE",
    "COMPLETIONS_PATH",
    "CHAT_COMPLETIONS_PATH",
    "CREDITS_PATH",
    "GENERATION_PATH",
    "MODELS_PATH",
    "ENDPOINTS_PATH_TEMPLATE",
]
