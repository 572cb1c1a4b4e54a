"""OpenRouter client package.

Exposes :class:`OpenRouterClient` and the shared error extraction helper.
"""

from .client import OpenRouterClient
from .request_helpers import handle_error_response, is_success

__all__ = ["OpenRouterClient", "handle_error_response", "is_success"]
