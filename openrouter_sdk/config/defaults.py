"""Built-in configuration defaults."""

OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"

# Used by the CLI when no --model is given.
OPENROUTER_DEFAULT_MODEL = "openrouter/auto"

__all__ = ["OPENROUTER_DEFAULT_BASE_URL", "OPENROUTER_DEFAULT_MODEL"]
