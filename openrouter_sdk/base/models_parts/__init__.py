"""One-module-per-concept pydantic wire models; import via ``openrouter_sdk.base.models``."""
