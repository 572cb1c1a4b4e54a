"""Cancellation parts package; import via ``openrouter_sdk.base.cancellation``."""
