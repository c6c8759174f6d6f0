"""
AI Adapter

One ``process(prompt, options)`` call over OpenAI, Anthropic and Gemini,
returning parsed JSON or ``{"text": ...}`` regardless of backend.
"""

from .adapter import AIAdapter
from .errors import AIAdapterError, InvalidResponseError, ProviderUnavailable, UpstreamError
from .llm import ProcessOptions, ProviderConfig

__all__ = [
    "AIAdapter",
    "AIAdapterError",
    "InvalidResponseError",
    "ProviderUnavailable",
    "UpstreamError",
    "ProcessOptions",
    "ProviderConfig",
]
