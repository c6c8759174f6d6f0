"""
Adapter Errors

Exceptions raised by the adapter facade and provider implementations.
Model text that is not parseable JSON is not an error; it becomes a
``{"text": ...}`` result instead. A transport body that is not JSON is.
"""

from typing import Optional


class AIAdapterError(RuntimeError):
    """Base class for all adapter errors."""


class ProviderUnavailable(AIAdapterError):
    """Requested provider is not registered (unknown name or missing API key)."""

    def __init__(self, provider: Optional[str]):
        self.provider = provider
        super().__init__(f"AI provider not available: {provider}")


class UpstreamError(AIAdapterError):
    """Provider HTTP call returned a non-success status."""

    def __init__(self, provider: str, status_code: int, body: str = ""):
        self.provider = provider
        self.status_code = status_code
        self.body = body
        super().__init__(f"{provider} API error: {status_code}")


class InvalidResponseError(AIAdapterError):
    """Provider replied with a success status but the body is not JSON."""

    def __init__(self, provider: str, status_code: int, body: str = ""):
        self.provider = provider
        self.status_code = status_code
        self.body = body
        super().__init__(f"Failed to parse {provider} API response as JSON")
