"""
AI Adapter Facade

Single entry point over all configured providers. The facade holds no
provider-specific logic: it resolves ``options.provider`` against the
registry built at construction and delegates the call.

Usage:
    adapter = AIAdapter({"openai": {"apiKey": "sk-..."}})
    result = await adapter.process("Is this spam? ...", {"provider": "openai"})
"""

from typing import Any, Dict, Mapping, Optional, Tuple, Union

import httpx

from .config import get_logger
from .errors import ProviderUnavailable
from .llm.factory import PROVIDER_CLASSES, AdapterConfig, load_adapter_config_from_env
from .llm.provider import LLMProvider, ProcessOptions, ProviderConfig

logger = get_logger(__name__)


class AIAdapter:
    """
    Facade that routes ``process`` calls to registered providers.

    A provider is registered if and only if its config entry carries a
    non-empty API key. Missing providers are not a construction error;
    they fail with ProviderUnavailable when requested.
    """

    def __init__(
        self,
        config: Optional[AdapterConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Build and register providers.

        Args:
            config: Mapping of provider name to ProviderConfig or mapping
            http_client: Optional shared client (owned by the caller)
        """
        self._providers: Dict[str, LLMProvider] = {}
        config = config or {}

        for name in config:
            if name not in PROVIDER_CLASSES:
                logger.warning("Ignoring config for unknown provider '%s'", name)

        for name, provider_cls in PROVIDER_CLASSES.items():
            if name not in config:
                continue

            provider_config = ProviderConfig.from_mapping(config[name])
            if not provider_config.has_credential:
                logger.warning("Provider '%s' configured without an API key; skipping", name)
                continue

            self._providers[name] = provider_cls(provider_config, client=http_client)
            logger.debug("Registered provider '%s'", name)

    @classmethod
    def from_env(
        cls,
        dotenv_path: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "AIAdapter":
        """Create an adapter from OPENAI_/ANTHROPIC_/GEMINI_ environment variables."""
        return cls(load_adapter_config_from_env(dotenv_path), http_client=http_client)

    @property
    def available_providers(self) -> Tuple[str, ...]:
        """Names of registered providers, sorted."""
        return tuple(sorted(self._providers))

    def get_provider(self, name: Optional[str]) -> LLMProvider:
        """
        Look up a registered provider.

        Raises:
            ProviderUnavailable: Name is not registered
        """
        provider = self._providers.get(name or "")
        if provider is None:
            raise ProviderUnavailable(name)
        return provider

    async def process(
        self,
        prompt: str,
        options: Union[ProcessOptions, Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> Any:
        """
        Run a prompt through the provider named in ``options.provider``.

        Args:
            prompt: Prompt text
            options: ProcessOptions or mapping (provider, model, temperature,
                maxTokens, plus any passthrough keys)
            **overrides: Option fields merged over ``options``

        Returns:
            The provider's normalized response, unchanged

        Raises:
            ProviderUnavailable: Requested provider is not registered
            UpstreamError: Provider returned a non-success status
            InvalidResponseError: Provider returned a body that is not JSON
        """
        # Resolve the provider before validating the remaining fields
        provider = self.get_provider(_requested_provider(options, overrides))
        resolved = ProcessOptions.coerce(options, **overrides)
        return await provider.process(prompt, resolved)

    async def close(self) -> None:
        """Close provider-owned HTTP clients."""
        for provider in self._providers.values():
            await provider.close()

    async def __aenter__(self) -> "AIAdapter":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"AIAdapter(providers={list(self.available_providers)!r})"


def _requested_provider(
    options: Union[ProcessOptions, Mapping[str, Any], None],
    overrides: Mapping[str, Any],
) -> Optional[str]:
    if "provider" in overrides:
        return overrides["provider"]
    if isinstance(options, ProcessOptions):
        return options.provider
    if options is None:
        return None
    return options.get("provider")
