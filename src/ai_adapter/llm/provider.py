"""
Base LLM Provider Interface and Configuration

Defines the abstraction layer shared by every backend:
- ProviderConfig: credential plus connection settings for one backend
- ProcessOptions: per-call options with a passthrough bag for unknown keys
- LLMProvider: the single ``process(prompt, options)`` capability
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field

from ..config import get_logger
from ..errors import InvalidResponseError, UpstreamError
from .normalize import normalize_text

logger = get_logger(__name__)

DEFAULT_TEMPERATURE = 0.1
DEFAULT_MAX_TOKENS = 4000
DEFAULT_TIMEOUT = 60.0

# Keys recognized in a provider config mapping; anything else goes to `extra`
_CONFIG_ALIASES = {
    "apiKey": "api_key",
    "api_key": "api_key",
    "baseUrl": "base_url",
    "base_url": "base_url",
    "timeout": "timeout",
}


@dataclass(frozen=True)
class ProviderConfig:
    """
    Configuration for one provider backend.

    A provider is only activated when ``api_key`` is non-empty.
    Provider-specific settings (e.g. ``organization``) ride along in
    ``extra`` without validation.
    """

    api_key: str = ""
    base_url: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_credential(self) -> bool:
        return isinstance(self.api_key, str) and bool(self.api_key)

    @classmethod
    def from_mapping(
        cls, data: Union["ProviderConfig", Mapping[str, Any], None]
    ) -> "ProviderConfig":
        """Build a config from a camelCase or snake_case mapping."""
        if isinstance(data, ProviderConfig):
            return data
        if data is None:
            return cls()

        known: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in data.items():
            target = _CONFIG_ALIASES.get(key)
            if target is None:
                extra[key] = value
            else:
                known[target] = value

        if known.get("timeout") is None:
            known.pop("timeout", None)
        api_key = known.pop("api_key", None)
        return cls(api_key=api_key or "", extra=extra, **known)

    def __repr__(self) -> str:
        # Never show the credential
        return (
            f"ProviderConfig(api_key={'***' if self.has_credential else ''!r}, "
            f"base_url={self.base_url!r}, timeout={self.timeout!r}, "
            f"extra={sorted(self.extra)!r})"
        )


class ProcessOptions(BaseModel):
    """
    Options for a single ``process`` call.

    Recognized fields are typed; anything else (``dimension``,
    ``sectionIndex``, ...) is kept in ``model_extra`` and ignored by providers.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    provider: Optional[str] = None
    model: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = Field(default=None, alias="maxTokens")

    @classmethod
    def coerce(
        cls, options: Union["ProcessOptions", Mapping[str, Any], None] = None, **overrides: Any
    ) -> "ProcessOptions":
        """Accept a ProcessOptions, a plain mapping, or nothing."""
        if options is None:
            data: Dict[str, Any] = {}
        elif isinstance(options, ProcessOptions):
            if not overrides:
                return options
            data = {**options.model_dump(by_alias=True, exclude_unset=True), **options.passthrough}
        else:
            data = dict(options)
        data.update(overrides)
        if "max_tokens" in data:
            data["maxTokens"] = data.pop("max_tokens")
        return cls.model_validate(data)

    @property
    def passthrough(self) -> Dict[str, Any]:
        """Caller-defined fields the adapter does not interpret."""
        return dict(self.model_extra or {})


class LLMProvider(ABC):
    """
    Abstract base class for LLM providers.

    Each provider is bound to one ProviderConfig and is immutable after
    construction. Calls share no mutable state, so concurrent ``process``
    calls on one instance are independent.
    """

    name: str = "base"
    display_name: str = "Base"
    default_model: str = ""
    default_base_url: str = ""

    def __init__(
        self,
        config: ProviderConfig,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=config.timeout)

    @property
    def base_url(self) -> str:
        return (self.config.base_url or self.default_base_url).rstrip("/")

    def resolve_model(self, options: ProcessOptions) -> str:
        return options.model or self.default_model

    def resolve_temperature(self, options: ProcessOptions) -> float:
        # 0.0 is a valid temperature, only None falls back
        if options.temperature is None:
            return DEFAULT_TEMPERATURE
        return options.temperature

    def resolve_max_tokens(self, options: ProcessOptions) -> int:
        return options.max_tokens or DEFAULT_MAX_TOKENS

    @abstractmethod
    async def process(self, prompt: str, options: ProcessOptions) -> Any:
        """
        Send one prompt to the backend and normalize the reply.

        Args:
            prompt: User prompt text
            options: Per-call options (model, temperature, max_tokens)

        Returns:
            Parsed JSON value, or {"text": raw} when the reply is not JSON

        Raises:
            UpstreamError: Backend returned a non-success status
            InvalidResponseError: Backend returned a success status with a non-JSON body
        """

    async def _post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        """POST a JSON body and return the decoded JSON reply."""
        response = await self._client.post(
            url,
            json=payload,
            headers={"Content-Type": "application/json", **(headers or {})},
            params=params,
        )

        if not response.is_success:
            logger.warning(
                "%s request failed with status %s", self.display_name, response.status_code
            )
            raise UpstreamError(self.name, response.status_code, response.text)

        try:
            return response.json()
        except ValueError:
            logger.warning("%s returned a non-JSON body", self.display_name)
            raise InvalidResponseError(self.name, response.status_code, response.text) from None

    def _normalize(self, text: str) -> Any:
        return normalize_text(text)

    async def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"
