# src/anthropic_kit/client.py

import logging
from types import TracebackType

import httpx

from anthropic_kit.config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_API_VERSION,
    DEFAULT_USER_AGENT,
    ClientConfig,
)
from anthropic_kit.observability.base import MetricsHook, NoOpMetricsHook
from anthropic_kit.resources import (
    AdminMixin,
    FilesMixin,
    MessageBatchesMixin,
    MessagesMixin,
    ModelsMixin,
)
from anthropic_kit.transport import Transport

logger = logging.getLogger(__name__)


class AnthropicClient(
    MessagesMixin,
    ModelsMixin,
    MessageBatchesMixin,
    FilesMixin,
    AdminMixin,
):
    """Async client for the Anthropic API.

    One method per API operation. Holds only read-only state, so one
    instance may serve concurrent calls. A failed call leaves the client
    usable. Nothing is retried; see ``anthropic_kit.retry`` for an opt-in
    policy.

    Example:
        >>> async with AnthropicClient(api_key="sk-ant-...") as client:
        ...     message = await client.create_message(
        ...         CreateMessageParams(
        ...             model="claude-sonnet-4-20250514",
        ...             messages=[MessageParam.user("Hello!")],
        ...             max_tokens=256,
        ...         )
        ...     )
        ...     print(message.text)
    """

    def __init__(
        self,
        api_key: str,
        api_version: str = DEFAULT_API_VERSION,
        *,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 60.0,
        user_agent: str = DEFAULT_USER_AGENT,
        http_client: httpx.AsyncClient | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        config = ClientConfig(
            api_key=api_key,
            api_version=api_version,
            base_url=base_url,
            timeout=timeout,
            user_agent=user_agent,
        )
        self._config = config
        self._transport = Transport(config, http_client, metrics_hook)
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized AnthropicClient with base_url=%s, api_version=%s, timeout=%s",
            config.base_url,
            config.api_version,
            config.timeout,
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        http_client: httpx.AsyncClient | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> "AnthropicClient":
        return cls(
            config.api_key,
            config.api_version,
            base_url=config.base_url,
            timeout=config.timeout,
            user_agent=config.user_agent,
            http_client=http_client,
            metrics_hook=metrics_hook,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        await self._transport.aclose()

    async def __aenter__(self) -> "AnthropicClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
