# src/anthropic_kit/factory.py

import httpx

from anthropic_kit.observability.base import MetricsHook, NoOpMetricsHook

from .client import AnthropicClient
from .config import ClientConfig


def create_client(
    config: ClientConfig,
    http_client: httpx.AsyncClient | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> AnthropicClient:
    """Create an Anthropic client from config.

    Args:
        config: Credentials, API version, base URL and timeout.
        http_client: Optional httpx client to share a connection pool.
            It is not closed by the returned client.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured AnthropicClient.

    Example:
        >>> config = ClientConfig(api_key="sk-ant-...")
        >>> client = create_client(config)
        >>> models = await client.list_models()
    """
    return AnthropicClient.from_config(
        config, http_client=http_client, metrics_hook=metrics_hook
    )
