# src/anthropic_kit/config.py

from dataclasses import dataclass, field

DEFAULT_API_BASE_URL = "https://api.anthropic.com/v1"
DEFAULT_API_VERSION = "2023-06-01"
DEFAULT_USER_AGENT = "anthropic-kit/0.1.0"

FILES_API_BETA = "files-api-2025-04-14"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for the Anthropic client.

    Immutable. Explicit. No magic defaults from environment.
    """

    api_key: str = field(repr=False)
    api_version: str = DEFAULT_API_VERSION
    base_url: str = DEFAULT_API_BASE_URL
    timeout: float = 60.0
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("api_key must be a non-empty string")
        if not self.api_version:
            raise ValueError("api_version must be a non-empty string")
