"""
Configuration for the CurseForge API client.

This module provides the client configuration and the boundary helper
that reads the API key from the environment.
"""

from typing import Optional, Dict, Union
from dataclasses import dataclass, field
import os

import httpx
from dotenv import find_dotenv, load_dotenv

from .exceptions import InvalidApiKeyError

DEFAULT_BASE_URL = "https://api.curseforge.com/v1"
DEFAULT_USER_AGENT = "curseforge-api/0.1.0"
API_KEY_ENV_VAR = "CURSEFORGE_API_KEY"
MINECRAFT_GAME_ID = 432


@dataclass(frozen=True)
class CurseForgeConfig:
    """
    Configuration for CurseForge client instances.

    Attributes:
        api_key: CurseForge API key, sent as a bearer token
        base_url: Root URL for all API requests
        timeout: Per-request timeout (seconds)
        user_agent: User-Agent header value
        max_retries: Maximum retries for transient failures
        retry_delay: Fixed delay between attempts (seconds)
        headers: Extra headers applied to all requests
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    max_retries: int = 3
    retry_delay: float = 1.0
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.base_url:
            raise ValueError("base_url is required")
        if self.max_retries < 0:
            raise ValueError("max_retries must not be negative")
        if self.retry_delay < 0:
            raise ValueError("retry_delay must not be negative")

        # Ensure base_url doesn't end with a slash
        if self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def to_httpx_timeout(self) -> httpx.Timeout:
        """Convert to httpx.Timeout object."""
        return httpx.Timeout(self.timeout)

    @classmethod
    def from_env(
        cls,
        env_var: str = API_KEY_ENV_VAR,
        dotenv_path: Optional[Union[str, os.PathLike]] = None,
        **overrides,
    ) -> "CurseForgeConfig":
        """
        Build a configuration whose API key comes from the environment.

        Args:
            env_var: Name of the environment variable holding the key
            dotenv_path: Optional .env file to load first
            **overrides: Any other configuration fields

        Returns:
            CurseForgeConfig instance

        Raises:
            InvalidApiKeyError: If the variable is unset or empty
        """
        api_key = load_api_key(env_var=env_var, dotenv_path=dotenv_path)
        return cls(api_key=api_key, **overrides)


def load_api_key(
    env_var: str = API_KEY_ENV_VAR,
    dotenv_path: Optional[Union[str, os.PathLike]] = None,
) -> str:
    """
    Load the API key from a .env file or the process environment.

    Variables already present in the environment take precedence over the
    .env file.

    Args:
        env_var: Name of the environment variable holding the key
        dotenv_path: Optional .env file; searched for upwards when omitted

    Returns:
        The API key

    Raises:
        InvalidApiKeyError: If the variable is unset or empty
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)
    api_key = os.environ.get(env_var, "").strip()
    if not api_key:
        raise InvalidApiKeyError(f"{env_var} must be set in .env or environment")
    return api_key
