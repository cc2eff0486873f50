"""
Configuration management for the Confluence client.

This module provides utilities for loading configuration from
environment variables or other sources.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from confluence_client.core.session import ConfluenceSession

# Load environment variables from .env file
load_dotenv()


class ConfluenceConfig:
    """
    Configuration class for Confluence client settings.

    Configuration can be provided in two ways:
    1. Direct initialization with parameters
    2. Loading from environment variables (with optional parameter overrides)

    Attributes:
        base_url: Base URL of the Confluence instance.
        username: Account name or e-mail address.
        api_key: API key used for Basic authentication.
        timeout: Request timeout in seconds (default: 30).

    Examples:
        >>> # From environment variables
        >>> config = ConfluenceConfig.from_env()
        >>> session = config.create_session()
        >>>
        >>> # Direct initialization
        >>> config = ConfluenceConfig(
        ...     base_url="https://example.atlassian.net/wiki",
        ...     username="bob@example.com",
        ...     api_key="api_key",
        ...     timeout=60
        ... )
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        username: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: int = 30,
    ):
        """
        Initialize configuration.

        Direct parameters take precedence over environment variables.

        Args:
            base_url: Confluence base URL. If None, loads from CONFLUENCE_BASE_URL env var.
            username: Account name. If None, loads from CONFLUENCE_USERNAME env var.
            api_key: API key. If None, loads from CONFLUENCE_API_KEY env var.
            timeout: Request timeout in seconds. Defaults to 30.

        Raises:
            ValueError: If any required configuration value is missing after
                       checking both parameters and environment variables.
        """
        self.base_url = base_url or os.getenv("CONFLUENCE_BASE_URL")
        self.username = username or os.getenv("CONFLUENCE_USERNAME")
        self.api_key = api_key or os.getenv("CONFLUENCE_API_KEY")
        self.timeout = timeout

        self._validate()

    def _validate(self) -> None:
        """
        Validate that required configuration values are present.

        Raises:
            ValueError: If any required configuration value is missing.
        """
        if not self.base_url:
            raise ValueError(
                "Confluence base URL is required. "
                "Set CONFLUENCE_BASE_URL environment variable or pass base_url parameter."
            )

        if not self.username:
            raise ValueError(
                "Confluence username is required. "
                "Set CONFLUENCE_USERNAME environment variable or pass username parameter."
            )

        if not self.api_key:
            raise ValueError(
                "Confluence API key is required. "
                "Set CONFLUENCE_API_KEY environment variable or pass api_key parameter."
            )

    @classmethod
    def from_env(cls, timeout: int = 30) -> "ConfluenceConfig":
        """
        Create configuration from environment variables.

        Required environment variables:
        - CONFLUENCE_BASE_URL: Base URL of the Confluence instance
        - CONFLUENCE_USERNAME: Account name or e-mail address
        - CONFLUENCE_API_KEY: API key

        Args:
            timeout: Request timeout in seconds. Defaults to 30.

        Raises:
            ValueError: If any required environment variable is missing.
        """
        return cls(timeout=timeout)

    def create_session(self) -> ConfluenceSession:
        """Build a ``ConfluenceSession`` from this configuration."""
        return ConfluenceSession(
            username=self.username,
            api_key=self.api_key,
            base_url=self.base_url,
            timeout=self.timeout,
        )

    def __repr__(self) -> str:
        return f"ConfluenceConfig(base_url={self.base_url!r}, username={self.username!r}, timeout={self.timeout})"
