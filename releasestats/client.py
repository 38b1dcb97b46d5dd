"""
Async GitHub client.

Provides the upstream interface the aggregation engine consumes: get a
repository, list its releases page by page, and list a release's assets.
"""

import os
from typing import Any

from releasestats.clients import AsyncReposClient
from releasestats.exceptions import ConfigurationError
from releasestats.transport import AsyncHTTPTransport, RetryConfig


class AsyncGitHubClient:
    """
    Async client for the GitHub REST API.

    Example:
        ```python
        import asyncio
        from releasestats import AsyncGitHubClient

        async def main():
            async with AsyncGitHubClient(token="ghp_...") as client:
                releases = await client.repos.list_releases("octo", "hello", per_page=30, page=0)

        asyncio.run(main())
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize the async GitHub client.

        Args:
            token: GitHub personal access token (anonymous when None)
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            retry_config=retry_config,
        )

        self.repos = AsyncReposClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "AsyncGitHubClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_PAT: Personal access token (required)
            GITHUB_API_URL: Base URL for API (optional, default: https://api.github.com)

        Raises:
            ConfigurationError: If GITHUB_PAT is not set
        """
        token = os.environ.get("GITHUB_PAT")
        base_url = os.environ.get("GITHUB_API_URL", cls.DEFAULT_BASE_URL)

        if not token:
            raise ConfigurationError("GITHUB_PAT environment variable not set")

        return cls(
            token=token,
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
        )

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGitHubClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
