"""
Pytest fixtures for releasestats testing.

Provides a mock upstream client, a memory cache driven by a fake clock, and
a service wired to both.
"""

from datetime import datetime
from typing import Generator

import pytest

from releasestats.cache import MemoryCacheStore
from releasestats.config import StatsConfig
from releasestats.service import DownloadStatsService
from releasestats.testing.mock import MockGitHubClient
from releasestats.types.releases import ReleaseAsset
from releasestats.types.repos import RepoMetadata, RepoRef


class FakeClock:
    """Manually advanced monotonic clock for TTL tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_repository(
    owner: str = "mock-owner",
    repo: str = "mock-repo",
    created_at: datetime | None = None,
) -> RepoMetadata:
    """Create repository metadata with sensible defaults."""
    return RepoMetadata(
        owner=owner,
        repo=repo,
        created_at=created_at or datetime(2020, 1, 1),
    )


def create_mock_asset(
    name: str = "release.zip",
    download_count: int | float = 0,
) -> ReleaseAsset:
    """Create a release asset."""
    return ReleaseAsset(name=name, download_count=download_count)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_counts(mock_client, memory_cache):
            mock_client.repos.add_release("octo", "hello", 1, [("a.zip", 10)])
            ...
        ```
    """
    client = MockGitHubClient()
    yield client
    client.reset()


@pytest.fixture
def clock() -> FakeClock:
    """Provide a fake monotonic clock."""
    return FakeClock()


@pytest.fixture
def memory_cache(clock: FakeClock) -> MemoryCacheStore:
    """Provide an empty memory cache driven by ``clock``."""
    return MemoryCacheStore(clock=clock)


@pytest.fixture
def stats_config() -> StatsConfig:
    """Provide the default configuration."""
    return StatsConfig()


@pytest.fixture
def sample_repo_ref() -> RepoRef:
    """Provide a repository reference."""
    return RepoRef(owner="octo", repo="hello")


@pytest.fixture
def stats_service(
    mock_client: MockGitHubClient,
    memory_cache: MemoryCacheStore,
    stats_config: StatsConfig,
) -> DownloadStatsService:
    """Provide a service wired to the mock client and memory cache."""
    return DownloadStatsService(mock_client, memory_cache, stats_config)


@pytest.fixture
def mock_client_with_releases(mock_client: MockGitHubClient) -> MockGitHubClient:
    """
    Provide a mock client with ``octo/hello`` holding three releases:

    - 1: hello.zip 10, hello.tar.gz 5
    - 2: hello.deb 100, hello.rpm 40
    - 3: no assets
    """
    mock_client.repos.add_release("octo", "hello", 1, [("hello.zip", 10), ("hello.tar.gz", 5)])
    mock_client.repos.add_release("octo", "hello", 2, [("hello.deb", 100), ("hello.rpm", 40)])
    mock_client.repos.add_release("octo", "hello", 3, [])
    return mock_client
