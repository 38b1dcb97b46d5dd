"""releasestats - release download statistics for GitHub repositories."""

from releasestats.aggregator import NO_ASSETS, AssetAggregator
from releasestats.cache import CacheStore, MemoryCacheStore, create_cache_store
from releasestats.client import AsyncGitHubClient
from releasestats.collector import ReleaseIdCollector
from releasestats.config import StatsConfig
from releasestats.exceptions import (
    AuthenticationError,
    AuthorizationError,
    CacheBackendError,
    ConfigurationError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    StatsError,
    ValidationError,
)
from releasestats.logging import configure_logging, get_logger
from releasestats.memoizer import ResultMemoizer, format_count
from releasestats.service import DownloadStatsService
from releasestats.transport import AsyncHTTPTransport, RetryConfig
from releasestats.types import ReleaseAsset, RepoMetadata, RepoRef, SuffixFilter

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Service
    "DownloadStatsService",
    "ResultMemoizer",
    "ReleaseIdCollector",
    "AssetAggregator",
    "NO_ASSETS",
    "format_count",
    # Upstream client
    "AsyncGitHubClient",
    "AsyncHTTPTransport",
    "RetryConfig",
    # Cache
    "CacheStore",
    "MemoryCacheStore",
    "create_cache_store",
    # Config
    "StatsConfig",
    # Types
    "RepoRef",
    "RepoMetadata",
    "ReleaseAsset",
    "SuffixFilter",
    # Exceptions
    "StatsError",
    "ConfigurationError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ServerError",
    "CacheBackendError",
    # Logging
    "configure_logging",
    "get_logger",
]
