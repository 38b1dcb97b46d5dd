"""
Pytest plugin for releasestats testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["releasestats.testing.conftest"]
"""

from releasestats.testing.fixtures import (
    clock,
    memory_cache,
    mock_client,
    mock_client_with_releases,
    sample_repo_ref,
    stats_config,
    stats_service,
)

__all__ = [
    "clock",
    "memory_cache",
    "mock_client",
    "mock_client_with_releases",
    "sample_repo_ref",
    "stats_config",
    "stats_service",
]
