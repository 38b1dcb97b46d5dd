"""Shared fixtures for the releasestats test suite."""

from releasestats.testing.conftest import (  # noqa: F401
    clock,
    memory_cache,
    mock_client,
    mock_client_with_releases,
    sample_repo_ref,
    stats_config,
    stats_service,
)
