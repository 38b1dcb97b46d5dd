"""releasestats testing utilities.

Provides a mock upstream client and fixtures for testing code built on releasestats.
"""

from releasestats.testing.fixtures import FakeClock, create_mock_asset, create_mock_repository
from releasestats.testing.mock import MockCall, MockGitHubClient, MockResponse

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
    # Helpers
    "FakeClock",
    "create_mock_asset",
    "create_mock_repository",
]
