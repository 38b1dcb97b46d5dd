#!/usr/bin/env python3
"""
Basic releasestats usage example.

Counts release downloads for a repository using the offline mock client, then
shows the same call against GitHub when GITHUB_PAT is set.
Run with: python examples/basic_usage.py [owner/repo] [suffixes]
"""

import asyncio
import logging
import os
import sys

from releasestats import (
    DownloadStatsService,
    MemoryCacheStore,
    StatsConfig,
    StatsError,
    configure_logging,
)
from releasestats.testing import MockGitHubClient

configure_logging(level=logging.INFO, cache_level=logging.DEBUG)

print("=== releasestats Basic Usage Example ===\n")


async def offline_demo() -> None:
    # 1. Mock upstream with two releases, one of them empty
    print("1. Counting against a mock upstream...")
    client = MockGitHubClient()
    client.repos.add_release("octo", "hello", 1, [("hello.zip", 1200), ("hello.tar.gz", 34)])
    client.repos.add_release("octo", "hello", 2, [])

    service = DownloadStatsService(client, MemoryCacheStore(), StatsConfig())

    print(f"   Most downloaded asset per release: {await service.count_downloads('octo', 'hello')}")
    print(f"   Only .gz files: {await service.count_downloads('octo', 'hello', 'gz')}")

    # 2. Repeat: served from the result cache
    calls = client.call_count()
    await service.count_downloads("octo", "hello")
    print(f"   Upstream calls for the repeat request: {client.call_count() - calls}")

    print("\n   OK: offline counting working\n")


async def live_demo(full_name: str, suffixes: str | None) -> None:
    print(f"2. Counting {full_name} on GitHub...")
    owner, _, repo = full_name.partition("/")
    async with DownloadStatsService.from_env() as service:
        try:
            count = await service.count_downloads(owner, repo, suffixes)
        except StatsError as e:
            print(f"   Failed: {e}")
            return
    print(f"   Downloads: {count}")


asyncio.run(offline_demo())

if os.environ.get("GITHUB_PAT") and len(sys.argv) > 1:
    asyncio.run(live_demo(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None))
else:
    print("Set GITHUB_PAT and pass owner/repo to query GitHub.")
