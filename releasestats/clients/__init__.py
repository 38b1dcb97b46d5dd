"""releasestats upstream resource clients."""

from releasestats.clients.repos import AsyncReposClient

__all__ = [
    "AsyncReposClient",
]
