"""
Request handling for the download count endpoint.

Framework-neutral: turns query parameters into a status, JSON body and
headers so any HTTP layer can serve it.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from releasestats.exceptions import (
    CacheBackendError,
    ConfigurationError,
    NotFoundError,
    StatsError,
    ValidationError,
)
from releasestats.logging import get_logger

if TYPE_CHECKING:
    from releasestats.service import DownloadStatsService

logger = get_logger("handler")

CACHE_CONTROL = "s-maxage=3600, stale-while-revalidate"


@dataclass
class HandlerResponse:
    """Status, JSON body and headers for one request."""

    status: int
    body: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)


def error_status(error: StatsError) -> int:
    """Map an exception to the HTTP status returned to the caller."""
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, (CacheBackendError, ConfigurationError)):
        return 503
    return 502


def error_response(error: StatsError) -> HandlerResponse:
    body: dict[str, Any] = {"error": error.message, "code": error.code}
    if error.request_id:
        body["request_id"] = error.request_id
    return HandlerResponse(status=error_status(error), body=body)


async def handle_count_request(
    service: "DownloadStatsService",
    params: Mapping[str, str | None],
) -> HandlerResponse:
    """
    Serve a download count request.

    Args:
        service: Shared statistics service
        params: Query parameters ``owner``, ``repo`` and optional ``suffix``
            (``suffixes`` is accepted as an alias)

    Returns:
        200 with ``{"count": "1,234"}`` and a CDN cache header, or an error
        payload; a partial count is never returned
    """
    suffixes = params.get("suffix") or params.get("suffixes")
    logger.debug(f"count request: {dict(params)}")

    try:
        count = await service.count_downloads(params.get("owner"), params.get("repo"), suffixes)
    except StatsError as e:
        if not isinstance(e, (ValidationError, NotFoundError)):
            logger.error(f"count failed for {params.get('owner')}/{params.get('repo')}: {e}")
        return error_response(e)

    return HandlerResponse(
        status=200,
        body={"count": count},
        headers={"Cache-Control": CACHE_CONTROL},
    )
