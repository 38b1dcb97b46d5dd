"""
releasestats logging utilities.

Provides configurable logging for upstream HTTP traffic and cache activity.
Ensures GitHub access tokens never reach the log output.
"""

import logging
import re
from typing import Any

# Package loggers
_root_logger = logging.getLogger("releasestats")
_http_logger = logging.getLogger("releasestats.http")
_cache_logger = logging.getLogger("releasestats.cache")

# Patterns for secrets that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization header values
    (re.compile(r"(Bearer|token)\s+[A-Za-z0-9_\-\.]+", re.IGNORECASE), r"\1 [REDACTED]"),
    # Fine-grained personal access tokens
    (re.compile(r"github_pat_[A-Za-z0-9_]{20,}"), "[TOKEN_REDACTED]"),
    # Classic tokens (personal, OAuth, app, refresh)
    (re.compile(r"gh[pousr]_[A-Za-z0-9]{20,}"), "[TOKEN_REDACTED]"),
    # Redis URLs with credentials
    (re.compile(r"(rediss?://)[^@/\s]+@"), r"\1[REDACTED]@"),
    # Generic key=value secrets
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {"authorization", "token", "secret", "password", "api_key", "github_pat"}


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    cache_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure releasestats logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for upstream request/response logging (default: same as level)
        cache_level: Log level for cache hit/miss logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from releasestats.logging import configure_logging

        # Watch cache hits and misses
        configure_logging(level=logging.INFO, cache_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _root_logger.setLevel(level)
    _root_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _cache_logger.setLevel(cache_level if cache_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a releasestats logger.

    Args:
        name: Logger name suffix (e.g., "http", "cache"). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _root_logger
    return logging.getLogger(f"releasestats.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask GitHub tokens, authorization values and credentialed URLs in a string.

    Args:
        text: Text that may contain secrets

    Returns:
        Text with secrets replaced by redaction markers
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Keys to mask (default: authorization, token, secret, password, api_key)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if key_lower in sensitive_keys or any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
) -> None:
    """Log an upstream request at DEBUG level with secrets masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {url}"]

    if params:
        log_parts.append(f"params={safe_log_dict(params)}")

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    _http_logger.debug(mask_sensitive_data(" | ".join(log_parts)))


def log_http_response(
    status_code: int,
    url: str,
    elapsed_ms: float | None = None,
    rate_limit_remaining: str | None = None,
) -> None:
    """Log an upstream response at DEBUG level."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if rate_limit_remaining is not None:
        log_parts.append(f"ratelimit_remaining={rate_limit_remaining}")

    _http_logger.debug(" | ".join(log_parts))


def log_cache_event(event: str, key: str, ttl: int | None = None) -> None:
    """
    Log a cache event ("hit", "miss", "store") at DEBUG level.

    Args:
        event: Event name
        key: Cache key involved
        ttl: TTL in seconds for "store" events
    """
    if not _cache_logger.isEnabledFor(logging.DEBUG):
        return

    if ttl is None:
        _cache_logger.debug(f"cache {event}: {key}")
    else:
        _cache_logger.debug(f"cache {event}: {key} (ttl={ttl}s)")


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
    "log_cache_event",
]
