"""releasestats exception classes."""



class StatsError(Exception):
    """Base exception for all releasestats errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(StatsError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ValidationError(StatsError):
    """Raised on malformed owner/repo/suffix input or upstream 4xx validation errors."""

    pass


class AuthenticationError(StatsError):
    """Raised when the upstream token is rejected (401)."""

    pass


class AuthorizationError(StatsError):
    """Raised when access is denied (403)."""

    pass


class NotFoundError(StatsError):
    """Raised when a repository or release is not found."""

    pass


class RateLimitedError(StatsError):
    """Raised when the upstream API rate limit is exhausted."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ServerError(StatsError):
    """Raised on upstream server errors (5xx) and connection failures."""

    pass


class CacheBackendError(StatsError):
    """Raised when the cache backend is unreachable or misbehaves."""

    def __init__(self, message: str) -> None:
        super().__init__("CACHE_BACKEND_ERROR", message)
