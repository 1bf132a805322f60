"""Core data types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class QuayConfig:
    """Connection settings for a Quay API endpoint.

    Attributes:
        url: API base URL (e.g., https://quay.io/api/v1)
        token: OAuth bearer token
        timeout: Total request timeout in seconds, applied to sessions
            created by this library
    """

    url: str
    token: str
    timeout: int = 30

    @property
    def base_url(self) -> str:
        """Base URL without a trailing slash."""
        return self.url.rstrip("/")

    def __repr__(self) -> str:
        return f"QuayConfig(url={self.url!r}, timeout={self.timeout})"


@dataclass
class RequestResult:
    """A fully read HTTP response."""

    status_code: int
    data: bytes = b""
