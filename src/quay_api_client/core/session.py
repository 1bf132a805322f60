"""HTTP session handling and response decoding."""

import asyncio
import json
import logging
from typing import Any, Optional
from urllib.parse import quote

import aiohttp

from ..exceptions import QuayAPIError, QuayConnectionError, QuayDecodeError
from ..models import ErrorPayload
from .types import QuayConfig, RequestResult

logger = logging.getLogger(__name__)


async def create_session(
    timeout: int = 30, connector: Optional[aiohttp.BaseConnector] = None
) -> aiohttp.ClientSession:
    """Create an aiohttp session for talking to Quay.

    Args:
        timeout: Total request timeout in seconds
        connector: Optional connector for connection pooling

    Returns:
        New client session; the caller is responsible for closing it
    """
    return aiohttp.ClientSession(
        connector=connector,
        timeout=aiohttp.ClientTimeout(total=timeout),
    )


def build_headers(token: str) -> dict[str, str]:
    """Headers sent with every Quay API request."""
    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }


def build_url(config: QuayConfig, *segments: str) -> str:
    """Join path segments onto the base URL, percent-encoding each one.

    Examples:
        build_url(config, "repository", "myorg", "myrepo")
        # -> "https://quay.io/api/v1/repository/myorg/myrepo"
    """
    path = "/".join(quote(segment, safe="") for segment in segments)
    return f"{config.base_url}/{path}"


async def execute_request(
    session: aiohttp.ClientSession,
    config: QuayConfig,
    method: str,
    url: str,
    params: Optional[dict[str, str]] = None,
) -> RequestResult:
    """Send one request and read the whole response.

    The body is read inside the response context, so the connection is
    released on every path.

    Args:
        session: Client session to send the request with
        config: Configuration supplying the bearer token
        method: HTTP method
        url: Absolute request URL
        params: Optional query parameters

    Returns:
        Status and raw body of the response

    Raises:
        QuayConnectionError: If the request could not be built or completed
    """
    logger.debug("%s %s", method, url)
    try:
        async with session.request(
            method, url, params=params, headers=build_headers(config.token)
        ) as resp:
            data = await resp.read()
            result = RequestResult(status_code=resp.status, data=data)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        raise QuayConnectionError(f"{method} {url} failed: {e}") from e

    logger.debug("%s %s -> %d", method, url, result.status_code)
    return result


def parse_json_response(text: str | bytes, status: Optional[int] = None) -> Any:
    """Parse a JSON response body.

    Args:
        text: Raw body
        status: HTTP status, recorded on the raised error

    Returns:
        Parsed JSON value

    Raises:
        QuayDecodeError: If the body is not valid JSON
    """
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise QuayDecodeError(f"Invalid JSON response: {e}", status=status) from e


def decode_api_error(result: RequestResult) -> QuayAPIError:
    """Turn an error response into a QuayAPIError.

    Raises:
        QuayDecodeError: If the body is not a JSON error payload
    """
    try:
        payload = ErrorPayload.from_dict(
            parse_json_response(result.data, result.status_code)
        )
    except QuayDecodeError as e:
        if e.status is None:
            e.status = result.status_code
        raise

    return QuayAPIError(
        status=result.status_code,
        message=payload.error_message or payload.detail or "",
        error_type=payload.error_type,
        detail=payload.detail,
    )
