"""Repository operations."""

import logging

import aiohttp

from ..core.session import (
    build_url,
    decode_api_error,
    execute_request,
    parse_json_response,
)
from ..core.types import QuayConfig
from ..models import Repository, parse_repository_list

logger = logging.getLogger(__name__)


async def delete_repository(
    session: aiohttp.ClientSession,
    config: QuayConfig,
    organization: str,
    repository: str,
) -> bool:
    """Delete an image repository.

    Args:
        session: Client session
        config: Quay configuration
        organization: Organization (namespace) owning the repository
        repository: Repository name

    Returns:
        True if the repository was deleted, False if it did not exist

    Raises:
        QuayConnectionError: If the request could not be sent
        QuayAPIError: If Quay rejected the request
        QuayDecodeError: If the error body could not be decoded
    """
    url = build_url(config, "repository", organization, repository)
    result = await execute_request(session, config, "DELETE", url)

    if result.status_code == 204:
        return True
    if result.status_code == 404:
        logger.info("Repository %s/%s already absent", organization, repository)
        return False

    raise decode_api_error(result)


async def list_repositories(
    session: aiohttp.ClientSession, config: QuayConfig, organization: str
) -> list[Repository]:
    """List all repositories of an organization.

    Args:
        session: Client session
        config: Quay configuration
        organization: Organization (namespace) to list

    Returns:
        Repositories in the order Quay returned them

    Raises:
        QuayConnectionError: If the request could not be sent
        QuayAPIError: If Quay answered with a status other than 200
        QuayDecodeError: If a body could not be decoded
    """
    url = build_url(config, "repository")
    params = {"last_modified": "true", "namespace": organization}
    result = await execute_request(session, config, "GET", url, params=params)

    if result.status_code != 200:
        logger.warning(
            "error getting repositories of %s, got status code %d",
            organization,
            result.status_code,
        )
        raise decode_api_error(result)

    return parse_repository_list(
        parse_json_response(result.data, result.status_code)
    )
