"""Robot account operations."""

import logging

import aiohttp

from ..core.session import (
    build_url,
    decode_api_error,
    execute_request,
    parse_json_response,
)
from ..core.types import QuayConfig
from ..models import RobotAccount, parse_robot_list

logger = logging.getLogger(__name__)


async def delete_robot_account(
    session: aiohttp.ClientSession,
    config: QuayConfig,
    organization: str,
    robot_name: str,
) -> bool:
    """Delete a robot account of an organization.

    Args:
        session: Client session
        config: Quay configuration
        organization: Organization owning the robot
        robot_name: Robot short name (without the ``organization+`` prefix)

    Returns:
        True if the robot was deleted, False if it did not exist

    Raises:
        QuayConnectionError: If the request could not be sent
        QuayAPIError: If Quay rejected the request
        QuayDecodeError: If the error body could not be decoded
    """
    url = build_url(config, "organization", organization, "robots", robot_name)
    result = await execute_request(session, config, "DELETE", url)

    if result.status_code == 204:
        return True
    if result.status_code == 404:
        logger.info("Robot account %s+%s already absent", organization, robot_name)
        return False

    raise decode_api_error(result)


async def list_robot_accounts(
    session: aiohttp.ClientSession, config: QuayConfig, organization: str
) -> list[RobotAccount]:
    """List all robot accounts of an organization.

    Raises:
        QuayConnectionError: If the request could not be sent
        QuayAPIError: If Quay answered with a status other than 200
        QuayDecodeError: If a body could not be decoded
    """
    url = build_url(config, "organization", organization, "robots")
    result = await execute_request(session, config, "GET", url)

    if result.status_code != 200:
        logger.warning(
            "error getting robot accounts of %s, got status code %d",
            organization,
            result.status_code,
        )
        raise decode_api_error(result)

    return parse_robot_list(parse_json_response(result.data, result.status_code))
