"""Quay API async client implementation."""

import threading
from dataclasses import replace
from typing import Optional

import aiohttp

from ..models import Repository, RobotAccount
from ..operations.repositories import delete_repository as _delete_repository
from ..operations.repositories import list_repositories as _list_repositories
from ..operations.robots import delete_robot_account as _delete_robot_account
from ..operations.robots import list_robot_accounts as _list_robot_accounts
from .session import create_session
from .types import QuayConfig


class QuayClient:
    """Quay API async client for repository and robot account management.

    The session is either injected by the caller, in which case the client
    shares it and never closes it, or created on ``async with`` entry and
    closed on exit.
    """

    def __init__(
        self,
        quay_url: str,
        token: str,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: int = 30,
    ) -> None:
        """Initialize the Quay client.

        Args:
            quay_url: API base URL (e.g., https://quay.io/api/v1)
            token: OAuth bearer token
            session: Shared aiohttp session owned by the caller
            timeout: Request timeout in seconds for a client-created session
        """
        self._config = QuayConfig(url=quay_url, token=token, timeout=timeout)
        self._config_lock = threading.Lock()
        self.session = session
        self._owns_session = False

    async def __aenter__(self) -> "QuayClient":
        """Enter async context manager."""
        if self.session is None:
            self.session = await create_session(self.config.timeout)
            self._owns_session = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()
        if self._owns_session:
            self.session = None
            self._owns_session = False

    @property
    def config(self) -> QuayConfig:
        """Snapshot of the current configuration."""
        with self._config_lock:
            return self._config

    @property
    def token(self) -> str:
        """Bearer token sent with the next request."""
        return self.config.token

    def rotate_token(self, token: str) -> None:
        """Replace the bearer token used by subsequent requests.

        Requests already in flight keep the token they started with.
        """
        with self._config_lock:
            self._config = replace(self._config, token=token)

    def _require_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            raise RuntimeError(
                "QuayClient has no session; pass one or use 'async with QuayClient(...)'"
            )
        return self.session

    async def delete_repository(self, organization: str, repository: str) -> bool:
        """Delete an image repository.

        Args:
            organization: Organization owning the repository
            repository: Repository name

        Returns:
            True if deleted, False if the repository did not exist

        Raises:
            QuayConnectionError: If the request could not be sent
            QuayAPIError: If Quay rejected the request
            QuayDecodeError: If the error body could not be decoded
        """
        return await _delete_repository(
            self._require_session(), self.config, organization, repository
        )

    async def delete_robot_account(self, organization: str, robot_name: str) -> bool:
        """Delete a robot account.

        Args:
            organization: Organization owning the robot
            robot_name: Robot short name

        Returns:
            True if deleted, False if the robot did not exist

        Raises:
            QuayConnectionError: If the request could not be sent
            QuayAPIError: If Quay rejected the request
            QuayDecodeError: If the error body could not be decoded
        """
        return await _delete_robot_account(
            self._require_session(), self.config, organization, robot_name
        )

    async def list_repositories(self, organization: str) -> list[Repository]:
        """List all repositories of an organization.

        Raises:
            QuayConnectionError: If the request could not be sent
            QuayAPIError: If Quay answered with a status other than 200
            QuayDecodeError: If a body could not be decoded
        """
        return await _list_repositories(
            self._require_session(), self.config, organization
        )

    async def list_robot_accounts(self, organization: str) -> list[RobotAccount]:
        """List all robot accounts of an organization.

        Raises:
            QuayConnectionError: If the request could not be sent
            QuayAPIError: If Quay answered with a status other than 200
            QuayDecodeError: If a body could not be decoded
        """
        return await _list_robot_accounts(
            self._require_session(), self.config, organization
        )
