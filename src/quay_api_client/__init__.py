"""Quay API Client - Async Python client for the Quay registry management API."""

__version__ = "0.1.0"

from .core.client import QuayClient
from .core.types import QuayConfig
from .exceptions import QuayAPIError, QuayConnectionError, QuayDecodeError, QuayError
from .models import Repository, RobotAccount
from .quay import (
    delete_repository,
    delete_robot_account,
    list_repositories,
    list_robot_accounts,
)

__all__ = [
    "QuayClient",
    "QuayConfig",
    "Repository",
    "RobotAccount",
    "QuayError",
    "QuayAPIError",
    "QuayConnectionError",
    "QuayDecodeError",
    "delete_repository",
    "delete_robot_account",
    "list_repositories",
    "list_robot_accounts",
]
