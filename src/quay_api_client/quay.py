"""Async functional Quay operations."""

from .core.session import create_session
from .core.types import QuayConfig
from .models import Repository, RobotAccount
from .operations.repositories import delete_repository as _delete_repository
from .operations.repositories import list_repositories as _list_repositories
from .operations.robots import delete_robot_account as _delete_robot_account
from .operations.robots import list_robot_accounts as _list_robot_accounts


async def delete_repository(
    quay_url: str, token: str, organization: str, repository: str, timeout: int = 10
) -> bool:
    """조직의 이미지 저장소를 삭제합니다.

    Args:
        quay_url: Quay API URL (예: "https://quay.io/api/v1")
        token: OAuth Bearer 토큰
        organization: 조직 이름 (예: "mycompany")
        repository: 저장소 이름 (예: "myapp")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        bool: 삭제된 경우 True, 저장소가 이미 없는 경우 False

    Raises:
        QuayConnectionError: 요청을 보낼 수 없는 경우
        QuayAPIError: Quay가 요청을 거부한 경우
        QuayDecodeError: 오류 응답을 해석할 수 없는 경우

    Examples:
        # 저장소 삭제 (여러 번 호출해도 안전)
        deleted = await delete_repository(
            "https://quay.io/api/v1", token, "mycompany", "myapp"
        )
        if not deleted:
            print("이미 삭제된 저장소입니다")
    """
    config = QuayConfig(url=quay_url, token=token, timeout=timeout)
    async with await create_session(timeout) as session:
        return await _delete_repository(session, config, organization, repository)


async def delete_robot_account(
    quay_url: str, token: str, organization: str, robot_name: str, timeout: int = 10
) -> bool:
    """조직의 로봇 계정을 삭제합니다.

    Args:
        quay_url: Quay API URL (예: "https://quay.io/api/v1")
        token: OAuth Bearer 토큰
        organization: 조직 이름 (예: "mycompany")
        robot_name: 로봇 이름, "조직+" 접두사 제외 (예: "builder")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        bool: 삭제된 경우 True, 로봇 계정이 이미 없는 경우 False

    Raises:
        QuayConnectionError: 요청을 보낼 수 없는 경우
        QuayAPIError: Quay가 요청을 거부한 경우
        QuayDecodeError: 오류 응답을 해석할 수 없는 경우
    """
    config = QuayConfig(url=quay_url, token=token, timeout=timeout)
    async with await create_session(timeout) as session:
        return await _delete_robot_account(session, config, organization, robot_name)


async def list_repositories(
    quay_url: str, token: str, organization: str, timeout: int = 10
) -> list[Repository]:
    """조직의 모든 저장소 목록을 조회합니다.

    Args:
        quay_url: Quay API URL (예: "https://quay.io/api/v1")
        token: OAuth Bearer 토큰
        organization: 조직 이름 (예: "mycompany")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        list[Repository]: 저장소 목록 (Quay가 반환한 순서 유지)

    Raises:
        QuayConnectionError: 요청을 보낼 수 없는 경우
        QuayAPIError: 응답 상태 코드가 200이 아닌 경우
        QuayDecodeError: 응답을 해석할 수 없는 경우

    Examples:
        repos = await list_repositories("https://quay.io/api/v1", token, "mycompany")
        for repo in repos:
            print(f"{repo.full_name} (마지막 수정: {repo.last_modified})")
    """
    config = QuayConfig(url=quay_url, token=token, timeout=timeout)
    async with await create_session(timeout) as session:
        return await _list_repositories(session, config, organization)


async def list_robot_accounts(
    quay_url: str, token: str, organization: str, timeout: int = 10
) -> list[RobotAccount]:
    """조직의 모든 로봇 계정 목록을 조회합니다.

    Args:
        quay_url: Quay API URL (예: "https://quay.io/api/v1")
        token: OAuth Bearer 토큰
        organization: 조직 이름 (예: "mycompany")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        list[RobotAccount]: 로봇 계정 목록

    Raises:
        QuayConnectionError: 요청을 보낼 수 없는 경우
        QuayAPIError: 응답 상태 코드가 200이 아닌 경우
        QuayDecodeError: 응답을 해석할 수 없는 경우
    """
    config = QuayConfig(url=quay_url, token=token, timeout=timeout)
    async with await create_session(timeout) as session:
        return await _list_robot_accounts(session, config, organization)
