"""Typed schemas for Quay API payloads."""

from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import QuayDecodeError

_MISSING = object()


def _get(
    data: dict[str, Any],
    key: str,
    expected: type | tuple[type, ...],
    default: Any = _MISSING,
    kind: str = "payload",
) -> Any:
    """Fetch a field and check its type.

    ``None`` is accepted for optional fields (those with a default).

    Raises:
        QuayDecodeError: If a required field is missing or a field has the wrong type
    """
    value = data.get(key, _MISSING)
    if value is _MISSING or value is None:
        if default is _MISSING:
            raise QuayDecodeError(f"{kind} is missing required field '{key}'")
        return default

    # bool is a subclass of int
    if isinstance(value, bool) and bool not in _as_tuple(expected):
        raise QuayDecodeError(f"{kind} field '{key}' has invalid type bool")
    if not isinstance(value, expected):
        raise QuayDecodeError(
            f"{kind} field '{key}' has invalid type {type(value).__name__}"
        )
    return value


def _as_tuple(expected: type | tuple[type, ...]) -> tuple[type, ...]:
    return expected if isinstance(expected, tuple) else (expected,)


def _require_object(data: Any, kind: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise QuayDecodeError(f"{kind} must be a JSON object")
    return data


@dataclass(frozen=True)
class Repository:
    """A container image repository."""

    name: str
    namespace: str = ""
    description: Optional[str] = None
    is_public: bool = False
    kind: str = ""
    state: str = ""
    last_modified: Optional[int] = None
    is_starred: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Repository":
        """Build a Repository from one entry of the ``repositories`` array.

        Raises:
            QuayDecodeError: If the entry does not match the schema
        """
        kind = "repository"
        data = _require_object(data, kind)
        return cls(
            name=_get(data, "name", str, kind=kind),
            namespace=_get(data, "namespace", str, "", kind),
            description=_get(data, "description", str, None, kind),
            is_public=_get(data, "is_public", bool, False, kind),
            kind=_get(data, "kind", str, "", kind),
            state=_get(data, "state", str, "", kind),
            last_modified=_get(data, "last_modified", int, None, kind),
            is_starred=_get(data, "is_starred", bool, False, kind),
        )

    @property
    def full_name(self) -> str:
        """``namespace/name``, or just the name when the namespace is unknown."""
        return f"{self.namespace}/{self.name}" if self.namespace else self.name


@dataclass(frozen=True)
class RobotAccount:
    """A robot (service identity) scoped to an organization."""

    name: str
    description: str = ""
    created: Optional[str] = None
    last_accessed: Optional[str] = None
    token: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "RobotAccount":
        """Build a RobotAccount from one entry of the ``robots`` array.

        Raises:
            QuayDecodeError: If the entry does not match the schema
        """
        kind = "robot account"
        data = _require_object(data, kind)
        return cls(
            name=_get(data, "name", str, kind=kind),
            description=_get(data, "description", str, "", kind),
            created=_get(data, "created", str, None, kind),
            last_accessed=_get(data, "last_accessed", str, None, kind),
            token=_get(data, "token", str, None, kind),
        )

    @property
    def short_name(self) -> str:
        """Robot name without the ``organization+`` prefix."""
        return self.name.split("+", 1)[-1]

    def __repr__(self) -> str:
        # Keep robot tokens out of logs and tracebacks
        return (
            f"RobotAccount(name={self.name!r}, description={self.description!r}, "
            f"created={self.created!r}, last_accessed={self.last_accessed!r})"
        )


@dataclass(frozen=True)
class ErrorPayload:
    """Error body returned by Quay for failed requests."""

    error_message: str = ""
    error_type: Optional[str] = None
    title: Optional[str] = None
    detail: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "ErrorPayload":
        kind = "error payload"
        data = _require_object(data, kind)
        return cls(
            error_message=_get(data, "error_message", str, "", kind),
            error_type=_get(data, "error_type", str, None, kind),
            title=_get(data, "title", str, None, kind),
            detail=_get(data, "detail", str, None, kind),
        )


def parse_repository_list(data: Any) -> list[Repository]:
    """Decode the body of ``GET /repository``.

    Args:
        data: Parsed JSON body

    Returns:
        Repositories in server order

    Raises:
        QuayDecodeError: If the body does not match the schema
    """
    data = _require_object(data, "repository list")
    entries = _get(data, "repositories", list, kind="repository list")
    return [Repository.from_dict(entry) for entry in entries]


def parse_robot_list(data: Any) -> list[RobotAccount]:
    """Decode the body of ``GET /organization/{organization}/robots``.

    Args:
        data: Parsed JSON body

    Returns:
        Robot accounts in server order

    Raises:
        QuayDecodeError: If the body does not match the schema
    """
    data = _require_object(data, "robot list")
    entries = _get(data, "robots", list, kind="robot list")
    return [RobotAccount.from_dict(entry) for entry in entries]
