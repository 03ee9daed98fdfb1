"""Tagged result type returned by application services.

Services report recoverable failures as values instead of raising, so the
presentation layer can map them to HTTP responses in one place.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Category of a service failure."""

    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    PERSISTENCE = "persistence"


@dataclass(frozen=True)
class ServiceError:
    """Structured failure: a kind, a human-readable message and optional field errors."""

    kind: ErrorKind
    message: str
    details: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    error: ServiceError

    @classmethod
    def of(
        cls,
        kind: ErrorKind,
        message: str,
        details: list[dict[str, Any]] | None = None,
    ) -> "Failure":
        return cls(ServiceError(kind=kind, message=message, details=details or []))


Result = Union[Success[T], Failure]
