from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying the operation's payload."""

    value: T


@dataclass(frozen=True, slots=True)
class NotFound:
    """The referenced record does not exist."""

    message: str = "Not found"


@dataclass(frozen=True, slots=True)
class Forbidden:
    """The caller lacks the required capability or ownership."""

    message: str = "Forbidden"


Result = Ok[T] | NotFound | Forbidden
