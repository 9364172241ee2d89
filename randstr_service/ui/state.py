"""UI state representing the current state of a random string generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from ..data.entities import RandomStringData

__all__ = ["Idle", "Loading", "Success", "Error", "GenerationState"]


@dataclass(frozen=True)
class Idle:
    status: ClassVar[str] = "idle"


@dataclass(frozen=True)
class Loading:
    status: ClassVar[str] = "loading"


@dataclass(frozen=True)
class Success:
    random_string: RandomStringData
    status: ClassVar[str] = "success"


@dataclass(frozen=True)
class Error:
    message: str
    status: ClassVar[str] = "error"


GenerationState = Union[Idle, Loading, Success, Error]
