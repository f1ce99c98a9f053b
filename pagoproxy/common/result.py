"""Two-variant result returned by every converter.

Callers branch on `is_success()` and, on failure, on `error` (a
`ControllerError`), never on exceptions.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from pagoproxy.common.errors import ControllerError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: ControllerError

    def is_success(self) -> bool:
        return False


Result = Union[Success[T], Failure]
