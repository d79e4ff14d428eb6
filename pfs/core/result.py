"""Result values returned by the portfolio store.

Store operations never raise for a missing entity. They return ``Ok`` with
the value or ``Err`` with the :class:`NotFoundError` describing what was
missing; callers that prefer exceptions use :meth:`unwrap`.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .errors import NotFoundError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: NotFoundError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err]
