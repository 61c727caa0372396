"""
Result values for awaitables whose failure should be returned, not raised.

`capture` awaits once and converts any ``Exception`` into ``Err``. Both
variants unpack as a two-element tuple so callers may write::

    value, error = await capture(client.get("/ping"))
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Generic, Iterator, TypeVar, Union

from esewa_gateway.core.logging_config import get_logger


logger = get_logger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def error(self) -> None:
        return None

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield None


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def value(self) -> None:
        return None

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """Re-raise the captured error."""
        raise self.error

    def __iter__(self) -> Iterator[Any]:
        yield None
        yield self.error


Result = Union[Ok[T], Err[E]]


async def capture(awaitable: Awaitable[T]) -> Result[T, Exception]:
    """Await ``awaitable`` and return ``Ok(value)`` or ``Err(exc)``.

    Errors are logged here and never propagate. Cancellation is not an
    ``Exception`` and still propagates.
    """
    try:
        value = await awaitable
    except Exception as exc:
        logger.error(
            "awaitable_failed",
            error=str(exc),
            error_type=type(exc).__name__,
            exc_info=True,
        )
        return Err(exc)
    return Ok(value)


__all__ = ["Ok", "Err", "Result", "capture"]
