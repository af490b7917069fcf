from __future__ import annotations
import functools
from typing import Any, Awaitable, Callable, Optional, TypeVar

import anyio

from .either import Either, Left, Right
from .errors import require
from .logger import ConsoleLogger, log_captured

R = TypeVar("R")


async def _capture(call: Callable[[], Awaitable[R]], checked: bool, op: str,
                   logger: Optional[ConsoleLogger]) -> Either[BaseException, R]:
    try:
        return Right(await call())
    except anyio.get_cancelled_exc_class():
        raise
    except BaseException as ex:
        if not checked and not isinstance(ex, Exception):
            raise
        log_captured(logger, op, ex)
        return Left(ex)


async def of_async(supplier: Callable[[], Awaitable[R]], *, logger: Optional[ConsoleLogger] = None) -> Either[Exception, R]:
    require(supplier, "supplier")
    return await _capture(supplier, False, "of_async", logger)  # type: ignore[return-value]


async def of_checked_async(supplier: Callable[[], Awaitable[R]], *, logger: Optional[ConsoleLogger] = None) -> Either[BaseException, R]:
    """Await ``supplier()`` capturing any failure except cancellation.

    The backend's cancellation exception is always re-raised, otherwise the
    surrounding task or cancel scope could never be cancelled.
    """
    require(supplier, "supplier")
    return await _capture(supplier, True, "of_checked_async", logger)


def lift_async(fn: Callable[..., Awaitable[R]], *, logger: Optional[ConsoleLogger] = None) -> Callable[..., Awaitable[Either[Exception, R]]]:
    require(fn, "fn")

    @functools.wraps(fn)
    async def lifted(*args: Any, **kwargs: Any) -> Either[Exception, R]:
        return await _capture(lambda: fn(*args, **kwargs), False, "lift_async", logger)  # type: ignore[return-value]
    return lifted


def lift_checked_async(fn: Callable[..., Awaitable[R]], *, logger: Optional[ConsoleLogger] = None) -> Callable[..., Awaitable[Either[BaseException, R]]]:
    require(fn, "fn")

    @functools.wraps(fn)
    async def lifted(*args: Any, **kwargs: Any) -> Either[BaseException, R]:
        return await _capture(lambda: fn(*args, **kwargs), True, "lift_checked_async", logger)
    return lifted
