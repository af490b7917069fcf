from __future__ import annotations
import functools
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, Tuple, Type, TypeVar, Union

from .errors import InvalidArgument, NoSuchElement, TypeMismatch, require
from .logger import ConsoleLogger, log_captured
from .option import Option, Some, NONE

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")
U = TypeVar("U")

ClassInfo = Union[Type[Any], Tuple[Type[Any], ...]]


def _instance_of(value: Any, as_type: ClassInfo, op: str) -> Any:
    require(as_type, "as_type")
    try:
        ok = isinstance(value, as_type)
    except TypeError as ex:
        raise InvalidArgument(f"{op}: as_type must be a class or a tuple of classes, got {as_type!r}") from ex
    if not ok:
        raise TypeMismatch(f"{op}: {type(value).__name__} is not an instance of {as_type!r}")
    return value


def _as_either(result: Any, op: str) -> "Either[Any, Any]":
    if result is None:
        raise InvalidArgument(f"{op}: function returned None")
    if not isinstance(result, Either):
        raise TypeMismatch(f"{op}: function must return an Either, got {type(result).__name__}")
    return result


def _exception_from(supplier: Optional[Callable[[], BaseException]]) -> BaseException:
    require(supplier, "supplier")
    ex = supplier()  # type: ignore[misc]
    if ex is None:
        raise InvalidArgument("supplier returned None instead of an exception")
    if not isinstance(ex, BaseException):
        raise InvalidArgument(f"supplier must return an exception, got {type(ex).__name__}")
    return ex


class Either(Generic[L, R]):
    """A value that is exactly one of ``Left(L)`` or ``Right(R)``, never None.

    By convention Right holds the successful value and Left the alternative.
    Instances are immutable; every combinator returns a new Either or a plain value.
    """

    value: Any

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgument(f"{type(self).__name__} cannot hold None")

    @staticmethod
    def right(value: R) -> "Either[Any, R]": return right(value)

    @staticmethod
    def left(value: L) -> "Either[L, Any]": return left(value)

    @staticmethod
    def of(supplier: Callable[[], R], *, logger: Optional[ConsoleLogger] = None) -> "Either[Exception, R]":
        return of(supplier, logger=logger)

    @staticmethod
    def of_checked(supplier: Callable[[], R], *, logger: Optional[ConsoleLogger] = None) -> "Either[BaseException, R]":
        return of_checked(supplier, logger=logger)

    @staticmethod
    def from_option(option: Option[R], fallback: L) -> "Either[L, R]":
        return from_option(option, fallback)

    @staticmethod
    def from_option_else(option: Option[R], supplier: Callable[[], L]) -> "Either[L, R]":
        return from_option_else(option, supplier)

    @staticmethod
    def lift(fn: Callable[..., R], *, logger: Optional[ConsoleLogger] = None) -> Callable[..., "Either[Exception, R]"]:
        return lift(fn, logger=logger)

    @staticmethod
    def lift_checked(fn: Callable[..., R], *, logger: Optional[ConsoleLogger] = None) -> Callable[..., "Either[BaseException, R]"]:
        return lift_checked(fn, logger=logger)

    def is_right(self) -> bool: raise NotImplementedError
    def is_left(self) -> bool: return not self.is_right()

    def get_right(self) -> R:
        if self.is_right():
            return self.value
        raise NoSuchElement("Either does not hold a right value")

    def get_left(self) -> L:
        if self.is_left():
            return self.value
        raise NoSuchElement("Either does not hold a left value")

    def get_right_or(self, fallback: R) -> R:
        return self.value if self.is_right() else fallback

    def get_left_or(self, fallback: L) -> L:
        return self.value if self.is_left() else fallback

    def get_right_or_else(self, supplier: Callable[[], R]) -> R:
        if self.is_right():
            return self.value
        require(supplier, "supplier")
        return supplier()

    def get_left_or_else(self, supplier: Callable[[], L]) -> L:
        if self.is_left():
            return self.value
        require(supplier, "supplier")
        return supplier()

    def get_right_or_raise(self, supplier: Callable[[], BaseException]) -> R:
        """Return the right value, or raise the exception ``supplier()`` builds."""
        if self.is_right():
            return self.value
        raise _exception_from(supplier)

    def get_left_or_raise(self, supplier: Callable[[], BaseException]) -> L:
        if self.is_left():
            return self.value
        raise _exception_from(supplier)

    def maybe_right(self) -> Option[R]:
        return Some(self.value) if self.is_right() else NONE  # type: ignore[return-value]

    def maybe_left(self) -> Option[L]:
        return Some(self.value) if self.is_left() else NONE  # type: ignore[return-value]

    def map_right(self, fn: Callable[[R], T]) -> "Either[L, T]":
        if self.is_left():
            return self  # type: ignore[return-value]
        require(fn, "fn")
        return Right(fn(self.value))

    def map_left(self, fn: Callable[[L], T]) -> "Either[T, R]":
        if self.is_right():
            return self  # type: ignore[return-value]
        require(fn, "fn")
        return Left(fn(self.value))

    def flat_map_right(self, fn: Callable[[R], "Either[L, T]"]) -> "Either[L, T]":
        if self.is_left():
            return self  # type: ignore[return-value]
        require(fn, "fn")
        return _as_either(fn(self.value), "flat_map_right")

    def flat_map_left(self, fn: Callable[[L], "Either[T, R]"]) -> "Either[T, R]":
        if self.is_right():
            return self  # type: ignore[return-value]
        require(fn, "fn")
        return _as_either(fn(self.value), "flat_map_left")

    def apply_right(self, fn_either: "Either[L, Callable[[R], T]]") -> "Either[L, T]":
        """Apply a function held in a Right to this Either's right value.

        A Left ``fn_either`` is returned as is, even when this Either is also
        a Left. Otherwise a Left receiver is returned unchanged.
        """
        fn_either = _as_either(fn_either, "apply_right")
        if fn_either.is_left():
            return fn_either  # type: ignore[return-value]
        if self.is_left():
            return self  # type: ignore[return-value]
        return Right(fn_either.value(self.value))

    def apply_left(self, fn_either: "Either[Callable[[L], T], R]") -> "Either[T, R]":
        """Mirror of :meth:`apply_right`: a Right ``fn_either`` always wins."""
        fn_either = _as_either(fn_either, "apply_left")
        if fn_either.is_right():
            return fn_either  # type: ignore[return-value]
        if self.is_right():
            return self  # type: ignore[return-value]
        return Left(fn_either.value(self.value))

    def fold(self, left_fn: Callable[[L], T], right_fn: Callable[[R], T]) -> T:
        if self.is_right():
            require(right_fn, "right_fn")
            return right_fn(self.value)
        require(left_fn, "left_fn")
        return left_fn(self.value)

    def fold_unified(self, fn: Callable[[T], U], as_type: ClassInfo = object) -> U:
        """Apply ``fn`` to the held value whichever side holds it.

        ``as_type`` names the common supertype ``fn`` accepts; a held value that
        is not an instance of it raises TypeMismatch before ``fn`` runs.
        """
        require(fn, "fn")
        return fn(_instance_of(self.value, as_type, "fold_unified"))

    def fold_cast(self, target_type: ClassInfo) -> Any:
        require(target_type, "target_type")
        return _instance_of(self.value, target_type, "fold_cast")

    def map(self, fn: Callable[[T], U], as_type: ClassInfo = object) -> "Either[U, U]":
        require(fn, "fn")
        result = fn(_instance_of(self.value, as_type, "map"))
        return Right(result) if self.is_right() else Left(result)

    def consume_right(self, action: Callable[[R], Any]) -> None:
        if self.is_right():
            require(action, "action")
            action(self.value)

    def consume_left(self, action: Callable[[L], Any]) -> None:
        if self.is_left():
            require(action, "action")
            action(self.value)

    def consume(self, left_action: Callable[[L], Any], right_action: Callable[[R], Any]) -> None:
        if self.is_right():
            require(right_action, "right_action")
            right_action(self.value)
        else:
            require(left_action, "left_action")
            left_action(self.value)

    def consume_unified(self, action: Callable[[T], Any], as_type: ClassInfo = object) -> None:
        require(action, "action")
        action(_instance_of(self.value, as_type, "consume_unified"))

    def stream_right(self) -> Iterator[R]:
        if self.is_right():
            yield self.value

    def stream_left(self) -> Iterator[L]:
        if self.is_left():
            yield self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self.is_right() == other.is_right() and self.value == other.value

    def __hash__(self) -> int:
        left_hash = hash(self.value) if self.is_left() else 0
        right_hash = hash(self.value) if self.is_right() else 0
        return 31 * (31 * 1 + left_hash) + right_hash

    def __str__(self) -> str:
        return f"Either.{'Right' if self.is_right() else 'Left'}[{self.value}]"

    def __repr__(self) -> str:
        return f"{'Right' if self.is_right() else 'Left'}({self.value!r})"


@dataclass(frozen=True, eq=False, repr=False)
class Left(Either[L, R]):
    value: L
    def is_right(self) -> bool: return False


@dataclass(frozen=True, eq=False, repr=False)
class Right(Either[L, R]):
    value: R
    def is_right(self) -> bool: return True


def right(value: R) -> Either[Any, R]:
    return Right(value)


def left(value: L) -> Either[L, Any]:
    return Left(value)


def _capture(call: Callable[[], R], checked: bool, op: str,
             logger: Optional[ConsoleLogger]) -> Either[BaseException, R]:
    catch = BaseException if checked else Exception
    try:
        return Right(call())
    except catch as ex:
        log_captured(logger, op, ex)
        return Left(ex)


def of(supplier: Callable[[], R], *, logger: Optional[ConsoleLogger] = None) -> Either[Exception, R]:
    """Run ``supplier`` and capture any ``Exception`` it raises as a Left.

    A ``None`` result is captured too, as InvalidArgument. Exceptions outside
    ``Exception`` (KeyboardInterrupt, SystemExit, ...) propagate.
    """
    require(supplier, "supplier")
    return _capture(supplier, False, "of", logger)  # type: ignore[return-value]


def of_checked(supplier: Callable[[], R], *, logger: Optional[ConsoleLogger] = None) -> Either[BaseException, R]:
    require(supplier, "supplier")
    return _capture(supplier, True, "of_checked", logger)


def from_option(option: Option[R], fallback: L) -> Either[L, R]:
    require(option, "option")
    if not isinstance(option, Option):
        raise TypeMismatch(f"expected an Option, got {type(option).__name__}")
    if option.is_some():
        return Right(option.get())
    require(fallback, "fallback")
    return Left(fallback)


def from_option_else(option: Option[R], supplier: Callable[[], L]) -> Either[L, R]:
    require(option, "option")
    if not isinstance(option, Option):
        raise TypeMismatch(f"expected an Option, got {type(option).__name__}")
    if option.is_some():
        return Right(option.get())
    require(supplier, "supplier")
    fallback = supplier()
    require(fallback, "supplier result")
    return Left(fallback)


def lift(fn: Callable[..., R], *, logger: Optional[ConsoleLogger] = None) -> Callable[..., Either[Exception, R]]:
    require(fn, "fn")

    @functools.wraps(fn)
    def lifted(*args: Any, **kwargs: Any) -> Either[Exception, R]:
        return _capture(lambda: fn(*args, **kwargs), False, "lift", logger)  # type: ignore[return-value]
    return lifted


def lift_checked(fn: Callable[..., R], *, logger: Optional[ConsoleLogger] = None) -> Callable[..., Either[BaseException, R]]:
    require(fn, "fn")

    @functools.wraps(fn)
    def lifted(*args: Any, **kwargs: Any) -> Either[BaseException, R]:
        return _capture(lambda: fn(*args, **kwargs), True, "lift_checked", logger)
    return lifted
