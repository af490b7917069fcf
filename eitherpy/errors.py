from __future__ import annotations


class EitherError(Exception):
    """Base class for contract violations raised by eitherpy."""


class InvalidArgument(EitherError, ValueError):
    """A required argument, or a value a callback produced, was None."""


class NoSuchElement(EitherError, LookupError):
    """The requested side is not the one the Either holds."""


class TypeMismatch(EitherError, TypeError):
    """A held value or callback result is not of the expected type."""


def require(value: object, what: str) -> None:
    if value is None:
        raise InvalidArgument(f"{what} must not be None")
