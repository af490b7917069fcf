"""Ordering and partitioning helpers for collections of :class:`Either` values.

Comparators follow the ``cmp(a, b) -> int`` protocol so they plug into
``functools.cmp_to_key``; :func:`sort_key` does that wrapping for you::

    sorted(items, key=sort_key())                       # Lefts, then Rights
    sorted(items, key=sort_key(reverse_direction=True)) # Rights, then Lefts
"""
from __future__ import annotations
import functools
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, List, MutableSequence, Optional, TypeVar

from .either import Either
from .errors import require

L = TypeVar("L")
R = TypeVar("R")

Comparator = Callable[[Optional[Either[Any, Any]], Optional[Either[Any, Any]]], int]


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def comparator(reverse_contents: bool = False, reverse_direction: bool = False) -> Comparator:
    dir_mult = -1 if reverse_direction else 1
    val_mult = -1 if reverse_contents else 1

    def compare(first: Optional[Either[Any, Any]], second: Optional[Either[Any, Any]]) -> int:
        require(first, "first")
        require(second, "second")
        if first.is_right() != second.is_right():  # type: ignore[union-attr]
            return dir_mult * (1 if first.is_right() else -1)  # type: ignore[union-attr]
        return val_mult * _cmp(first.value, second.value)  # type: ignore[union-attr]

    return compare


def nullable_comparator(reverse_contents: bool = False, reverse_direction: bool = False) -> Comparator:
    non_null = comparator(reverse_contents, reverse_direction)

    def compare(first: Optional[Either[Any, Any]], second: Optional[Either[Any, Any]]) -> int:
        if first is None or second is None:
            if first is second:
                return 0
            # None ranks below Left, so it moves to the end along with Left
            return -1 if (second if reverse_direction else first) is None else 1
        return non_null(first, second)

    return compare


def sort_key(reverse_contents: bool = False, reverse_direction: bool = False) -> Callable[[Any], Any]:
    return functools.cmp_to_key(comparator(reverse_contents, reverse_direction))


def nullable_sort_key(reverse_contents: bool = False, reverse_direction: bool = False) -> Callable[[Any], Any]:
    return functools.cmp_to_key(nullable_comparator(reverse_contents, reverse_direction))


@dataclass
class Partition(Generic[L, R]):
    lefts: List[L] = field(default_factory=list)
    rights: List[R] = field(default_factory=list)
    missing: int = 0

    @property
    def total(self) -> int:
        return len(self.lefts) + len(self.rights) + self.missing


def partition(eithers: Optional[Iterable[Optional[Either[L, R]]]]) -> Partition[L, R]:
    res: Partition[L, R] = Partition()
    if eithers is not None:
        res.missing = partition_into(eithers, res.lefts, res.rights)
    return res


def partition_into(eithers: Optional[Iterable[Optional[Either[L, R]]]],
                   lefts: MutableSequence[L], rights: MutableSequence[R]) -> int:
    """Append left and right values to ``lefts``/``rights``; return the None count.

    Values are appended as they are encountered. If a target's ``append``
    raises, the error propagates and earlier appends are kept.
    """
    if eithers is None:
        return 0
    require(lefts, "lefts")
    require(rights, "rights")
    missing = 0
    for either in eithers:
        if either is None:
            missing += 1
        elif either.is_right():
            rights.append(either.value)
        else:
            lefts.append(either.value)
    return missing


def partition_update(eithers: Optional[Iterable[Optional[Either[L, R]]]],
                     partition: Optional[Partition[L, R]]) -> None:
    if eithers is None:
        return
    require(partition, "partition")
    partition.missing += partition_into(eithers, partition.lefts, partition.rights)  # type: ignore[union-attr]
