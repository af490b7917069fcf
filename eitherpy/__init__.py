from .errors import EitherError, InvalidArgument, NoSuchElement, TypeMismatch
from .option import Option, Some, NONE, from_nullable
from .either import (
    Either,
    Left,
    Right,
    left,
    right,
    of,
    of_checked,
    from_option,
    from_option_else,
    lift,
    lift_checked,
)
from .eithers import (
    Partition,
    comparator,
    nullable_comparator,
    sort_key,
    nullable_sort_key,
    partition,
    partition_into,
    partition_update,
)
from .aio import of_async, of_checked_async, lift_async, lift_checked_async
from .logger import ConsoleLogger
