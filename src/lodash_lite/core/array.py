"""Array helpers — slicing, scanning and reshaping ordered sequences.

Every function here returns a **new** list and leaves its input alone,
with three explicit exceptions that mutate by contract:

* :func:`fill` overwrites a range in place and returns the same object.
* :func:`pop_head` / :func:`pop_last` remove and return one element.

Out-of-range *access* returns :data:`~lodash_lite.core.models.ABSENT`;
out-of-contract *arguments* (negative counts, ``size <= 0``) raise
:class:`~lodash_lite.exceptions.InvalidArgumentError`.
"""

from __future__ import annotations

import itertools
import math
from collections.abc import MutableSequence, Sequence
from decimal import Decimal
from numbers import Number
from typing import Any, TypeVar

from lodash_lite.core.callbacks import Predicate, adapt
from lodash_lite.core.models import ABSENT, AbsentType
from lodash_lite.utils.validation import (
    require_int,
    require_mutable_sequence,
    require_sequence,
)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Reshaping
# ---------------------------------------------------------------------------

def chunk(seq: Sequence[T], size: int = 1) -> list[list[T]]:
    """Split *seq* into lists of *size* items; the last one holds the rest.

    >>> chunk(["a", "b", "c", "d"], 3)
    [['a', 'b', 'c'], ['d']]
    """
    require_sequence("seq", seq)
    require_int("size", size, minimum=1)
    return [list(seq[i:i + size]) for i in range(0, len(seq), size)]


def zip(*seqs: Sequence[Any]) -> list[list[Any]]:  # noqa: A001
    """Group the *i*-th element of every input into the *i*-th row.

    Inputs shorter than the longest are padded with ``ABSENT``.

    >>> zip(["a", "b"], [1, 2], [True, False])
    [['a', 1, True], ['b', 2, False]]
    """
    for position, seq in enumerate(seqs):
        require_sequence(f"seqs[{position}]", seq)
    return [
        list(row)
        for row in itertools.zip_longest(*seqs, fillvalue=ABSENT)
    ]


# ---------------------------------------------------------------------------
# Falsy filtering
# ---------------------------------------------------------------------------

def _is_nan(value: object) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def _is_blank(value: object) -> bool:
    """Return ``True`` for the values :func:`compact` removes.

    Exactly ``None``, ``ABSENT``, NaN and numeric zero.  Strings are never
    blank, not even ``""`` or ``"0"``.
    """
    if value is None or value is ABSENT:
        return True
    if isinstance(value, Number):
        return _is_nan(value) or value == 0
    return False


def compact(seq: Sequence[T]) -> list[T]:
    """Return *seq* without ``None``, ``ABSENT``, NaN and numeric zeros.

    >>> compact([1, None, float("nan"), 0, 2, "", 3])
    [1, 2, '', 3]
    """
    require_sequence("seq", seq)
    return [value for value in seq if not _is_blank(value)]


# ---------------------------------------------------------------------------
# Element access
# ---------------------------------------------------------------------------

def head(seq: Sequence[T]) -> T | AbsentType:
    """Return the first element of *seq*, or ``ABSENT`` when it is empty."""
    require_sequence("seq", seq)
    return seq[0] if seq else ABSENT


def last(seq: Sequence[T]) -> T | AbsentType:
    """Return the last element of *seq*, or ``ABSENT`` when it is empty."""
    require_sequence("seq", seq)
    return seq[-1] if seq else ABSENT


def pop_head(seq: MutableSequence[T]) -> T | AbsentType:
    """Remove and return the first element of *seq* (``ABSENT`` if empty)."""
    require_mutable_sequence("seq", seq)
    return seq.pop(0) if seq else ABSENT


def pop_last(seq: MutableSequence[T]) -> T | AbsentType:
    """Remove and return the last element of *seq* (``ABSENT`` if empty)."""
    require_mutable_sequence("seq", seq)
    return seq.pop() if seq else ABSENT


def nth(seq: Sequence[T], index: int = 0) -> T | AbsentType:
    """Return ``seq[index]``, or ``ABSENT`` when *index* is out of range.

    Negative indices count from the end, as with normal subscription.
    This departs from raw JavaScript array access, where ``arr[-1]`` is
    ``undefined``, and follows Lodash and Python instead.
    """
    require_sequence("seq", seq)
    require_int("index", index, minimum=None)
    if -len(seq) <= index < len(seq):
        return seq[index]
    return ABSENT


# ---------------------------------------------------------------------------
# Slicing
# ---------------------------------------------------------------------------

def initial(seq: Sequence[T]) -> list[T]:
    """Return every element of *seq* except the last."""
    require_sequence("seq", seq)
    return list(seq[:-1])


def drop(seq: Sequence[T], count: int = 1) -> list[T]:
    """Return *seq* without its first *count* elements."""
    require_sequence("seq", seq)
    require_int("count", count)
    return list(seq[count:])


def drop_right(seq: Sequence[T], count: int = 1) -> list[T]:
    """Return *seq* without its last *count* elements."""
    require_sequence("seq", seq)
    require_int("count", count)
    return list(seq[:max(len(seq) - count, 0)])


def drop_while(seq: Sequence[T], predicate: Predicate) -> list[T]:
    """Drop leading elements while ``predicate(value, index, seq)`` is truthy.

    >>> drop_while([1, 2, 3, 4, 5, 1], lambda value: value < 3)
    [3, 4, 5, 1]
    """
    require_sequence("seq", seq)
    call = adapt("predicate", predicate)
    for index, value in enumerate(seq):
        if not call(value, index, seq):
            return drop(seq, index)
    return []


def drop_right_while(seq: Sequence[T], predicate: Predicate) -> list[T]:
    """Drop trailing elements while ``predicate(value, index, seq)`` is truthy.

    The scan runs from the end; *index* is still the element's position
    in *seq*.

    >>> drop_right_while([5, 4, 3, 2, 1], lambda value: value < 3)
    [5, 4, 3]
    """
    require_sequence("seq", seq)
    call = adapt("predicate", predicate)
    for index in range(len(seq) - 1, -1, -1):
        if not call(seq[index], index, seq):
            return drop_right(seq, len(seq) - index - 1)
    return []


# ---------------------------------------------------------------------------
# In-place fill
# ---------------------------------------------------------------------------

def fill(
    seq: MutableSequence[Any],
    value: Any,
    start: int = 0,
    end: int | None = None,
) -> MutableSequence[Any]:
    """Overwrite ``seq[start:end]`` with *value* in place and return *seq*.

    Bounds past the end clamp to ``len(seq)``; ``start >= end`` changes
    nothing.

    >>> fill([4, 6, 8, 10], "*", 1, 3)
    [4, '*', '*', 10]
    """
    require_mutable_sequence("seq", seq)
    require_int("start", start)
    if end is None:
        end = len(seq)
    require_int("end", end)

    length = len(seq)
    for index in range(min(start, length), min(end, length)):
        seq[index] = value
    return seq


# ---------------------------------------------------------------------------
# Searching
# ---------------------------------------------------------------------------

def find_index(seq: Sequence[T], predicate: Predicate, start: int = 0) -> int:
    """Return the first index at or after *start* whose element matches.

    Scans forward once and stops at the first truthy
    ``predicate(value, index, seq)``; ``-1`` when nothing matches.

    >>> find_index([4, 6, 6, 8, 10], lambda value: value == 6, 2)
    2
    """
    require_sequence("seq", seq)
    require_int("start", start)
    call = adapt("predicate", predicate)
    for index in range(start, len(seq)):
        if call(seq[index], index, seq):
            return index
    return -1


def find_last_index(
    seq: Sequence[T],
    predicate: Predicate,
    start: int | None = None,
) -> int:
    """Return the last index at or before *start* whose element matches.

    Scans backward from *start* (default: the last index; larger values
    clamp to it) and stops at the first match; ``-1`` when nothing
    matches.

    >>> find_last_index([4, 6, 8, 6, 10], lambda value: value == 6)
    3
    """
    require_sequence("seq", seq)
    if start is None:
        start = len(seq) - 1
    else:
        require_int("start", start)
    call = adapt("predicate", predicate)
    for index in range(min(start, len(seq) - 1), -1, -1):
        if call(seq[index], index, seq):
            return index
    return -1
