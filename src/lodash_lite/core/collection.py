"""Collection helpers — one contract over sequences and mappings.

Each helper tags its input with :meth:`Collection.of` and then walks
:meth:`Collection.entries`, so the traversal is identical for both
shapes:

* sequences yield ``(index, value)``;
* mappings yield ``(key, value)`` over their own items.

Callbacks are called as ``(value, index_or_key, collection)``, and
reducers get the accumulator first. They receive only as many of those
arguments as they declare (see :mod:`lodash_lite.core.callbacks`).

Result shapes differ: :func:`filter` keeps the input's shape
(list → list, mapping → dict) while :func:`map` always returns a list.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeAlias

from lodash_lite.core.callbacks import Iteratee, Predicate, Reducer, adapt
from lodash_lite.core.models import ABSENT, Collection, CollectionKind

AnyCollection: TypeAlias = Sequence[Any] | Mapping[Any, Any]

_Entries: TypeAlias = Iterable[tuple[Any, Any]]

_FILTER_COLLECTORS: dict[CollectionKind, Callable[[_Entries], Any]] = {
    CollectionKind.SEQUENCE: lambda entries: [value for _, value in entries],
    CollectionKind.MAPPING: dict,
}


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def for_each(collection: AnyCollection, iteratee: Iteratee) -> None:
    """Call ``iteratee(value, index_or_key, collection)`` for every entry."""
    tagged = Collection.of(collection)
    call = adapt("iteratee", iteratee)
    for key, value in tagged.entries():
        call(value, key, collection)


def every(collection: AnyCollection, predicate: Predicate) -> bool:
    """Return ``True`` when *predicate* is truthy for every entry.

    Stops at the first falsy result.  Empty collections are vacuously
    ``True``.

    >>> every([True, 1, None, "yes"], bool)
    False
    """
    tagged = Collection.of(collection)
    call = adapt("predicate", predicate)
    for key, value in tagged.entries():
        if not call(value, key, collection):
            return False
    return True


# ---------------------------------------------------------------------------
# Selection and projection
# ---------------------------------------------------------------------------

def filter(  # noqa: A001
    collection: AnyCollection,
    predicate: Predicate,
) -> list[Any] | dict[Any, Any]:
    """Keep the entries for which *predicate* is truthy.

    A sequence yields a new list in the original order, duplicates
    included; a mapping yields a new dict of the surviving pairs.

    >>> filter({"a": 1, "b": 2, "c": 3}, lambda v, k: not (v == 2 and k == "b"))
    {'a': 1, 'c': 3}
    """
    tagged = Collection.of(collection)
    call = adapt("predicate", predicate)
    kept = (
        (key, value)
        for key, value in tagged.entries()
        if call(value, key, collection)
    )
    return _FILTER_COLLECTORS[tagged.kind](kept)


def map(collection: AnyCollection, iteratee: Iteratee) -> list[Any]:  # noqa: A001
    """Return the list of ``iteratee(value, index_or_key, collection)`` results.

    Mappings also produce a list, in key order.

    >>> map({"a": 1, "b": 2}, lambda value, key: [value, key])
    [[1, 'a'], [2, 'b']]
    """
    tagged = Collection.of(collection)
    call = adapt("iteratee", iteratee)
    return [call(value, key, collection) for key, value in tagged.entries()]


# ---------------------------------------------------------------------------
# Folding
# ---------------------------------------------------------------------------

def reduce(
    collection: AnyCollection,
    iteratee: Reducer,
    accumulator: Any = ABSENT,
) -> Any:
    """Fold *collection* left-to-right through *iteratee*.

    *iteratee* is called as ``(accumulator, value, index_or_key,
    collection)`` and its return value becomes the next accumulator.
    Without an *accumulator* the first entry's value seeds the fold; an
    empty collection then returns ``ABSENT``.

    >>> reduce([1, 2], lambda total, n: total + n, 0)
    3
    """
    tagged = Collection.of(collection)
    call = adapt("iteratee", iteratee, fallback=2)
    entries = tagged.entries()

    if accumulator is ABSENT:
        first = next(entries, None)
        if first is None:
            return ABSENT
        accumulator = first[1]

    for key, value in entries:
        accumulator = call(accumulator, value, key, collection)
    return accumulator
