"""Core layer — the array and collection helpers and their models.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Only :func:`~lodash_lite.core.array.fill`,
  :func:`~lodash_lite.core.array.pop_head` and
  :func:`~lodash_lite.core.array.pop_last` mutate their input.
"""

from lodash_lite.core.array import (
    chunk,
    compact,
    drop,
    drop_right,
    drop_right_while,
    drop_while,
    fill,
    find_index,
    find_last_index,
    head,
    initial,
    last,
    nth,
    pop_head,
    pop_last,
    zip,
)
from lodash_lite.core.collection import every, filter, for_each, map, reduce
from lodash_lite.core.models import ABSENT, AbsentType, Collection, CollectionKind, is_absent

__all__: list[str] = [
    "ABSENT",
    "AbsentType",
    "Collection",
    "CollectionKind",
    "chunk",
    "compact",
    "drop",
    "drop_right",
    "drop_right_while",
    "drop_while",
    "every",
    "fill",
    "filter",
    "find_index",
    "find_last_index",
    "for_each",
    "head",
    "initial",
    "is_absent",
    "last",
    "map",
    "nth",
    "pop_head",
    "pop_last",
    "reduce",
    "zip",
]
