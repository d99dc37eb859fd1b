"""lodash-lite — Lodash/Underscore-style helpers for Python sequences and mappings.

Array helpers (``chunk``, ``drop_while``, ``find_index``, ``zip``, …) and
collection helpers (``for_each``, ``every``, ``filter``, ``map``,
``reduce``) are importable from here under their snake_case names and
their Lodash camelCase names (``dropWhile``, ``findIndex``, ``forEach``).
"""

from lodash_lite.core import (
    ABSENT,
    AbsentType,
    Collection,
    CollectionKind,
    chunk,
    compact,
    drop,
    drop_right,
    drop_right_while,
    drop_while,
    every,
    fill,
    filter,
    find_index,
    find_last_index,
    for_each,
    head,
    initial,
    is_absent,
    last,
    map,
    nth,
    pop_head,
    pop_last,
    reduce,
    zip,
)
from lodash_lite.exceptions import (
    InvalidArgumentError,
    LodashLiteError,
    UnsupportedCollectionError,
)
from lodash_lite.version import __version__

# Lodash spellings
dropRight = drop_right
dropRightWhile = drop_right_while
dropWhile = drop_while
findIndex = find_index
findLastIndex = find_last_index
forEach = for_each

__all__: list[str] = [
    "ABSENT",
    "AbsentType",
    "Collection",
    "CollectionKind",
    "InvalidArgumentError",
    "LodashLiteError",
    "UnsupportedCollectionError",
    "__version__",
    "chunk",
    "compact",
    "drop",
    "dropRight",
    "dropRightWhile",
    "dropWhile",
    "drop_right",
    "drop_right_while",
    "drop_while",
    "every",
    "fill",
    "filter",
    "findIndex",
    "findLastIndex",
    "find_index",
    "find_last_index",
    "forEach",
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
