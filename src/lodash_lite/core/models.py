"""Domain models for lodash-lite.

* :data:`ABSENT` — the "no value" sentinel returned by out-of-range
  access (``head([])``, ``nth(seq, 99)``).  It is distinct from every
  element a caller can store, ``None`` included.
* :class:`CollectionKind` / :class:`Collection` — the tagged variant the
  collection helpers dispatch on instead of probing runtime shapes inside
  every algorithm.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Final

from lodash_lite.exceptions import UnsupportedCollectionError
from lodash_lite.utils.validation import is_sequence


# ---------------------------------------------------------------------------
# Absent sentinel
# ---------------------------------------------------------------------------

class AbsentType:
    """Type of the :data:`ABSENT` singleton."""

    __slots__ = ()
    _instance: AbsentType | None = None

    def __new__(cls) -> AbsentType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = AbsentType()
"""Returned instead of raising when there is no element to return."""


def is_absent(value: object) -> bool:
    """Return ``True`` when *value* is the :data:`ABSENT` sentinel."""
    return value is ABSENT


# ---------------------------------------------------------------------------
# Collection variant
# ---------------------------------------------------------------------------

class CollectionKind(enum.Enum):
    """Shape of a collection accepted by the collection helpers."""

    SEQUENCE = "sequence"
    MAPPING = "mapping"


@dataclass(frozen=True, slots=True)
class Collection:
    """A sequence or mapping tagged with its :class:`CollectionKind`.

    The payload is the caller's object itself, not a copy, so
    iteratees that receive ``collection`` see exactly what was passed in.
    """

    kind: CollectionKind
    payload: Any

    @classmethod
    def of(cls, obj: object) -> Collection:
        """Tag *obj*, rejecting anything that is not a sequence or mapping.

        Raises
        ------
        UnsupportedCollectionError
            For strings, sets, scalars, iterators and other shapes.
        """
        if isinstance(obj, Mapping):
            return cls(CollectionKind.MAPPING, obj)
        if is_sequence(obj):
            return cls(CollectionKind.SEQUENCE, obj)
        raise UnsupportedCollectionError(
            f"Expected a sequence or a mapping, got {type(obj).__name__}.",
            hint="Pass a list, tuple or dict.",
        )

    def entries(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(index_or_key, value)`` pairs in iteration order."""
        if self.kind is CollectionKind.MAPPING:
            yield from self.payload.items()
        else:
            yield from enumerate(self.payload)

    def __len__(self) -> int:
        return len(self.payload)

    def __bool__(self) -> bool:
        return len(self.payload) > 0
