"""Argument guards shared by the helpers.

Each guard either returns the validated value or raises
:class:`~lodash_lite.exceptions.InvalidArgumentError`.  Rejections are
logged at DEBUG so a caller can trace which helper refused which value.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from lodash_lite.exceptions import InvalidArgumentError
from lodash_lite.utils.logger import logger


def is_sequence(obj: object) -> bool:
    """Return ``True`` for ordered, indexable, non-string sequences."""
    return isinstance(obj, Sequence) and not isinstance(
        obj, (str, bytes, bytearray)
    )


def _reject(message: str, hint: str | None = None) -> InvalidArgumentError:
    logger.debug("rejecting argument: %s", message)
    return InvalidArgumentError(message, hint=hint)


def require_int(name: str, value: object, *, minimum: int | None = 0) -> int:
    """Return *value* when it is an ``int`` no smaller than *minimum*.

    ``bool`` is refused even though it subclasses ``int``.  A *minimum* of
    ``None`` checks the type only.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise _reject(
            f"{name} must be an integer, got {type(value).__name__}.",
        )
    if minimum is not None and value < minimum:
        raise _reject(
            f"{name} must be >= {minimum}, got {value}.",
            hint=f"Pass an integer of at least {minimum}.",
        )
    return value


def require_sequence(name: str, value: object) -> None:
    """Raise unless *value* is an indexable, non-string sequence."""
    if not is_sequence(value):
        raise _reject(
            f"{name} must be a sequence, got {type(value).__name__}.",
            hint="Pass a list or a tuple.",
        )


def require_mutable_sequence(name: str, value: object) -> None:
    """Raise unless *value* supports in-place item assignment and removal."""
    if not isinstance(value, MutableSequence):
        raise _reject(
            f"{name} must be a mutable sequence, got {type(value).__name__}.",
            hint="Mutating helpers need a list; convert tuples with list().",
        )
