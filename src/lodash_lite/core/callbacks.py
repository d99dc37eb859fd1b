"""Callback contracts and the arity-adapting wrapper.

Helpers call predicates and iteratees with a fixed argument list:
``(value, index_or_key, collection)``, with the accumulator prepended for
reducers.  Python callables reject surplus positional arguments, so
:func:`adapt` trims the list to what the callback can accept.  This lets
``every(seq, bool)`` and ``filter(seq, lambda v: v < 3)`` work next to
three-argument callbacks.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, TypeAlias

from lodash_lite.exceptions import InvalidArgumentError
from lodash_lite.utils.logger import logger

Predicate: TypeAlias = Callable[..., object]
"""Called as ``predicate(value[, index_or_key[, collection]])``; truthiness counts."""

Iteratee: TypeAlias = Callable[..., Any]
"""Called as ``iteratee(value[, index_or_key[, collection]])``."""

Reducer: TypeAlias = Callable[..., Any]
"""Called as ``reducer(accumulator, value[, index_or_key[, collection]])``."""

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def positional_count(func: Callable[..., Any], fallback: int = 1) -> int | None:
    """Return the number of positional arguments *func* accepts.

    ``None`` means "any number" (the callback declares ``*args``).
    Classes are treated as one-argument conversions.  Builtins count only
    their required positional parameters, so ``pow`` takes two and
    ``round`` one.  Callables without a readable signature, such as
    ``max``, get *fallback*.
    """
    if isinstance(func, type):
        return 1
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return fallback

    builtin = inspect.isbuiltin(func)
    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind not in _POSITIONAL:
            continue
        if builtin and param.default is not inspect.Parameter.empty:
            continue
        count += 1
    return count


def adapt(name: str, func: object, *, fallback: int = 1) -> Callable[..., Any]:
    """Wrap *func* so surplus positional arguments are dropped.

    *fallback* is the argument count used when *func* has no readable
    signature; reducers pass 2 so ``max`` and ``min`` see
    ``(accumulator, value)``.

    Raises
    ------
    InvalidArgumentError
        If *func* is not callable.
    """
    if not callable(func):
        logger.debug("rejecting argument: %s is %s", name, type(func).__name__)
        raise InvalidArgumentError(
            f"{name} must be callable, got {type(func).__name__}.",
        )

    count = positional_count(func, fallback=fallback)
    if count is None:
        return func

    def trimmed(*args: Any) -> Any:
        return func(*args[:count])

    return trimmed
