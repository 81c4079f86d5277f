"""Mapping and folding over ordered collections.

Mappings are traversed by their values in key order; any other iterable is
traversed in iteration order with implicit integer keys.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any, TypeVar

from ._validate import validate_func

A = TypeVar("A")

__all__ = (
    "foldl",
    "foldr",
    "iter_reverse",
    "map_",
)


def map_(func: Callable[[Any], Any], iterable: Iterable) -> dict | list:
    """Apply `func` to every value, keeping keys and order.

    Example:
        >>> map_(str.upper, ["kim", "elin"])
        ['KIM', 'ELIN']
        >>> map_(len, {"a": "xx", "b": "y"})
        {'a': 2, 'b': 1}

    Returns:
        A new dict for Mapping input, a new list otherwise.
    """
    func = validate_func(func)
    if isinstance(iterable, Mapping):
        return {k: func(v) for k, v in iterable.items()}
    return [func(v) for v in iterable]


def foldl(func: Callable[[A, Any], A], init: A, iterable: Iterable) -> A:
    """Left fold: ``func(...func(func(init, x0), x1)..., xn)``.

    Example:
        >>> foldl(operator.add, 0, range(6))
        15
    """
    func = validate_func(func)
    acc = init
    values = iterable.values() if isinstance(iterable, Mapping) else iterable
    for x in values:
        acc = func(acc, x)
    return acc


def iter_reverse(iterable: Iterable) -> Iterator[tuple[Any, Any]]:
    """Yield ``(key, value)`` pairs from the last entry to the first.

    Sequences are walked by index without copying. Mappings are walked by
    reversed keys when they support it; other iterables are materialized.
    """
    if isinstance(iterable, Mapping):
        try:
            keys = reversed(iterable.keys())  # type: ignore[call-overload]
        except TypeError:
            keys = reversed(list(iterable.keys()))
        for k in keys:
            yield k, iterable[k]
        return

    if not isinstance(iterable, Sequence):
        iterable = list(iterable)
    for i in range(len(iterable) - 1, -1, -1):
        yield i, iterable[i]


def foldr(func: Callable[[A, Any], A], init: A, iterable: Iterable) -> A:
    """Right fold: like `foldl`, walking values from last to first.

    The accumulator stays the first argument of `func`.

    Example:
        >>> foldr(lambda acc, x: x**acc, 1, [3, 4])
        81
    """
    func = validate_func(func)
    acc = init
    for _, x in iter_reverse(iterable):
        acc = func(acc, x)
    return acc
