# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Argument manipulation: flipping and partial application with placeholders.

A bound argument list may contain `Placeholder` entries. At call time the
placeholder at bound position ``p`` takes the invocation argument at the
same position ``p``; that invocation argument is consumed and the rest are
spliced in around the resolved bound list.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from .._errors import InvalidArgumentError
from ..types import MaybePlaceholder, Placeholder, PlaceholderType
from ._validate import validate_func

logger = logging.getLogger(__name__)

__all__ = (
    "flip",
    "merge_left",
    "merge_right",
    "partial",
    "partial_right",
    "placeholder",
    "resolve_placeholders",
)


def placeholder() -> PlaceholderType:
    """Return the process-wide `Placeholder` sentinel."""
    return Placeholder


def flip(func: Callable) -> Callable:
    """Swap the first two positional arguments of `func`.

    ``flip(f)(a, b, c) == f(b, a, c)``. With fewer than two arguments the
    call is passed through as is.
    """

    def flipped(*args: Any, **kwargs: Any) -> Any:
        if len(args) >= 2:
            args = (args[1], args[0], *args[2:])
        return func(*args, **kwargs)

    return flipped


def resolve_placeholders(
    bound: Sequence[MaybePlaceholder[Any]], invoked: Sequence[Any]
) -> tuple[tuple[Any, ...], tuple[Any, ...]]:
    """Substitute placeholders in `bound` from `invoked` by position.

    Returns:
        ``(resolved, remaining)``: the bound list with every placeholder
        replaced, and the invocation arguments that no placeholder took,
        in their original order.

    Raises:
        InvalidArgumentError: If a placeholder position has no matching
            invocation argument.
    """
    consumed: set[int] = set()
    resolved = []
    for position, param in enumerate(bound):
        if param is not Placeholder:
            resolved.append(param)
            continue
        if position >= len(invoked):
            logger.debug(
                "Unresolvable placeholder at position %d (%d args given)",
                position,
                len(invoked),
            )
            raise InvalidArgumentError(
                f"Cannot resolve parameter placeholder at position {position}. "
                f"Only {len(invoked)} argument(s) given.",
                details={"position": position, "available": len(invoked)},
            )
        consumed.add(position)
        resolved.append(invoked[position])

    remaining = tuple(a for i, a in enumerate(invoked) if i not in consumed)
    return tuple(resolved), remaining


def merge_left(bound: Sequence[Any], invoked: Sequence[Any]) -> tuple:
    """Resolved bound arguments first, then the unconsumed invocation ones."""
    resolved, remaining = resolve_placeholders(bound, invoked)
    return resolved + remaining


def merge_right(bound: Sequence[Any], invoked: Sequence[Any]) -> tuple:
    """Unconsumed invocation arguments first, then the resolved bound ones."""
    resolved, remaining = resolve_placeholders(bound, invoked)
    return remaining + resolved


def partial(func: Callable, *bound: Any, **bound_kwargs: Any) -> Callable:
    """Bind leading arguments of `func`.

    Example:
        >>> pow2 = partial(pow, 2)
        >>> pow2(10)
        1024
        >>> partial(pow, Placeholder, 2)(10)
        100

    Keyword arguments given at call time override bound ones.
    """
    func = validate_func(func)

    def partially_applied(*args: Any, **kwargs: Any) -> Any:
        return func(*merge_left(bound, args), **{**bound_kwargs, **kwargs})

    return partially_applied


def partial_right(func: Callable, *bound: Any, **bound_kwargs: Any) -> Callable:
    """Bind trailing arguments of `func`.

    Example:
        >>> cube = partial_right(pow, 3)
        >>> cube(10)
        1000
    """
    func = validate_func(func)

    def partially_applied(*args: Any, **kwargs: Any) -> Any:
        return func(*merge_right(bound, args), **{**bound_kwargs, **kwargs})

    return partially_applied
