# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import inspect
import logging
from collections.abc import Callable
from typing import Any

from .._errors import InvalidArgumentError
from ._fold import foldl
from ._validate import validate_func

logger = logging.getLogger(__name__)

__all__ = (
    "curry",
    "get_arity",
    "uncurry",
)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def get_arity(func: Callable) -> int:
    """Count the required positional parameters of `func`.

    Parameters with defaults, ``*args``, ``**kwargs`` and keyword-only
    parameters are not counted.

    Raises:
        InvalidArgumentError: If the signature of `func` is not available.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError.from_value(
            func,
            message=(
                f"Cannot determine the arity of {func!r}; "
                "pass it explicitly with curry(func, arity)"
            ),
            cause=e,
        )
    return sum(
        1
        for p in sig.parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


def _curried(
    func: Callable,
    arity: int,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Callable:
    def curried(*invoked: Any, **invoked_kw: Any) -> Any:
        new_args = args + invoked
        new_kwargs = {**kwargs, **invoked_kw}
        if len(new_args) >= arity:
            return func(*new_args, **new_kwargs)
        return _curried(func, arity, new_args, new_kwargs)

    return curried


def curry(func: Callable, arity: int | None = None) -> Callable:
    """Collect positional arguments across calls until `arity` is reached.

    Every call returns a fresh closure over the arguments gathered so far,
    so intermediate results can be reused independently. Once at least
    `arity` positional arguments are gathered, `func` runs with all of them.

    Args:
        func: The callable to curry.
        arity: Number of positional arguments to wait for. Detected from
            the signature of `func` when omitted.

    Example:
        >>> add3 = curry(lambda a, b, c: a + b + c)
        >>> add3(1)(2)(3)
        6
        >>> add3(1, 2)(3)
        6
    """
    func = validate_func(func)
    if arity is None:
        arity = get_arity(func)
        logger.debug("Detected arity %d for %r", arity, func)
    elif isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
        raise InvalidArgumentError.from_value(
            arity,
            expected="non-negative int",
            message="arity must be a non-negative integer",
            argument="arity",
        )
    return _curried(func, arity, (), {})


def _call(acc: Callable, x: Any) -> Any:
    return acc(x)


def uncurry(func: Callable) -> Callable:
    """Turn a chain of single-argument calls into one call.

    ``uncurry(f)(a, b, c) == f(a)(b)(c)``.
    """
    func = validate_func(func)

    def uncurried(*args: Any) -> Any:
        return foldl(_call, func, args)

    return uncurried
