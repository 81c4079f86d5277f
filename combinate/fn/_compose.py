# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Callable
from typing import Any

from .. import config
from .._errors import InvalidArgumentError
from ._fold import foldl
from ._validate import validate_funcs

__all__ = (
    "compose",
    "sequence",
)


def _identity(*args: Any, **kwargs: Any) -> Any:
    if len(args) != 1 or kwargs:
        raise InvalidArgumentError(
            "An empty composition accepts exactly one positional argument",
            details={"args": args, "kwargs": kwargs},
        )
    return args[0]


def _feed(acc: Any, func: Callable) -> Any:
    return func(acc)


def sequence(*funcs: Callable) -> Callable:
    """Chain functions left to right.

    The first function receives the call arguments, every later one the
    previous result.

    Example:
        >>> sequence(lambda x: x + "a", lambda x: x + "b")("d")
        'dab'

    Raises:
        InvalidArgumentError: If an argument is not callable, with
            ``details["index"]`` set to its position.
    """
    funcs = validate_funcs(funcs)
    if not funcs:
        return _identity

    first, rest = funcs[0], funcs[1:]

    def sequenced(*args: Any, **kwargs: Any) -> Any:
        return foldl(_feed, first(*args, **kwargs), rest)

    return sequenced


def compose(*funcs: Callable) -> Callable:
    """Chain functions right to left: ``compose(a, b, c)(x) == a(b(c(x)))``.

    The index reported for a non-callable argument follows the caller's
    order unless ``COMPOSE_REVERSED_INDEX`` is set, in which case it is the
    position within the reversed chain handed to `sequence`.
    """
    if not config.settings.COMPOSE_REVERSED_INDEX:
        validate_funcs(funcs)
    return sequence(*reversed(funcs))
