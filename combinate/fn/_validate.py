from collections.abc import Callable, Iterable
from typing import Any

from .._errors import InvalidArgumentError

__all__ = (
    "validate_func",
    "validate_funcs",
)


def validate_func(func: Any, *, argument: str = "func") -> Callable:
    """Return `func` unchanged if it is callable.

    Raises:
        InvalidArgumentError: If `func` is not callable.
    """
    if callable(func):
        return func
    raise InvalidArgumentError.from_value(
        func,
        expected="callable",
        message=f"{argument} must be a valid callable, got {type(func).__name__}",
        argument=argument,
    )


def validate_funcs(funcs: Iterable[Any]) -> tuple[Callable, ...]:
    """Validate every element of `funcs` is callable.

    Raises:
        InvalidArgumentError: With ``details["index"]`` set to the position
            of the first non-callable element.
    """
    funcs = tuple(funcs)
    for i, fn in enumerate(funcs):
        if not callable(fn):
            raise InvalidArgumentError.from_value(
                fn,
                expected="callable",
                message=f"Argument #{i} must be a valid callable",
                index=i,
            )
    return funcs
