from __future__ import annotations

from typing import Any, Final, Literal, TypeVar, Union

__all__ = (
    "MaybePlaceholder",
    "Placeholder",
    "PlaceholderType",
    "SingletonType",
    "T",
    "is_placeholder",
)

T = TypeVar("T")


class _SingletonMeta(type):
    """Metaclass that guarantees exactly one instance per subclass."""

    _cache: dict[type, SingletonType] = {}

    def __call__(cls, *a, **kw):
        if cls not in cls._cache:
            cls._cache[cls] = super().__call__(*a, **kw)
        return cls._cache[cls]


class SingletonType(metaclass=_SingletonMeta):
    """Base class for singleton sentinel types.

    Provides consistent interface for sentinel values with:
    - Identity preservation across deepcopy
    - Falsy boolean evaluation
    - Clear string representation
    """

    __slots__: tuple[str, ...] = ()

    def __deepcopy__(self, memo):
        return self

    def __copy__(self):
        return self

    # concrete classes *must* override the two methods below
    def __bool__(self) -> bool: ...
    def __repr__(self) -> str: ...


class PlaceholderType(SingletonType):
    """Sentinel for an argument slot filled in at call time.

    A placeholder at position ``p`` of a partially applied call takes the
    invocation argument at the same position ``p``.

    Example:
        >>> sub = partial(operator.sub, Placeholder, 1)
        >>> sub(10)
        9
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Placeholder"]:
        return "Placeholder"

    def __str__(self) -> Literal["Placeholder"]:
        return "Placeholder"

    def __reduce__(self):
        """Ensure pickle preservation of singleton identity."""
        return "Placeholder"


Placeholder: Final = PlaceholderType()
"""An argument slot resolved from the invocation arguments."""

MaybePlaceholder = Union[T, PlaceholderType]


def is_placeholder(value: Any) -> bool:
    """Check if value is the Placeholder sentinel."""
    return value is Placeholder
