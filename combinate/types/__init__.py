from ._sentinel import (
    MaybePlaceholder,
    Placeholder,
    PlaceholderType,
    SingletonType,
    T,
    is_placeholder,
)

__all__ = (
    "MaybePlaceholder",
    "Placeholder",
    "PlaceholderType",
    "SingletonType",
    "T",
    "is_placeholder",
)
