from ._compose import compose, sequence
from ._curry import curry, get_arity, uncurry
from ._fold import foldl, foldr, iter_reverse, map_
from ._partial import (
    flip,
    merge_left,
    merge_right,
    partial,
    partial_right,
    placeholder,
    resolve_placeholders,
)
from ._validate import validate_func, validate_funcs

__all__ = (
    "compose",
    "curry",
    "flip",
    "foldl",
    "foldr",
    "get_arity",
    "iter_reverse",
    "map_",
    "merge_left",
    "merge_right",
    "partial",
    "partial_right",
    "placeholder",
    "resolve_placeholders",
    "sequence",
    "uncurry",
    "validate_func",
    "validate_funcs",
)
