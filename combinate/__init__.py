# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import CombinateError, InvalidArgumentError
from .config import settings
from .fn import (
    compose,
    curry,
    flip,
    foldl,
    foldr,
    iter_reverse,
    map_,
    partial,
    partial_right,
    placeholder,
    sequence,
    uncurry,
)
from .types import Placeholder, PlaceholderType, is_placeholder
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.LOG_LEVEL)

__all__ = (
    "CombinateError",
    "InvalidArgumentError",
    "Placeholder",
    "PlaceholderType",
    "__version__",
    "compose",
    "curry",
    "flip",
    "foldl",
    "foldr",
    "is_placeholder",
    "iter_reverse",
    "map_",
    "partial",
    "partial_right",
    "placeholder",
    "sequence",
    "settings",
    "uncurry",
)
