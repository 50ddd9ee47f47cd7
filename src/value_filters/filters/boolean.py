"""Boolean filter with loose recognition of form-style truthy/falsy words."""

from __future__ import annotations

import logging
from typing import Any

from ..core import INVALID, Invalid
from ..options import BoolOptions, coerce_options

logger = logging.getLogger(__name__)

TRUTHY = frozenset({"1", "true", "on", "yes"})
FALSY = frozenset({"0", "false", "off", "no", ""})


def _parse_bool(value: Any) -> bool | None:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return {1: True, 0: False}.get(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in TRUTHY:
            return True
        if word in FALSY:
            return False
    return None


def filter_bool(value: Any, options: Any = None) -> "bool | Invalid":
    """Filter a boolean.

    Options (``BoolOptions`` or mapping)::

        {"strict_null": bool, "default": bool}

    Behavior:
    * ``strict_null`` makes ``None`` invalid instead of ``False``
    * ``"1" "true" "on" "yes"`` are True, ``"0" "false" "off" "no" ""`` are
      False (case-insensitive, surrounding whitespace ignored)
    * anything else is invalid, or ``default`` if given, never ``False``

    Examples::

        filter_bool("yes")                          → True
        filter_bool("maybe")                        → INVALID
        filter_bool(None)                           → False
        filter_bool(None, {"strict_null": True})    → INVALID
    """
    opts = coerce_options(options, BoolOptions)

    if opts.strict_null and value is None:
        return INVALID

    result = _parse_bool(value)
    if result is None:
        logger.debug("bool filter: unrecognised value %r", value)
        return opts.default if opts.default is not None else INVALID
    return result
