"""Integer and float filters.

Both trim surrounding whitespace from string input and then require the
whole remaining text to be a single numeric literal; anything else is
invalid (or the ``default``).
"""

from __future__ import annotations

import logging
import math
from typing import Any

import regex

from ..core import INVALID, Invalid
from ..options import FloatOptions, IntOptions, coerce_options

logger = logging.getLogger(__name__)

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

# 19 digits cover the 64-bit range; longer literals are rejected before int()
_DECIMAL_INT = regex.compile(r"[+-]?(?:0|[1-9][0-9]{0,18})")
_HEX_INT = regex.compile(r"0[xX]([0-9a-fA-F]+)")
_OCT_INT = regex.compile(r"0[oO]?([0-7]+)")


# ─────────────────────────────────────────────────────────────────────────────
# Integers
# ─────────────────────────────────────────────────────────────────────────────


def _parse_int(text: str, opts: IntOptions) -> int | None:
    text = text.strip()
    if _DECIMAL_INT.fullmatch(text):
        return int(text, 10)
    if opts.allow_hex:
        m = _HEX_INT.fullmatch(text)
        if m:
            return int(m.group(1), 16)
    if opts.allow_octal:
        m = _OCT_INT.fullmatch(text)
        if m:
            return int(m.group(1), 8)
    return None


def filter_int(value: Any, options: Any = None) -> "int | Invalid":
    """Filter an integer.

    Options (``IntOptions`` or mapping)::

        {"min": int, "max": int, "allow": "oct" | "hex" | "hex|oct", "default": int}

    Behavior:
    * decimal literals with optional sign; leading zeros are rejected
    * ``allow`` admits ``0x1A`` (hex) and/or ``012`` / ``0o12`` (octal)
    * values must fit a signed 64-bit integer and lie within ``[min, max]``
    * on failure ``default`` is returned if given

    Examples::

        filter_int("42")                          → 42
        filter_int("0x1A", {"allow": "hex"})      → 26
        filter_int("15", {"min": 20, "default": 99}) → 99
    """
    opts = coerce_options(options, IntOptions)

    if isinstance(value, bool):
        result = None
    elif isinstance(value, int):
        result = value
    elif isinstance(value, str):
        result = _parse_int(value, opts)
    else:
        result = None

    if result is None:
        logger.debug("int filter: %r is not an integer literal", value)
    elif not INT_MIN <= result <= INT_MAX:
        logger.debug("int filter: %d outside 64-bit range", result)
        result = None
    elif opts.min is not None and result < opts.min:
        logger.debug("int filter: %d below min %d", result, opts.min)
        result = None
    elif opts.max is not None and result > opts.max:
        logger.debug("int filter: %d above max %d", result, opts.max)
        result = None

    if result is None:
        return opts.default if opts.default is not None else INVALID
    return result


# ─────────────────────────────────────────────────────────────────────────────
# Floats
# ─────────────────────────────────────────────────────────────────────────────

_FLOAT_PATTERNS = {
    sep: regex.compile(
        r"[+-]?(?:[0-9]+(?:{s}[0-9]*)?|{s}[0-9]+)(?:[eE][+-]?[0-9]+)?".format(s=regex.escape(sep))
    )
    for sep in (".", ",")
}


def _parse_float(text: str, decimal: str) -> float | None:
    text = text.strip()
    if not _FLOAT_PATTERNS[decimal].fullmatch(text):
        return None
    parsed = float(text.replace(decimal, ".") if decimal != "." else text)
    # "1e999" is lexically fine but overflows to inf
    return parsed if math.isfinite(parsed) else None


def filter_float(value: Any, options: Any = None) -> "float | Invalid":
    """Filter a float.

    Options (``FloatOptions`` or mapping)::

        {"decimal": "." | ",", "default": float}

    ``decimal`` picks the separator recognised in string input (default
    ``"."``).  Scientific notation is accepted, ``inf`` and ``nan`` are not.
    An ``int`` default is widened to ``float`` rather than ignored.
    """
    opts = coerce_options(options, FloatOptions)
    decimal = opts.decimal or "."

    if isinstance(value, bool):
        result = None
    elif isinstance(value, (int, float)):
        try:
            result = float(value)
        except OverflowError:
            result = None
        if result is not None and not math.isfinite(result):
            result = None
    elif isinstance(value, str):
        result = _parse_float(value, decimal)
    else:
        result = None

    if result is None:
        logger.debug("float filter: %r is not a float literal (decimal=%r)", value, decimal)
        return opts.default if opts.default is not None else INVALID
    return result
