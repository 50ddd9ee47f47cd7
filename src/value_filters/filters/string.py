"""String filter: length, pattern, requiredness and default.

``filter_string`` is built by ``make_string_filter`` with the default regex
timeout.  Build your own when untrusted patterns need a tighter limit::

    strict_filter_string = make_string_filter(timeout=0.1)
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

import regex

from ..core import INVALID, Invalid
from ..options import StringOptions, coerce_options

logger = logging.getLogger(__name__)

DEFAULT_REGEX_TIMEOUT = 2.0


def _fullmatch(pattern: Any, value: str, timeout: float) -> bool:
    """Return True if *value* entirely matches *pattern*.

    A pattern that fails to compile, or a match that exceeds *timeout*,
    counts as a mismatch.
    """
    try:
        if isinstance(pattern, str):
            return regex.fullmatch(pattern, value, timeout=timeout) is not None
        if isinstance(pattern, re.Pattern):
            # stdlib patterns take no timeout
            return pattern.fullmatch(value) is not None
        return pattern.fullmatch(value, timeout=timeout) is not None
    except TypeError as exc:
        logger.warning("string filter: unusable pattern %r: %s", pattern, exc)
        return False
    except regex.error as exc:
        logger.warning("string filter: bad pattern %r: %s", pattern, exc)
        return False
    except TimeoutError:
        logger.warning("string filter: pattern %r exceeded timeout of %ss", pattern, timeout)
        return False


def make_string_filter(
    timeout: float = DEFAULT_REGEX_TIMEOUT,
) -> Callable[..., "str | Invalid"]:
    """Factory for a string filter with the given regex *timeout* (seconds)."""

    def filter_string(value: Any, options: Any = None) -> "str | Invalid":
        """Filter a string.

        Options (``StringOptions`` or mapping)::

            {"required": bool, "max": int, "min": int, "regex": str, "default": str}

        Behavior:
        * ``None`` is read as ``""``; any other non-string is invalid
        * ``required`` rejects ``""`` and suppresses ``default``
        * ``max`` / ``min`` bound the codepoint count (inclusive)
        * ``regex`` must match the whole value
        * an invalid or empty result falls back to ``default`` unless required

        Length and pattern checks apply to non-empty values only.

        Examples::

            filter_string("abc", {"max": 3})              → "abc"
            filter_string("abcd", {"max": 3})             → INVALID
            filter_string("", {"default": "n/a"})         → "n/a"
            filter_string(None, {"required": True})       → INVALID
        """
        opts = coerce_options(options, StringOptions)

        result: str | Invalid = "" if value is None else value
        if not isinstance(result, str):
            logger.debug("string filter: rejected non-string %s", type(value).__name__)
            result = INVALID

        required = bool(opts.required)
        if required and result == "":
            logger.debug("string filter: required value is empty")
            result = INVALID

        if result and opts.max is not None and len(result) > opts.max:
            logger.debug("string filter: length %d above max %d", len(result), opts.max)
            result = INVALID

        if result and opts.min is not None and len(result) < opts.min:
            logger.debug("string filter: length %d below min %d", len(result), opts.min)
            result = INVALID

        if result and opts.regex is not None and not _fullmatch(opts.regex, result, timeout):
            logger.debug("string filter: value does not match %r", opts.regex)
            result = INVALID

        if not result and opts.default is not None and not required:
            result = opts.default

        return result

    return filter_string


filter_string = make_string_filter()
