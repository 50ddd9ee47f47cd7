"""Date-time filter and the flexible parser behind it.

``parse_datetime`` understands three kinds of text:

* keywords: ``now``, ``today``, ``midnight``, ``tomorrow``, ``yesterday``
* relative offsets: ``+1 day``, ``-2 weeks 3 hours``, ``10 minutes ago``
* anything ``dateutil.parser.parse`` accepts (ISO 8601, ``June 1 2022``, …)

Empty text does not parse.  It is *not* read as "now".
"""

from __future__ import annotations

import datetime as _dt
import logging
from typing import Any, Optional

import regex
from dateutil import parser as _du_parser
from dateutil.relativedelta import relativedelta

from ..core import INVALID, Invalid
from ..options import DateTimeOptions, coerce_options

logger = logging.getLogger(__name__)

_RELATIVE = regex.compile(
    r"(?:\s*(?P<n>[+-]?\d{1,9})\s*"
    r"(?P<unit>second|sec|minute|min|hour|day|week|fortnight|month|year)s?)+"
    r"\s*(?P<ago>ago)?"
)

_UNIT_KWARGS = {
    "second": ("seconds", 1),
    "sec": ("seconds", 1),
    "minute": ("minutes", 1),
    "min": ("minutes", 1),
    "hour": ("hours", 1),
    "day": ("days", 1),
    "week": ("weeks", 1),
    "fortnight": ("weeks", 2),
    "month": ("months", 1),
    "year": ("years", 1),
}


def _now() -> _dt.datetime:
    return _dt.datetime.now()


def _midnight(moment: _dt.datetime) -> _dt.datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _keyword(word: str) -> Optional[_dt.datetime]:
    if word == "now":
        return _now()
    if word in ("today", "midnight"):
        return _midnight(_now())
    if word == "tomorrow":
        return _midnight(_now()) + _dt.timedelta(days=1)
    if word == "yesterday":
        return _midnight(_now()) - _dt.timedelta(days=1)
    return None


def _relative(text: str) -> Optional[_dt.datetime]:
    m = _RELATIVE.fullmatch(text)
    if not m:
        return None
    sign = -1 if m.group("ago") else 1
    delta = relativedelta()
    for n, unit in zip(m.captures("n"), m.captures("unit")):
        name, factor = _UNIT_KWARGS[unit]
        delta += relativedelta(**{name: sign * factor * int(n)})
    try:
        return _now() + delta
    except (OverflowError, ValueError):
        return None


def parse_datetime(text: Any) -> Optional[_dt.datetime]:
    """Parse *text* into a ``datetime``, or return None if it does not parse.

    ``datetime`` values pass through unchanged; ``date`` values become
    midnight of that day.
    """
    if isinstance(text, _dt.datetime):
        return text
    if isinstance(text, _dt.date):
        return _dt.datetime.combine(text, _dt.time())
    if not isinstance(text, str):
        return None

    text = text.strip()
    if not text:
        return None

    word = text.lower()
    result = _keyword(word)
    if result is None:
        result = _relative(word)
    if result is None:
        try:
            result = _du_parser.parse(text)
        except (ValueError, OverflowError) as exc:
            logger.debug("date-time filter: cannot parse %r: %s", text, exc)
            return None
    return result


def _aligned(a: _dt.datetime, b: _dt.datetime) -> tuple[_dt.datetime, _dt.datetime]:
    """Make *a* and *b* comparable; a naive side is read as UTC."""
    if (a.tzinfo is None) == (b.tzinfo is None):
        return a, b
    if a.tzinfo is None:
        return a.replace(tzinfo=_dt.timezone.utc), b
    return a, b.replace(tzinfo=_dt.timezone.utc)


def filter_datetime(value: Any, options: Any = None) -> "_dt.datetime | Invalid":
    """Filter a string holding a date and time.

    Options (``DateTimeOptions`` or mapping)::

        {"min": str, "max": str, "default": str}

    Behavior:
    * the value is parsed with ``parse_datetime``; ``None`` and ``""`` are invalid
    * earlier than ``min`` or later than ``max`` is invalid (bounds inclusive)
    * a bound that does not parse is ignored
    * fields missing from the text come from today, so ``"5"`` is the 5th of
      the current month and ``"10:00"`` is today at ten
    * on failure ``default`` is parsed and returned *without* checking it
      against ``min`` / ``max``

    Examples::

        filter_datetime("2020-01-01", {"min": "2021-01-01"})   → INVALID
        filter_datetime("2020-01-01", {"min": "2021-01-01", "default": "2022-06-01"})
                                                              → datetime(2022, 6, 1)
    """
    opts = coerce_options(options, DateTimeOptions)

    result = parse_datetime(value)

    if result is not None and opts.min is not None:
        lower = parse_datetime(opts.min)
        if lower is not None:
            a, b = _aligned(result, lower)
            if a < b:
                logger.debug("date-time filter: %s before min %s", result, lower)
                result = None

    if result is not None and opts.max is not None:
        upper = parse_datetime(opts.max)
        if upper is not None:
            a, b = _aligned(result, upper)
            if a > b:
                logger.debug("date-time filter: %s after max %s", result, upper)
                result = None

    if result is None and opts.default is not None:
        result = parse_datetime(opts.default)

    return INVALID if result is None else result
