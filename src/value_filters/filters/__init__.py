"""Filters sub-package: one module per target type.

string   – ``filter_string`` and the ``make_string_filter`` factory
numeric  – ``filter_int``, ``filter_float``
boolean  – ``filter_bool``
temporal – ``filter_datetime`` and the ``parse_datetime`` helper
"""

from .boolean import filter_bool
from .numeric import filter_float, filter_int
from .string import DEFAULT_REGEX_TIMEOUT, filter_string, make_string_filter
from .temporal import filter_datetime, parse_datetime

__all__ = [
    "filter_string",
    "make_string_filter",
    "DEFAULT_REGEX_TIMEOUT",
    "filter_int",
    "filter_float",
    "filter_bool",
    "filter_datetime",
    "parse_datetime",
]
