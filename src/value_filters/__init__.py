import logging

from .core import INVALID, FilterFn, Invalid, ValidationFailed, is_invalid, unwrap
from .filters import (
    DEFAULT_REGEX_TIMEOUT,
    filter_bool,
    filter_datetime,
    filter_float,
    filter_int,
    filter_string,
    make_string_filter,
    parse_datetime,
)
from .options import BoolOptions, DateTimeOptions, FloatOptions, IntOptions, StringOptions
from .registry import BUILTIN_FILTERS, apply_filter

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # core
    "INVALID",
    "Invalid",
    "FilterFn",
    "ValidationFailed",
    "is_invalid",
    "unwrap",
    # filters
    "filter_string",
    "filter_int",
    "filter_float",
    "filter_bool",
    "filter_datetime",
    "make_string_filter",
    "parse_datetime",
    "DEFAULT_REGEX_TIMEOUT",
    # options
    "StringOptions",
    "IntOptions",
    "FloatOptions",
    "BoolOptions",
    "DateTimeOptions",
    # registry
    "BUILTIN_FILTERS",
    "apply_filter",
]
