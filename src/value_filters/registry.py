"""Built-in filters addressed by type name.

Exports
-------
BUILTIN_FILTERS
    Dictionary mapping type names to filter functions.
    Default types: string, int, float, bool, datetime.

apply_filter
    Look a filter up by name and run it on one value.

Pass a custom ``filters`` dict to ``apply_filter`` to add or replace types.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .core import FilterFn
from .filters import filter_bool, filter_datetime, filter_float, filter_int, filter_string

BUILTIN_FILTERS: dict[str, FilterFn] = {
    "string": filter_string,
    "int": filter_int,
    "float": filter_float,
    "bool": filter_bool,
    "datetime": filter_datetime,
}


def apply_filter(
        kind: str,
        value: Any,
        options: Any = None,
        filters: Optional[Mapping[str, FilterFn]] = None,
) -> Any:
    """Run the filter registered as *kind* on *value*.

    Raises ``KeyError`` for an unknown *kind*: that is a caller bug, not a
    validation failure.
    """
    registry = BUILTIN_FILTERS if filters is None else filters
    try:
        fn = registry[kind]
    except KeyError:
        raise KeyError(f"Unknown filter type {kind!r}; known: {sorted(registry)}") from None
    return fn(value, options)
