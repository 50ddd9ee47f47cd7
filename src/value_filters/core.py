"""Core types shared by every filter: the invalid marker, the failure
exception, and option-coercion helpers.

Exports
-------
Invalid / INVALID
    The distinguished "validation failed" result.  ``INVALID`` is the only
    instance; compare with ``is`` or use ``is_invalid``.

ValidationFailed
    Raised by ``unwrap`` for callers that prefer exceptions over markers.

FilterFn
    Type alias for a filter callable: ``(value, options) -> T | Invalid``.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, TypeVar, Union

T = TypeVar("T")

# ─────────────────────────────────────────────────────────────────────────────
# Invalid marker
# ─────────────────────────────────────────────────────────────────────────────


class Invalid:
    """Result of a filter whose input failed validation.

    Falsy, so ``if result:`` still reads naturally, but never equal to
    ``None``, ``False``, ``""`` or ``0``; a valid falsy value and a failure
    stay distinguishable.
    """

    _instance: Optional["Invalid"] = None

    def __new__(cls) -> "Invalid":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "INVALID"

    def __reduce__(self):
        return (Invalid, ())


INVALID = Invalid()

FilterFn = Callable[[Any, Any], Any]


def is_invalid(result: Any) -> bool:
    """Return True if *result* is the invalid marker."""
    return result is INVALID


class ValidationFailed(ValueError):
    """A filtered value was invalid where the caller required a value.

    Attributes:
        field: Optional name of the field that failed, for error reporting.
    """

    def __init__(self, field: str | None = None) -> None:
        self.field = field
        msg = f"validation failed for field {field!r}" if field else "validation failed"
        super().__init__(msg)


def unwrap(result: Union[T, Invalid], field: str | None = None) -> T:
    """Return *result* unchanged, or raise ``ValidationFailed`` if it is invalid.

    ::

        age = unwrap(filter_int(form.get("age"), {"min": 0}), field="age")
    """
    if result is INVALID:
        raise ValidationFailed(field)
    return result  # type: ignore[return-value]


# ─────────────────────────────────────────────────────────────────────────────
# Option coercion
#
# Options arrive either as typed dataclasses or as loose mappings.  A value of
# the wrong type is dropped (treated as absent) instead of raising.
# ─────────────────────────────────────────────────────────────────────────────


def opt_int(value: Any) -> int | None:
    # bool is an int subclass; never accept it as a number
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def opt_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return None


def opt_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def opt_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def opt_choice(value: Any, choices: tuple[str, ...]) -> str | None:
    return value if isinstance(value, str) and value in choices else None


def mapping_or_empty(options: Any) -> Mapping[str, Any]:
    """Return *options* if it is a mapping, else an empty dict."""
    return options if isinstance(options, Mapping) else {}
