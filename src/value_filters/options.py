"""Typed option structures, one per filter.

Each dataclass can be built directly or from a loose mapping with
``from_mapping``.  Fields are ``None`` when the option is absent.  Wrong-typed
values are normalised to ``None`` in ``__post_init__``, so a hand-built
options object obeys the same "bad configuration means no constraint" rule as
a mapping does.

``coerce_options`` is what the filters call: it accepts a dataclass of the
right type, a mapping, or ``None``.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from .core import mapping_or_empty, opt_bool, opt_choice, opt_float, opt_int, opt_str

O = TypeVar("O", bound="_Options")

ALLOW_CHOICES = ("oct", "hex", "hex|oct", "oct|hex")
DECIMAL_CHOICES = (".", ",")


class _Options:
    """Mixin giving every options dataclass a permissive ``from_mapping``."""

    @classmethod
    def from_mapping(cls: Type[O], params: Optional[Mapping[str, Any]]) -> O:
        params = mapping_or_empty(params)
        names = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        return cls(**{k: v for k, v in params.items() if k in names})

    def _set(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)


@dataclass(frozen=True)
class StringOptions(_Options):
    required: Optional[bool] = None
    max: Optional[int] = None
    min: Optional[int] = None
    regex: Any = None
    default: Optional[str] = None

    def __post_init__(self) -> None:
        self._set("required", opt_bool(self.required))
        self._set("max", opt_int(self.max))
        self._set("min", opt_int(self.min))
        # compiled patterns (``regex.compile`` / ``re.compile``) are accepted too
        if not (isinstance(self.regex, str) or hasattr(self.regex, "fullmatch")):
            self._set("regex", None)
        self._set("default", opt_str(self.default))


@dataclass(frozen=True)
class IntOptions(_Options):
    min: Optional[int] = None
    max: Optional[int] = None
    allow: Optional[str] = None
    default: Optional[int] = None

    def __post_init__(self) -> None:
        self._set("min", opt_int(self.min))
        self._set("max", opt_int(self.max))
        self._set("allow", opt_choice(self.allow, ALLOW_CHOICES))
        self._set("default", opt_int(self.default))

    @property
    def allow_hex(self) -> bool:
        return self.allow is not None and "hex" in self.allow

    @property
    def allow_octal(self) -> bool:
        return self.allow is not None and "oct" in self.allow


@dataclass(frozen=True)
class FloatOptions(_Options):
    decimal: Optional[str] = None
    default: Optional[float] = None

    def __post_init__(self) -> None:
        self._set("decimal", opt_choice(self.decimal, DECIMAL_CHOICES))
        self._set("default", opt_float(self.default))


@dataclass(frozen=True)
class BoolOptions(_Options):
    strict_null: Optional[bool] = None
    default: Optional[bool] = None

    def __post_init__(self) -> None:
        self._set("strict_null", opt_bool(self.strict_null))
        self._set("default", opt_bool(self.default))


def _opt_when(value: Any) -> Union[str, _dt.datetime, None]:
    if isinstance(value, (str, _dt.datetime)):
        return value
    return None


@dataclass(frozen=True)
class DateTimeOptions(_Options):
    """Bounds and default are date-time strings (``datetime`` objects also work)."""

    min: Union[str, _dt.datetime, None] = None
    max: Union[str, _dt.datetime, None] = None
    default: Union[str, _dt.datetime, None] = None

    def __post_init__(self) -> None:
        self._set("min", _opt_when(self.min))
        self._set("max", _opt_when(self.max))
        self._set("default", _opt_when(self.default))


def coerce_options(options: Any, cls: Type[O]) -> O:
    """Return *options* as an instance of *cls*.

    Accepts an instance of *cls*, a mapping, or anything else (which yields
    an empty options object).
    """
    if isinstance(options, cls):
        return options
    return cls.from_mapping(mapping_or_empty(options))
