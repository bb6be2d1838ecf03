"""
Binder: converts looked-up raw strings to each field's declared type and
assigns them onto a config dataclass instance, in declaration order.
"""

import logging
import math
import os
import re
from dataclasses import is_dataclass
from typing import Any, Callable, Mapping

from envconfig.errors import ConversionError, DestinationError, UnsupportedTypeError
from envconfig.fields import FieldDescriptor, FieldKind, describe

logger = logging.getLogger(__name__)

Lookup = Callable[[str], str | None]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_TRUE = frozenset({"1", "t", "true"})
_FALSE = frozenset({"0", "f", "false"})


def environ_lookup(env: Mapping[str, str] | None = None) -> Lookup:
    """Lookup backed by a mapping (default: os.environ, read at call time)."""
    if env is None:
        env = os.environ
    return env.get


def _coerce_str(raw: str) -> str:
    return raw


def _coerce_int(raw: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise ValueError("not a base-10 integer")
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError("value out of 64-bit range")
    return value


def _coerce_bool(raw: str) -> bool:
    v = raw.lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError("expected one of true/false, t/f, 1/0")


def _coerce_float(raw: str) -> float:
    if not _FLOAT_RE.fullmatch(raw):
        raise ValueError("not a decimal number")
    value = float(raw)
    if math.isinf(value) and "inf" not in raw.lower():
        raise ValueError("value out of 64-bit float range")
    return value


_COERCERS: dict[FieldKind, Callable[[str], Any]] = {
    FieldKind.STRING: _coerce_str,
    FieldKind.INTEGER: _coerce_int,
    FieldKind.BOOLEAN: _coerce_bool,
    FieldKind.FLOAT: _coerce_float,
}


def convert(descriptor: FieldDescriptor, raw: str) -> Any:
    """Convert one present raw value for the given field, raising ConfigError subclasses."""
    if descriptor.kind is None:
        raise UnsupportedTypeError(descriptor.name, descriptor.declared_type)
    try:
        return _COERCERS[descriptor.kind](raw)
    except ValueError as e:
        raise ConversionError(descriptor.key, descriptor.name, descriptor.kind.value, raw, str(e)) from e


def _check_destination(destination: Any) -> None:
    if isinstance(destination, type) or not is_dataclass(destination):
        raise DestinationError(
            f"config must be a dataclass instance, got: {type(destination).__name__}"
        )
    if destination.__dataclass_params__.frozen:
        raise DestinationError(
            f"config must be mutable, {type(destination).__name__} is a frozen dataclass"
        )


def populate(destination: Any, lookup: Lookup | None = None) -> Any:
    """
    Populate a dataclass instance in place from environment lookups.

    - destination: a mutable (non-frozen) dataclass instance
    - lookup: key -> raw string or None (default: os.environ)
    - Returns: the same destination, for chaining
    - Raises: DestinationError before touching any field; ConversionError or
      UnsupportedTypeError on the first bad field, leaving earlier fields
      updated and later ones untouched
    """
    _check_destination(destination)
    if lookup is None:
        lookup = environ_lookup()

    for descriptor in describe(type(destination)):
        raw = lookup(descriptor.key)
        if raw is None or raw == "":
            continue
        setattr(destination, descriptor.name, convert(descriptor, raw))
        logger.debug("Bound %s from %s", descriptor.name, descriptor.key)

    return destination
