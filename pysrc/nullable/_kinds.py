"""The scalar kinds a Nullable can hold, and width-aware conversions."""

from __future__ import annotations

import enum
import sys
from struct import pack, unpack
from typing import Any, Union

# The width of the platform's native integer
NATIVE_INT_BITS = sys.maxsize.bit_length() + 1


class ScalarKind(enum.Enum):
    """The scalar kinds with built-in text rules.

    ``INT`` is the platform-default integer. It holds values at the native
    width (see :attr:`bits`) but is parsed from text with 32-bit limits.
    """

    BOOL = "bool"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def bits(self) -> int:
        """The storage width in bits"""
        return _STORAGE_BITS[self]

    @property
    def parse_bits(self) -> int:
        """The width in bits used to range-check text input"""
        return _PARSE_BITS[self]

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_KINDS

    @property
    def is_float(self) -> bool:
        return self is ScalarKind.FLOAT32 or self is ScalarKind.FLOAT64

    @property
    def zero(self) -> bool | int | float:
        """The value an empty slot of this kind holds"""
        if self is ScalarKind.BOOL:
            return False
        elif self.is_float:
            return 0.0
        return 0

    def __repr__(self) -> str:
        return f"ScalarKind.{self.name}"


BOOL = ScalarKind.BOOL
INT = ScalarKind.INT
INT8 = ScalarKind.INT8
INT16 = ScalarKind.INT16
INT32 = ScalarKind.INT32
INT64 = ScalarKind.INT64
FLOAT32 = ScalarKind.FLOAT32
FLOAT64 = ScalarKind.FLOAT64

_INTEGER_KINDS = frozenset([INT, INT8, INT16, INT32, INT64])
_STORAGE_BITS = {
    BOOL: 1,
    INT: NATIVE_INT_BITS,
    INT8: 8,
    INT16: 16,
    INT32: 32,
    INT64: 64,
    FLOAT32: 32,
    FLOAT64: 64,
}
_PARSE_BITS = {**_STORAGE_BITS, INT: 32}
_PY_TYPES = {bool: BOOL, int: INT, float: FLOAT64}

Kind = Union[ScalarKind, type]


def resolve_kind(kind: Any) -> ScalarKind | None:
    """Determine the built-in kind for the given kind argument.

    Returns ``None`` if there are no built-in rules for it.

    >>> resolve_kind(bool)
    ScalarKind.BOOL
    >>> resolve_kind(list) is None
    True
    """
    if isinstance(kind, ScalarKind):
        return kind
    elif isinstance(kind, type):
        # Exact type lookup, so bool never resolves to INT
        return _PY_TYPES.get(kind)
    return None


def int_range(bits: int) -> tuple[int, int]:
    """The inclusive range of a signed integer of the given width"""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def round_float32(x: float) -> float:
    try:
        return unpack("<f", pack("<f", x))[0]
    except OverflowError:
        raise OverflowError("value out of range") from None


def narrow(kind: ScalarKind, value: Any) -> bool | int | float:
    """Convert a widened value down to the exact width of ``kind``.

    Integers wrap around (two's complement) to the storage width,
    float32 rounds to single precision.

    >>> narrow(INT8, 200)
    -56
    >>> narrow(FLOAT32, 0.1)
    0.10000000149011612
    """
    if kind is BOOL:
        return bool(value)
    elif kind is FLOAT32:
        return round_float32(value)
    elif kind is FLOAT64:
        return float(value)
    bits = kind.bits
    value = int(value) & ((1 << bits) - 1)
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def check_value(kind: ScalarKind, value: Any) -> bool | int | float:
    """Validate a value given directly (not via text) for the kind"""
    if kind is BOOL:
        if not isinstance(value, bool):
            raise TypeError(f"Expected bool, got {type(value)!r}")
        return value

    # bool is an int subclass, but never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a number, got {type(value)!r}")

    if kind.is_float:
        try:
            return narrow(kind, value)
        except OverflowError:
            raise ValueError(f"Value out of range for {kind.name}") from None

    if not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value)!r}")
    lo, hi = int_range(kind.bits)
    if not lo <= value <= hi:
        raise ValueError(f"Value out of range for {kind.name}: {value}")
    return int(value)
