"""Strict text parsing and formatting of scalars.

None of these accept surrounding whitespace, digit separators
(underscores) or non-ASCII digits, unlike Python's ``int()`` and ``float()``.
"""

import re
from decimal import Context, Decimal
from math import isinf, isnan

from ._common import InvalidBoolLiteral
from ._kinds import int_range, round_float32

_match_int = re.compile(r"([+-]?)([0-9]+)", re.ASCII).fullmatch
_match_decimal_float = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII
).fullmatch
# The binary exponent is mandatory, as in C99 hex float literals
_match_hex_float = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)"
    r"[pP][+-]?[0-9]+",
    re.ASCII,
).fullmatch
_SPECIAL_FLOATS = {
    "inf": float("inf"),
    "+inf": float("inf"),
    "-inf": float("-inf"),
    "infinity": float("inf"),
    "+infinity": float("inf"),
    "-infinity": float("-inf"),
    "nan": float("nan"),
}
# No signed 64-bit integer has more decimal digits than this
_MAX_INT_DIGITS = 19
# Fixed, since the thread's decimal context may have a lower precision
_FLOAT_CONTEXT = Context(prec=17)


def parse_bool(s: str) -> bool:
    if s == "true":
        return True
    elif s == "false":
        return False
    raise InvalidBoolLiteral(s)


def parse_int(s: str, bits: int) -> int:
    """Parse a base-10 signed integer, range-checked to the given width.

    Raises ValueError for invalid syntax, OverflowError if out of range.
    """
    if (m := _match_int(s)) is None:
        raise ValueError("invalid syntax")
    sign, digits = m.groups()
    digits = digits.lstrip("0") or "0"
    # Avoids converting huge digit strings (which int() refuses anyway)
    if len(digits) > _MAX_INT_DIGITS:
        raise OverflowError("value out of range")
    n = -int(digits) if sign == "-" else int(digits)
    lo, hi = int_range(bits)
    if not lo <= n <= hi:
        raise OverflowError("value out of range")
    return n


def parse_float(s: str, bits: int) -> float:
    """Parse a decimal or hexadecimal float, range-checked to the given width.

    Raises ValueError for invalid syntax, OverflowError if out of range.
    """
    if _match_decimal_float(s):
        x = float(s)
        # float() silently overflows to infinity
        if isinf(x):
            raise OverflowError("value out of range")
    elif _match_hex_float(s):
        try:
            x = float.fromhex(s)
        except OverflowError:
            raise OverflowError("value out of range") from None
    elif (special := _SPECIAL_FLOATS.get(s.lower())) is not None:
        x = special
    else:
        raise ValueError("invalid syntax")
    return round_float32(x) if bits == 32 else x


def format_float(x: float) -> str:
    """Format as the shortest decimal that round-trips, without exponent.

    >>> format_float(2.0)
    '2'
    >>> format_float(1e-7)
    '0.0000001'
    """
    if isnan(x):
        return "NaN"
    elif isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    # repr() gives the shortest round-tripping digits,
    # Decimal gets rid of the exponent and trailing zeros.
    return format(Decimal(repr(x)).normalize(_FLOAT_CONTEXT), "f")
