"""Nullable scalar values, with text marshalling"""

from ._common import InvalidBoolLiteral, ParseError, UnsupportedType
from ._kinds import (
    BOOL,
    FLOAT32,
    FLOAT64,
    INT,
    INT8,
    INT16,
    INT32,
    INT64,
    NATIVE_INT_BITS,
    ScalarKind,
    narrow,
)
from ._nullable import Nullable
from ._text import (
    ABSENT_TEXT,
    TextMarshaler,
    TextUnmarshaler,
    marshal_text,
    unmarshal_text,
)

__version__ = "0.1.0"

__all__ = [
    # Container
    "Nullable",
    # Kinds
    "ScalarKind",
    "BOOL",
    "INT",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "FLOAT32",
    "FLOAT64",
    "NATIVE_INT_BITS",
    "narrow",
    # Text conversion
    "marshal_text",
    "unmarshal_text",
    "TextMarshaler",
    "TextUnmarshaler",
    "ABSENT_TEXT",
    # Exceptions
    "UnsupportedType",
    "InvalidBoolLiteral",
    "ParseError",
]
