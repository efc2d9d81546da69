"""Text marshalling of :class:`~nullable.Nullable` containers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

from ._common import InvalidBoolLiteral, ParseError, UnsupportedType
from ._kinds import BOOL, narrow
from ._parse import format_float, parse_bool, parse_float, parse_int

if TYPE_CHECKING:
    from ._nullable import Nullable

Text = Union[str, bytes]

ABSENT_TEXT = frozenset(["", "null"])
"""Text that decodes to an absent value, whatever the kind"""


@runtime_checkable
class TextMarshaler(Protocol):
    """A type that formats itself as text.

    Used as a kind, it replaces the built-in rules for marshalling.
    """

    def marshal_text(self) -> Text: ...


@runtime_checkable
class TextUnmarshaler(Protocol):
    """A type that sets itself (in place) from text.

    Used as a kind, it replaces the built-in rules for unmarshalling,
    including the interpretation of empty text and ``"null"``.
    """

    def unmarshal_text(self, text: Text, /) -> None: ...


def supports_marshal(kind: object) -> bool:
    return isinstance(kind, type) and issubclass(kind, TextMarshaler)


def supports_unmarshal(kind: object) -> bool:
    return isinstance(kind, type) and issubclass(kind, TextUnmarshaler)


def marshal_text(n: Nullable, /) -> Text:
    """Format the container's value as text.

    An absent value gives empty text.

    Example
    -------
    >>> marshal_text(Nullable(INT32, 42))
    '42'
    >>> marshal_text(Nullable(FLOAT64))
    ''
    """
    if not n.present:
        return ""

    if n._marshals_itself:
        return n.value.marshal_text()

    scalar = n._scalar
    if scalar is None:
        raise UnsupportedType(n.kind, "marshalled to")
    elif scalar is BOOL:
        return "true" if n.value else "false"
    elif scalar.is_float:
        return format_float(float(n.value))
    return str(int(n.value))


def unmarshal_text(n: Nullable, text: Text, /) -> None:
    """Set the container's value from text, in place.

    Empty text and ``"null"`` make the value absent.
    On failure, the container is left in an unspecified state.

    Example
    -------
    >>> n = Nullable(INT8)
    >>> unmarshal_text(n, "-12")
    >>> n
    Nullable[INT8](-12)
    >>> unmarshal_text(n, "null")
    >>> n
    Nullable[INT8](absent)
    """
    if n._unmarshals_itself:
        if not isinstance(n.value, n.kind):
            n.value = n.kind()
        n.value.unmarshal_text(text)
        n.present = True
        return

    scalar = n._scalar
    if scalar is None:
        raise UnsupportedType(n.kind, "unmarshalled from")

    if isinstance(text, bytes):
        try:
            s = text.decode("utf-8")
        except UnicodeDecodeError as e:
            if scalar is BOOL:
                raise InvalidBoolLiteral(text) from e
            raise ParseError(text, e) from e
    else:
        s = text

    if s in ABSENT_TEXT:
        n.present = False
        return

    if scalar is BOOL:
        n.value = parse_bool(s)
    else:
        try:
            if scalar.is_float:
                parsed: float = parse_float(s, scalar.parse_bits)
            else:
                parsed = parse_int(s, scalar.parse_bits)
        except (ValueError, OverflowError) as e:
            raise ParseError(text, e) from e
        n.value = narrow(scalar, parsed)
    n.present = True
