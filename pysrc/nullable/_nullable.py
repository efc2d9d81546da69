# The MIT License (MIT)
#
# Copyright (c) the nullable authors
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
from __future__ import annotations

from typing import Any, Generic, TypeVar

from ._common import _UNSET, final
from ._kinds import Kind, ScalarKind, check_value, resolve_kind
from ._text import (
    Text,
    marshal_text,
    supports_marshal,
    supports_unmarshal,
    unmarshal_text,
)

_T = TypeVar("_T")


@final
class Nullable(Generic[_T]):
    """A value of a fixed scalar kind, which may be absent.

    The kind is one of the :class:`ScalarKind` members, one of the
    Python types ``bool``, ``int`` or ``float`` (standing for
    ``BOOL``, ``INT`` and ``FLOAT64``), or a type that supplies its
    own text conversion (see :class:`TextMarshaler`
    and :class:`TextUnmarshaler`).

    Example
    -------
    >>> Nullable(INT16, 300)
    Nullable[INT16](300)
    >>> n = Nullable(float)
    >>> n
    Nullable[FLOAT64](absent)
    >>> n.unmarshal_text("2.5")
    >>> n.value
    2.5

    Note
    ----
    Containers are mutable. Reading and writing the same container from
    different threads requires external locking.
    """

    __slots__ = (
        "present",
        "value",
        "_kind",
        "_scalar",
        "_marshals_itself",
        "_unmarshals_itself",
    )

    present: bool
    """Whether a value is set. If not, :attr:`value` is meaningless."""
    value: Any
    """The value slot. Only meaningful if :attr:`present` is true."""

    def __init__(self, kind: Kind, value: Any = _UNSET) -> None:
        self._kind = kind
        # Determine the text rules once, instead of on every call
        self._scalar = scalar = resolve_kind(kind)
        self._marshals_itself = supports_marshal(kind)
        self._unmarshals_itself = supports_unmarshal(kind)

        if value is _UNSET:
            self.present = False
            self.value = None if scalar is None else scalar.zero
            return

        if scalar is not None:
            value = check_value(scalar, value)
        elif isinstance(kind, type) and not isinstance(value, kind):
            raise TypeError(
                f"Expected {kind.__qualname__}, got {type(value)!r}"
            )
        self.present = True
        self.value = value

    @classmethod
    def of(cls, kind: Kind, value: Any, /) -> Nullable:
        """Create a container with a value present"""
        return cls(kind, value)

    @classmethod
    def absent(cls, kind: Kind, /) -> Nullable:
        """Create a container without a value"""
        return cls(kind)

    @classmethod
    def parse(cls, kind: Kind, text: Text, /) -> Nullable:
        """Create a container from text.

        Inverse of :meth:`marshal_text`.

        Example
        -------
        >>> Nullable.parse(INT8, "127")
        Nullable[INT8](127)
        >>> Nullable.parse(bool, "null")
        Nullable[BOOL](absent)
        """
        n = cls(kind)
        n.unmarshal_text(text)
        return n

    @property
    def kind(self) -> Kind:
        """The kind given at construction"""
        return self._kind

    @property
    def scalar_kind(self) -> ScalarKind | None:
        """The built-in kind, or ``None`` if there are no built-in rules"""
        return self._scalar

    def get(self, default: Any = None) -> Any:
        """The value if present, otherwise the default"""
        return self.value if self.present else default

    def clear(self) -> None:
        """Make the value absent"""
        self.present = False

    def marshal_text(self) -> Text:
        """Format as text. An absent value gives empty text.

        Example
        -------
        >>> Nullable(bool, True).marshal_text()
        'true'
        >>> Nullable(FLOAT32, 0.1).marshal_text()
        '0.10000000149011612'
        """
        return marshal_text(self)

    def unmarshal_text(self, text: Text, /) -> None:
        """Set the value from text, in place.

        Empty text and ``"null"`` make the value absent.
        If an exception is raised, the container should be considered
        to be in an unspecified state.
        """
        unmarshal_text(self, text)

    def __bool__(self) -> bool:
        return self.present

    def __eq__(self, other: object) -> bool:
        """Compare for equality.

        Containers are equal if they have the same kind, and are either
        both absent or both hold equal values.

        Example
        -------
        >>> Nullable(int, 4) == Nullable(INT, 4)
        True
        >>> Nullable(INT8) == Nullable(INT16)
        False
        """
        if not isinstance(other, Nullable):
            return NotImplemented
        if (self._scalar or self._kind) != (other._scalar or other._kind):
            return False
        if self.present and other.present:
            return bool(self.value == other.value)
        return self.present is other.present

    def __repr__(self) -> str:
        name = _kind_name(self._scalar or self._kind)
        if self.present:
            return f"Nullable[{name}]({self.value!r})"
        return f"Nullable[{name}](absent)"


def _kind_name(kind: Any) -> str:
    if isinstance(kind, ScalarKind):
        return kind.name
    elif isinstance(kind, type):
        return kind.__qualname__
    return repr(kind)
