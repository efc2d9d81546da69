from __future__ import annotations

from typing import TYPE_CHECKING, Any

_UNSET: Any = object()


if TYPE_CHECKING:
    from typing import final
else:

    def final(cls):

        def init_subclass_not_allowed(cls, **kwargs):  # pragma: no cover
            raise TypeError("Subclassing not allowed")

        cls.__init_subclass__ = init_subclass_not_allowed
        return cls


def _type_name(tp: Any) -> str:
    if isinstance(tp, type):
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


class UnsupportedType(TypeError):
    """The kind of a :class:`~nullable.Nullable` has no built-in text rules
    and doesn't supply its own text conversion.

    This indicates a programming error: the container was created
    over the wrong kind.
    """

    def __init__(self, kind: Any, action: str) -> None:
        super().__init__(f"type {_type_name(kind)} cannot be {action} text")
        self.kind = kind


class InvalidBoolLiteral(ValueError):
    """Text is not one of the boolean literals ``true`` or ``false``"""

    def __init__(self, text: str | bytes) -> None:
        super().__init__(f"Invalid boolean literal: {text!r}")
        self.text = text


class ParseError(ValueError):
    """Numeric text could not be parsed, or is out of range for the kind.

    The underlying error is available as ``__cause__``.
    """

    def __init__(self, text: str | bytes, reason: BaseException) -> None:
        super().__init__(f"Couldn't unmarshal text {text!r}: {reason}")
        self.text = text
