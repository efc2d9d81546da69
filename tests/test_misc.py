import pytest

import nullable
from nullable import (
    InvalidBoolLiteral,
    ParseError,
    ScalarKind,
    UnsupportedType,
)


def test_exceptions():
    assert issubclass(UnsupportedType, TypeError)
    assert issubclass(InvalidBoolLiteral, ValueError)
    assert issubclass(ParseError, ValueError)


def test_version():
    from nullable import __version__

    assert isinstance(__version__, str)


def test_no_attr_on_module():
    with pytest.raises((AttributeError, ImportError), match="DoesntExist"):
        from nullable import DoesntExist  # type: ignore[attr-defined] # noqa


def test_all_exported():
    for name in nullable.__all__:
        assert hasattr(nullable, name)


def test_kind_constants():
    for kind in ScalarKind:
        assert getattr(nullable, kind.name) is kind
