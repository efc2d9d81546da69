from nullable import (
    BOOL,
    FLOAT32,
    FLOAT64,
    INT,
    INT8,
    INT16,
    INT32,
    INT64,
)

# A present value for each kind, used in tests that cover all kinds
SAMPLE_VALUES = {
    BOOL: True,
    INT: -7,
    INT8: 100,
    INT16: -30_000,
    INT32: 42,
    INT64: 2**40,
    FLOAT32: 1.5,
    FLOAT64: 2.5,
    bool: False,
    int: 3,
    float: -0.25,
}


class AlwaysEqual:
    def __eq__(self, _):
        return True


class NeverEqual:
    def __eq__(self, _):
        return False


class Celsius:
    """A type with its own text format, e.g. ``21.5C``"""

    def __init__(self, degrees: float = 0.0) -> None:
        self.degrees = degrees

    def marshal_text(self) -> str:
        return f"{self.degrees}C"

    def unmarshal_text(self, text) -> None:
        if isinstance(text, bytes):
            text = text.decode()
        if not text.endswith("C"):
            raise ValueError(f"Not a temperature: {text!r}")
        self.degrees = float(text[:-1])

    def __eq__(self, other):
        if not isinstance(other, Celsius):
            return NotImplemented
        return self.degrees == other.degrees


class Shouting:
    """Formats itself, but has no way to parse"""

    def __init__(self, word: str = "") -> None:
        self.word = word

    def marshal_text(self) -> str:
        return self.word.upper() + "!"


class Broken:
    def marshal_text(self) -> str:
        raise RuntimeError("can't format")

    def unmarshal_text(self, text) -> None:
        raise RuntimeError("can't parse")


class Point:
    """No text conversion at all"""

    def __init__(self, x: int = 0, y: int = 0) -> None:
        self.x = x
        self.y = y
