"""Compact JSON text writer for the value model."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Protocol

from ._recursion import recursion_headroom

if TYPE_CHECKING:
    from ._values import JsonValue

# Form feed is written as \u000c: the parser does not accept a \f escape.
_ESCAPES: dict[int, str] = {code: f"\\u{code:04x}" for code in range(0x20)}
_ESCAPES.update(
    {
        ord('"'): '\\"',
        ord("\\"): "\\\\",
        ord("\b"): "\\b",
        ord("\n"): "\\n",
        ord("\r"): "\\r",
        ord("\t"): "\\t",
        0x2028: "\\u2028",
        0x2029: "\\u2029",
    }
)

_WRITE_HEADROOM = 2048


class TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


def escape_string(string: str) -> str:
    """Returns ``string`` as a quoted JSON string literal."""
    return '"' + string.translate(_ESCAPES) + '"'


class JsonWriter:
    """
    Writes JSON tokens without insignificant whitespace.

    Values drive the writer through ``JsonValue.write``; ``write_value`` is
    the entry point for a whole tree.
    """

    def __init__(self, out: TextSink) -> None:
        if not hasattr(out, "write"):
            raise TypeError("out must have a write() method")
        self._out = out

    def write_value(self, value: JsonValue) -> None:
        with recursion_headroom(_WRITE_HEADROOM):
            value.write(self)

    def write_literal(self, text: str) -> None:
        self._out.write(text)

    def write_number(self, text: str) -> None:
        self._out.write(text)

    def write_string(self, string: str) -> None:
        self._out.write(escape_string(string))

    def write_array_open(self) -> None:
        self._out.write("[")

    def write_array_close(self) -> None:
        self._out.write("]")

    def write_array_separator(self) -> None:
        self._out.write(",")

    def write_object_open(self) -> None:
        self._out.write("{")

    def write_object_close(self) -> None:
        self._out.write("}")

    def write_member_name(self, name: str) -> None:
        self._out.write(escape_string(name))

    def write_member_separator(self) -> None:
        self._out.write(":")

    def write_object_separator(self) -> None:
        self._out.write(",")
