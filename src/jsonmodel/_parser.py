"""
Recursive descent JSON parser.

The parser reads characters from a ``CharSource`` with one character of
lookahead and reports every recognized construct to a
``JsonParserHandler``. It validates strict JSON with two deliberate
deviations: ``\\f`` is not an accepted escape, and ``\\uXXXX`` escapes are
decoded one code unit at a time without joining surrogate pairs.
"""

from __future__ import annotations

import logging
import string
from typing import Generic
from typing import TypeVar

from ._config import ParseConfig
from ._errors import NESTING_TOO_DEEP
from ._errors import UNEXPECTED_CHARACTER
from ._errors import UNEXPECTED_END_OF_INPUT
from ._errors import JsonParseError
from ._handler import JsonParserHandler
from ._location import Location
from ._profiling import ProfileContext
from ._recursion import recursion_headroom
from ._source import CharSource
from ._source import TextReader

logger = logging.getLogger(__name__)

MAX_NESTING_DEPTH = 1000

# Each nesting level costs two frames (_read_value and the container reader).
_PARSE_HEADROOM = 2 * MAX_NESTING_DEPTH + 64

_WHITESPACE = frozenset(" \t\n\r")
_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)
_NUMBER_START = frozenset("-" + string.digits)
_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


A = TypeVar("A")
O = TypeVar("O")


class JsonParser(Generic[A, O]):
    """
    Drives a handler through one JSON document per ``parse`` call.

    A parser binds itself to its handler (``handler.parser``) so handlers
    can read ``handler.location`` while events arrive. Instances are not
    reentrant; use one per concurrent parse.
    """

    def __init__(
        self, handler: JsonParserHandler[A, O], config: ParseConfig | None = None
    ) -> None:
        if not isinstance(handler, JsonParserHandler):
            raise TypeError("handler must be a JsonParserHandler")
        self.handler = handler
        self.config = config or ParseConfig()
        self.depth = 0
        self._source = CharSource("")
        self._parsing = False
        handler.parser = self

    @property
    def location(self) -> Location:
        """Position of the lookahead character of the current (or last) parse."""
        return self._source.location

    def parse(
        self, source: str | TextReader, buffer_size: int | None = None
    ) -> None:
        """
        Parses one JSON document from a string or text reader.

        Raises:
            JsonParseError: on the first grammar violation.
        """
        if self._parsing:
            raise RuntimeError("parser is already running")
        if buffer_size is None:
            buffer_size = self.config.buffer_size

        self._source = CharSource(source, buffer_size)
        self.depth = 0
        self._parsing = True
        logger.debug(
            "parse started (buffer size %s)", buffer_size or "unbounded"
        )
        try:
            with (
                ProfileContext("parse") as profile,
                recursion_headroom(_PARSE_HEADROOM),
            ):
                self._skip_whitespace()
                self._read_value()
                self._skip_whitespace()
                if not self._source.is_end_of_input():
                    raise self._error(UNEXPECTED_CHARACTER)
                profile.chars = self._source.location.offset
        finally:
            self._parsing = False
        logger.debug("parse finished at offset %d", self._source.location.offset)

    def _read_value(self) -> None:
        char = self._source.current
        if char == "n":
            self._read_null()
        elif char == "t":
            self._read_true()
        elif char == "f":
            self._read_false()
        elif char == '"':
            self._read_string()
        elif char == "[":
            self._read_array()
        elif char == "{":
            self._read_object()
        elif char is not None and char in _NUMBER_START:
            self._read_number()
        else:
            raise self._expected("value")

    def _read_array(self) -> None:
        handler = self.handler
        array = handler.start_array()
        self._next()
        self._enter()
        self._skip_whitespace()
        if self._read_char("]"):
            self.depth -= 1
            handler.end_array(array)
            return
        while True:
            self._skip_whitespace()
            handler.start_array_value(array)
            self._read_value()
            handler.end_array_value(array)
            self._skip_whitespace()
            if not self._read_char(","):
                break
        if not self._read_char("]"):
            raise self._expected("',' or ']'")
        self.depth -= 1
        handler.end_array(array)

    def _read_object(self) -> None:
        handler = self.handler
        obj = handler.start_object()
        self._next()
        self._enter()
        self._skip_whitespace()
        if self._read_char("}"):
            self.depth -= 1
            handler.end_object(obj)
            return
        while True:
            self._skip_whitespace()
            handler.start_object_name(obj)
            name = self._read_name()
            handler.end_object_name(obj, name)
            self._skip_whitespace()
            if not self._read_char(":"):
                raise self._expected("':'")
            self._skip_whitespace()
            handler.start_object_value(obj, name)
            self._read_value()
            handler.end_object_value(obj, name)
            self._skip_whitespace()
            if not self._read_char(","):
                break
        if not self._read_char("}"):
            raise self._expected("',' or '}'")
        self.depth -= 1
        handler.end_object(obj)

    def _enter(self) -> None:
        self.depth += 1
        if self.depth > MAX_NESTING_DEPTH:
            raise self._error(NESTING_TOO_DEEP)

    def _read_name(self) -> str:
        if self._source.current != '"':
            raise self._expected("name")
        return self._read_string_internal()

    def _read_null(self) -> None:
        self.handler.start_null()
        self._next()
        self._read_required_char("u")
        self._read_required_char("l")
        self._read_required_char("l")
        self.handler.end_null()

    def _read_true(self) -> None:
        self.handler.start_boolean()
        self._next()
        self._read_required_char("r")
        self._read_required_char("u")
        self._read_required_char("e")
        self.handler.end_boolean(True)

    def _read_false(self) -> None:
        self.handler.start_boolean()
        self._next()
        self._read_required_char("a")
        self._read_required_char("l")
        self._read_required_char("s")
        self._read_required_char("e")
        self.handler.end_boolean(False)

    def _read_required_char(self, char: str) -> None:
        if not self._read_char(char):
            raise self._expected(f"'{char}'")

    def _read_string(self) -> None:
        self.handler.start_string()
        self.handler.end_string(self._read_string_internal())

    def _read_string_internal(self) -> str:
        source = self._source
        with ProfileContext("read_string") as profile:
            source.next()
            pieces: list[str] = []
            source.start_capture()
            while (char := source.current) != '"':
                if char == "\\":
                    pieces.append(source.end_capture())
                    pieces.append(self._read_escape())
                    source.start_capture()
                elif char is None or char < " ":
                    raise self._expected("valid string character")
                else:
                    source.next()
            pieces.append(source.end_capture())
            source.next()
            string = "".join(pieces)
            profile.chars = len(string)
        return string

    def _read_escape(self) -> str:
        source = self._source
        source.next()
        char = source.current
        if char == "u":
            digits = []
            for _ in range(4):
                source.next()
                digit = source.current
                if digit is None or digit not in _HEX_DIGITS:
                    raise self._expected("hexadecimal digit")
                digits.append(digit)
            decoded = chr(int("".join(digits), 16))
        elif char is not None and char in _ESCAPES:
            decoded = _ESCAPES[char]
        else:
            raise self._expected("valid escape sequence")
        source.next()
        return decoded

    def _read_number(self) -> None:
        source = self._source
        self.handler.start_number()
        with ProfileContext("read_number") as profile:
            source.start_capture()
            self._read_char("-")
            first_digit = source.current
            if not self._read_digit():
                raise self._expected("digit")
            if first_digit != "0":
                while self._read_digit():
                    pass
            self._read_fraction()
            self._read_exponent()
            text = source.end_capture()
            profile.chars = len(text)
            trailing = source.current
            if trailing is not None and trailing in _ALPHANUMERIC:
                raise self._error(UNEXPECTED_CHARACTER)
        self.handler.end_number(text)

    def _read_fraction(self) -> None:
        if not self._read_char("."):
            return
        if not self._read_digit():
            raise self._expected("digit")
        while self._read_digit():
            pass

    def _read_exponent(self) -> None:
        if not self._read_char("e") and not self._read_char("E"):
            return
        if not self._read_char("+"):
            self._read_char("-")
        if not self._read_digit():
            raise self._expected("digit")
        while self._read_digit():
            pass

    def _read_char(self, char: str) -> bool:
        if self._source.current != char:
            return False
        self._source.next()
        return True

    def _read_digit(self) -> bool:
        char = self._source.current
        if char is None or char not in _DIGITS:
            return False
        self._source.next()
        return True

    def _skip_whitespace(self) -> None:
        source = self._source
        while (char := source.current) is not None and char in _WHITESPACE:
            source.next()

    def _next(self) -> None:
        self._source.next()

    def _expected(self, what: str) -> JsonParseError:
        if self._source.is_end_of_input():
            return self._error(UNEXPECTED_END_OF_INPUT)
        return self._error(f"Expected {what}")

    def _error(self, message: str) -> JsonParseError:
        return JsonParseError(message, self._source.location)
