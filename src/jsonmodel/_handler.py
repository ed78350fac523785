"""
Parser event protocol.

A ``JsonParserHandler`` receives one start/end call per grammar construct.
``start_array`` and ``start_object`` return a handle chosen by the handler;
the parser passes it back unchanged to every child event of that container
and to its end event. Subclass and override the methods you need.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING
from typing import Any
from typing import Generic
from typing import TypeVar

from ._config import ParseConfig
from ._errors import JsonParseError
from ._location import Location
from ._values import FALSE
from ._values import NULL
from ._values import TRUE
from ._values import JsonArray
from ._values import JsonNumber
from ._values import JsonObject
from ._values import JsonString
from ._values import JsonValue

if TYPE_CHECKING:
    from ._parser import JsonParser

_FLOAT_MARKERS = frozenset(".eE")

A = TypeVar("A")
O = TypeVar("O")


class JsonParserHandler(Generic[A, O]):
    """
    Base handler for parser events. Every method is a no-op by default.

    ``A`` and ``O`` are the handle types returned for arrays and objects.
    """

    parser: JsonParser[A, O] | None = None

    @property
    def location(self) -> Location | None:
        """Position of the parser's lookahead character, if bound."""
        return self.parser.location if self.parser is not None else None

    def start_null(self) -> None:
        """Called before the ``null`` literal is consumed."""
        pass

    def end_null(self) -> None:
        """Called after the ``null`` literal is consumed."""
        pass

    def start_boolean(self) -> None:
        """Called before a ``true`` or ``false`` literal is consumed."""
        pass

    def end_boolean(self, value: bool) -> None:
        """Called after a boolean literal is consumed."""
        pass

    def start_string(self) -> None:
        """Called before the opening quote of a string value."""
        pass

    def end_string(self, string: str) -> None:
        """Called with the decoded text after the closing quote."""
        pass

    def start_number(self) -> None:
        """Called before the first character of a number."""
        pass

    def end_number(self, text: str) -> None:
        """Called with the exact text of the number."""
        pass

    def start_array(self) -> A | None:
        """Called before ``[``. The result is the array's handle."""
        return None

    def end_array(self, array: A | None) -> None:
        """Called after ``]``."""
        pass

    def start_array_value(self, array: A | None) -> None:
        """Called before each element."""
        pass

    def end_array_value(self, array: A | None) -> None:
        """Called after each element."""
        pass

    def start_object(self) -> O | None:
        """Called before ``{``. The result is the object's handle."""
        return None

    def end_object(self, obj: O | None) -> None:
        """Called after ``}``."""
        pass

    def start_object_name(self, obj: O | None) -> None:
        """Called before the opening quote of a member name."""
        pass

    def end_object_name(self, obj: O | None, name: str) -> None:
        """Called with the decoded member name."""
        pass

    def start_object_value(self, obj: O | None, name: str) -> None:
        """Called after the colon, before the member value."""
        pass

    def end_object_value(self, obj: O | None, name: str) -> None:
        """Called after the member value."""
        pass


class DefaultHandler(JsonParserHandler[JsonArray, JsonObject]):
    """
    Builds a value model tree.

    Container handles are the ``JsonArray``/``JsonObject`` being filled, so
    each completed child is appended as soon as its end event arrives.
    ``value`` holds the most recently completed value, which is the root
    once a parse succeeds.
    """

    def __init__(self) -> None:
        self.value: JsonValue | None = None

    def end_null(self) -> None:
        self.value = NULL

    def end_boolean(self, value: bool) -> None:
        self.value = TRUE if value else FALSE

    def end_string(self, string: str) -> None:
        self.value = JsonString(string)

    def end_number(self, text: str) -> None:
        self.value = JsonNumber(text)

    def start_array(self) -> JsonArray:
        return JsonArray()

    def end_array(self, array: JsonArray | None) -> None:
        self.value = array

    def end_array_value(self, array: JsonArray | None) -> None:
        assert array is not None
        array.add(self.value)

    def start_object(self) -> JsonObject:
        return JsonObject()

    def end_object(self, obj: JsonObject | None) -> None:
        self.value = obj

    def end_object_value(self, obj: JsonObject | None, name: str) -> None:
        assert obj is not None
        obj.add(name, self.value)


class PythonObjectHandler(
    JsonParserHandler[list[Any], list[tuple[str, Any]]]
):
    """
    Builds plain Python objects, like the standard library decoder.

    Objects become ``dict`` (the last duplicate name wins) unless
    ``object_pairs_hook`` is configured, which receives every pair in
    order and takes priority over ``object_hook``. Member names are
    interned so repeated keys share one string.
    """

    def __init__(self, config: ParseConfig | None = None) -> None:
        self.config = config or ParseConfig()
        self.value: Any = None
        self._names: dict[str, str] = {}

    def end_null(self) -> None:
        self.value = None

    def end_boolean(self, value: bool) -> None:
        self.value = value

    def end_string(self, string: str) -> None:
        self.value = string

    def end_number(self, text: str) -> None:
        config = self.config
        if not _FLOAT_MARKERS.isdisjoint(text):
            self.value = (
                config.parse_float(text) if config.parse_float else float(text)
            )
        elif config.parse_int:
            self.value = config.parse_int(text)
        else:
            limit = sys.get_int_max_str_digits()
            if limit and len(text) - text.startswith("-") > limit:
                raise JsonParseError("Number too large", self._here())
            self.value = int(text)

    def start_array(self) -> list[Any]:
        return []

    def end_array(self, array: list[Any] | None) -> None:
        self.value = array

    def end_array_value(self, array: list[Any] | None) -> None:
        assert array is not None
        array.append(self.value)

    def start_object(self) -> list[tuple[str, Any]]:
        return []

    def end_object_name(self, obj: list[tuple[str, Any]] | None, name: str) -> None:
        self._names.setdefault(name, name)

    def end_object_value(self, obj: list[tuple[str, Any]] | None, name: str) -> None:
        assert obj is not None
        obj.append((self._names.get(name, name), self.value))

    def end_object(self, obj: list[tuple[str, Any]] | None) -> None:
        assert obj is not None
        config = self.config
        if config.object_pairs_hook:
            self.value = config.object_pairs_hook(obj)
            return
        result = dict(obj)
        self.value = config.object_hook(result) if config.object_hook else result

    def _here(self) -> Location:
        return self.location or Location.START
