"""
Streaming JSON parser and value model.

Parses JSON text from strings or text readers through a fixed-size buffer,
reporting exact offset/line/column positions on errors. Documents are
delivered as events to a ``JsonParserHandler``; the default handler builds
a ``JsonValue`` tree that keeps number text verbatim and preserves member
order (duplicates included), and the writer turns it back into compact
text.
"""

import logging
from typing import IO
from typing import Any

from ._config import ParseConfig
from ._errors import JsonParseError
from ._handler import DefaultHandler
from ._handler import JsonParserHandler
from ._handler import PythonObjectHandler
from ._location import Location
from ._location import PositionTracker
from ._parser import MAX_NESTING_DEPTH
from ._parser import JsonParser
from ._profiling import HotPathStats
from ._profiling import clear_hot_path_stats
from ._profiling import get_hot_path_stats
from ._source import DEFAULT_BUFFER_SIZE
from ._source import CharSource
from ._source import TextReader
from ._values import FALSE
from ._values import NULL
from ._values import TRUE
from ._values import JsonArray
from ._values import JsonBoolean
from ._values import JsonNull
from ._values import JsonNumber
from ._values import JsonObject
from ._values import JsonString
from ._values import JsonValue
from ._values import Member
from ._values import value
from ._writer import JsonWriter
from ._writer import escape_string

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def parse(source: str | TextReader, buffer_size: int | None = None) -> JsonValue:
    """
    Parses a JSON document into a ``JsonValue`` tree.

    Accepts a string or any object with a ``read(size)`` method returning
    text. ``buffer_size`` bounds how many characters are read at a time.

    Raises:
        JsonParseError: if the input is not valid JSON.
    """
    handler = DefaultHandler()
    JsonParser(handler).parse(source, buffer_size)
    assert handler.value is not None
    return handler.value


def loads(s: str, **kwargs: Any) -> Any:
    """
    Parses a JSON string into plain Python objects.

    Keyword arguments are ``ParseConfig`` fields: ``parse_int``,
    ``parse_float``, ``object_hook``, ``object_pairs_hook`` and
    ``buffer_size``.
    """
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON object must be str, not {type(s).__name__}"
        )
    return _load(s, ParseConfig(**kwargs))


def load(fp: IO[str], **kwargs: Any) -> Any:
    """Parses JSON from a text file-like object, reading it in chunks."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")
    config = ParseConfig(**kwargs)
    if config.buffer_size is None:
        config = ParseConfig(**{**kwargs, "buffer_size": DEFAULT_BUFFER_SIZE})
    return _load(fp, config)


def _load(source: str | TextReader, config: ParseConfig) -> Any:
    handler = PythonObjectHandler(config)
    JsonParser(handler, config).parse(source)
    return handler.value


def dumps(obj: Any) -> str:
    """Serializes Python objects or ``JsonValue`` trees to compact JSON."""
    return str(value(obj))


def dump(obj: Any, fp: IO[str]) -> None:
    """Serializes ``obj`` as compact JSON to a text file-like object."""
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")
    JsonWriter(fp).write_value(value(obj))


__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "FALSE",
    "MAX_NESTING_DEPTH",
    "NULL",
    "TRUE",
    "CharSource",
    "DefaultHandler",
    "HotPathStats",
    "JsonArray",
    "JsonBoolean",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonParseError",
    "JsonParser",
    "JsonParserHandler",
    "JsonString",
    "JsonValue",
    "JsonWriter",
    "Location",
    "Member",
    "ParseConfig",
    "PositionTracker",
    "PythonObjectHandler",
    "TextReader",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "escape_string",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
    "value",
]
