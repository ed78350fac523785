"""
JSON value model.

Every JSON value kind is a ``JsonValue`` subclass. Numbers keep the exact
text they were parsed from and convert on demand; containers keep insertion
order, and objects keep members with duplicate names. Equality and hashing
are structural.
"""

from __future__ import annotations

import io
import math
import struct
from collections.abc import Iterator
from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any
from typing import NamedTuple

from ._writer import JsonWriter

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1
_INTEGER_CHARS = frozenset("-0123456789")


class JsonValue:
    """
    Base class of all JSON values.

    Conversions that do not apply to a kind return ``None`` instead of
    raising.
    """

    __slots__ = ()

    @property
    def is_null(self) -> bool:
        return False

    @property
    def is_boolean(self) -> bool:
        return False

    @property
    def is_true(self) -> bool:
        return False

    @property
    def is_false(self) -> bool:
        return False

    @property
    def is_number(self) -> bool:
        return False

    @property
    def is_string(self) -> bool:
        return False

    @property
    def is_array(self) -> bool:
        return False

    @property
    def is_object(self) -> bool:
        return False

    def as_boolean(self) -> bool | None:
        return None

    def as_int(self) -> int | None:
        return None

    def as_long(self) -> int | None:
        return None

    def as_float(self) -> float | None:
        return None

    def as_double(self) -> float | None:
        return None

    def as_string(self) -> str | None:
        return None

    def as_array(self) -> JsonArray | None:
        return None

    def as_object(self) -> JsonObject | None:
        return None

    def to_python(self) -> Any:
        """Converts to plain Python objects (``dict`` keeps the last duplicate)."""
        raise NotImplementedError

    def write(self, writer: JsonWriter) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        out = io.StringIO()
        JsonWriter(out).write_value(self)
        return out.getvalue()


class JsonNull(JsonValue):
    """The ``null`` literal. Use the ``NULL`` singleton."""

    __slots__ = ()
    _instance: JsonNull | None = None

    def __new__(cls) -> JsonNull:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_null(self) -> bool:
        return True

    def to_python(self) -> None:
        return None

    def write(self, writer: JsonWriter) -> None:
        writer.write_literal("null")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JsonNull)

    def __hash__(self) -> int:
        return hash(None)

    def __repr__(self) -> str:
        return "NULL"


class JsonBoolean(JsonValue):
    """``true`` or ``false``. Use the ``TRUE`` and ``FALSE`` singletons."""

    __slots__ = ("_value",)

    def __init__(self, value: bool) -> None:
        self._value = bool(value)

    @property
    def is_boolean(self) -> bool:
        return True

    @property
    def is_true(self) -> bool:
        return self._value

    @property
    def is_false(self) -> bool:
        return not self._value

    def as_boolean(self) -> bool:
        return self._value

    def to_python(self) -> bool:
        return self._value

    def write(self, writer: JsonWriter) -> None:
        writer.write_literal("true" if self._value else "false")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JsonBoolean) and other._value == self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return "TRUE" if self._value else "FALSE"


class JsonNumber(JsonValue):
    """
    A number, kept as the exact text it was written with.

    Two numbers are equal only when their text is identical, so ``0`` and
    ``0.0`` differ. The ``as_*`` conversions parse the text on each call and
    return ``None`` when it does not fit the target type.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError("text must be a string")
        self._text = text

    @property
    def is_number(self) -> bool:
        return True

    def as_int(self) -> int | None:
        return self._as_integer(_INT_MIN, _INT_MAX)

    def as_long(self) -> int | None:
        return self._as_integer(_LONG_MIN, _LONG_MAX)

    def as_float(self) -> float | None:
        double = self.as_double()
        if double is None:
            return None
        try:
            return struct.unpack("f", struct.pack("f", double))[0]
        except OverflowError:
            return None

    def as_double(self) -> float | None:
        try:
            double = float(self._text)
        except ValueError:
            return None
        if math.isinf(double) or math.isnan(double):
            return None
        return double

    def as_string(self) -> str:
        return self._text

    def _as_integer(self, low: int, high: int) -> int | None:
        # Digit count bounds the work before int() sees the text.
        if not self._text or len(self._text) > 20:
            return None
        if not _INTEGER_CHARS.issuperset(self._text):
            return None
        try:
            number = int(self._text)
        except ValueError:
            return None
        return number if low <= number <= high else None

    def to_python(self) -> int | float:
        if _INTEGER_CHARS.issuperset(self._text):
            return int(self._text)
        return float(self._text)

    def write(self, writer: JsonWriter) -> None:
        writer.write_number(self._text)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JsonNumber) and other._text == self._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"JsonNumber({self._text!r})"


class JsonString(JsonValue):
    __slots__ = ("_string",)

    def __init__(self, string: str) -> None:
        if not isinstance(string, str):
            raise TypeError("string must be a str")
        self._string = string

    @property
    def is_string(self) -> bool:
        return True

    def as_string(self) -> str:
        return self._string

    def to_python(self) -> str:
        return self._string

    def write(self, writer: JsonWriter) -> None:
        writer.write_string(self._string)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JsonString) and other._string == self._string

    def __hash__(self) -> int:
        return hash(self._string)

    def __repr__(self) -> str:
        return f"JsonString({self._string!r})"


class JsonArray(JsonValue):
    """Ordered, mutable sequence of values."""

    __slots__ = ("_values",)

    def __init__(self, values: Sequence[Any] = ()) -> None:
        self._values: list[JsonValue] = [value(item) for item in values]

    @property
    def is_array(self) -> bool:
        return True

    def as_array(self) -> JsonArray:
        return self

    def add(self, item: Any) -> JsonArray:
        """Appends ``item``, converting Python values. Returns ``self``."""
        self._values.append(value(item))
        return self

    def set(self, index: int, item: Any) -> JsonArray:
        self._values[index] = value(item)
        return self

    def remove(self, index: int) -> JsonArray:
        del self._values[index]
        return self

    def values(self) -> list[JsonValue]:
        return list(self._values)

    def to_python(self) -> list[Any]:
        return _container_to_python(self)

    def write(self, writer: JsonWriter) -> None:
        writer.write_array_open()
        for index, item in enumerate(self._values):
            if index:
                writer.write_array_separator()
            item.write(writer)
        writer.write_array_close()

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> JsonValue:
        return self._values[index]

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JsonArray) and _structurally_equal(self, other)

    def __hash__(self) -> int:
        return _structural_hash(self)

    def __repr__(self) -> str:
        return f"JsonArray({self._values!r})"


class Member(NamedTuple):
    """A name/value pair of a ``JsonObject``."""

    name: str
    value: JsonValue


class JsonObject(JsonValue):
    """
    Ordered members of a JSON object.

    Names are not required to be unique: ``add`` always appends, while
    ``get``, ``set`` and ``remove`` act on the last member with a name.
    """

    __slots__ = ("_members",)

    def __init__(
        self, members: Mapping[str, Any] | Sequence[tuple[str, Any]] = ()
    ) -> None:
        self._members: list[Member] = []
        pairs = members.items() if isinstance(members, Mapping) else members
        for name, item in pairs:
            self.add(name, item)

    @property
    def is_object(self) -> bool:
        return True

    def as_object(self) -> JsonObject:
        return self

    def add(self, name: str, item: Any) -> JsonObject:
        """Appends a member, keeping earlier ones with the same name."""
        if not isinstance(name, str):
            raise TypeError(f"name must be a str, not {type(name).__name__}")
        self._members.append(Member(name, value(item)))
        return self

    def set(self, name: str, item: Any) -> JsonObject:
        """Replaces the last member called ``name``, or appends one."""
        index = self._last_index(name)
        if index < 0:
            return self.add(name, item)
        self._members[index] = Member(name, value(item))
        return self

    def get(self, name: str) -> JsonValue | None:
        index = self._last_index(name)
        return self._members[index].value if index >= 0 else None

    def remove(self, name: str) -> JsonObject:
        index = self._last_index(name)
        if index >= 0:
            del self._members[index]
        return self

    def names(self) -> list[str]:
        return [member.name for member in self._members]

    def members(self) -> list[Member]:
        return list(self._members)

    def _last_index(self, name: str) -> int:
        for index in range(len(self._members) - 1, -1, -1):
            if self._members[index].name == name:
                return index
        return -1

    def to_python(self) -> dict[str, Any]:
        return _container_to_python(self)

    def write(self, writer: JsonWriter) -> None:
        writer.write_object_open()
        for index, (name, item) in enumerate(self._members):
            if index:
                writer.write_object_separator()
            writer.write_member_name(name)
            writer.write_member_separator()
            item.write(writer)
        writer.write_object_close()

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Member]:
        return iter(self._members)

    def __contains__(self, name: object) -> bool:
        return any(member.name == name for member in self._members)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JsonObject) and _structurally_equal(self, other)

    def __hash__(self) -> int:
        return _structural_hash(self)

    def __repr__(self) -> str:
        return f"JsonObject({self._members!r})"


NULL = JsonNull()
TRUE = JsonBoolean(True)
FALSE = JsonBoolean(False)


def value(obj: Any) -> JsonValue:
    """
    Converts a Python object to a ``JsonValue``.

    Accepts ``None``, ``bool``, ``int``, finite ``float``, ``str``, mappings
    with ``str`` keys, lists and tuples, and existing ``JsonValue``
    instances (returned unchanged). Nested containers are converted without
    recursion, so any depth the parser accepts converts too.

    Raises:
        ValueError: for non-finite floats and self-containing containers.
        TypeError: for unsupported types and non-``str`` mapping keys.
    """
    root, children = _convert(obj)
    if children is None:
        return root

    # Python containers on the path from the root to the one being filled.
    active = {id(obj)}
    stack: list[tuple[Any, Iterator[Any], int]] = [(root, children, id(obj))]
    while stack:
        target, pending, source_id = stack[-1]
        entry = next(pending, _DONE)
        if entry is _DONE:
            stack.pop()
            active.discard(source_id)
            continue
        if isinstance(target, JsonObject):
            name, item = entry
            if not isinstance(name, str):
                raise TypeError(
                    f"name must be a str, not {type(name).__name__}"
                )
            child, grandchildren = _convert(item)
            target._members.append(Member(name, child))
        else:
            item = entry
            child, grandchildren = _convert(item)
            target._values.append(child)
        if grandchildren is not None:
            if id(item) in active:
                raise ValueError("Circular reference detected")
            active.add(id(item))
            stack.append((child, grandchildren, id(item)))
    return root


_DONE = object()


def _convert(obj: Any) -> tuple[JsonValue, Iterator[Any] | None]:
    """
    Converts ``obj`` one level deep.

    Containers come back empty, together with an iterator over the items
    still to be converted into them.
    """
    if isinstance(obj, JsonValue):
        return obj, None
    if obj is None:
        return NULL, None
    if obj is True:
        return TRUE, None
    if obj is False:
        return FALSE, None
    if isinstance(obj, int):
        return JsonNumber(str(int(obj))), None
    if isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            raise ValueError("Out of range float values are not JSON compliant")
        return JsonNumber(repr(obj)), None
    if isinstance(obj, str):
        return JsonString(obj), None
    if isinstance(obj, Mapping):
        return JsonObject(), iter(obj.items())
    if isinstance(obj, list | tuple):
        return JsonArray(), iter(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _structurally_equal(left: JsonValue, right: JsonValue) -> bool:
    pending = [(left, right)]
    while pending:
        a, b = pending.pop()
        if isinstance(a, JsonArray):
            if not isinstance(b, JsonArray) or len(a) != len(b):
                return False
            pending.extend(zip(a._values, b._values))
        elif isinstance(a, JsonObject):
            if not isinstance(b, JsonObject) or len(a) != len(b):
                return False
            for (name_a, item_a), (name_b, item_b) in zip(
                a._members, b._members
            ):
                if name_a != name_b:
                    return False
                pending.append((item_a, item_b))
        elif isinstance(b, JsonArray | JsonObject) or a != b:
            return False
    return True


def _structural_hash(root: JsonValue) -> int:
    # Pre-order tokens; container sizes make the sequence unambiguous.
    tokens: list[Any] = []
    pending: list[Any] = [root]
    while pending:
        item = pending.pop()
        if isinstance(item, JsonArray):
            tokens.append(("[", len(item._values)))
            pending.extend(reversed(item._values))
        elif isinstance(item, JsonObject):
            tokens.append(("{", len(item._members)))
            for name, member_value in reversed(item._members):
                pending.append(member_value)
                pending.append(name)
        else:
            tokens.append(item)
    return hash(tuple(tokens))


def _container_to_python(root: JsonArray | JsonObject) -> Any:
    result, children = _empty_python(root)
    stack = [(result, children)]
    while stack:
        target, pending = stack[-1]
        entry = next(pending, _DONE)
        if entry is _DONE:
            stack.pop()
            continue
        if isinstance(target, dict):
            name, item = entry
        else:
            name, item = None, entry
        if isinstance(item, JsonArray | JsonObject):
            converted, grandchildren = _empty_python(item)
            stack.append((converted, grandchildren))
        else:
            converted = item.to_python()
        if name is None:
            target.append(converted)
        else:
            target[name] = converted
    return result


def _empty_python(
    container: JsonArray | JsonObject,
) -> tuple[list[Any] | dict[str, Any], Iterator[Any]]:
    if isinstance(container, JsonArray):
        return [], iter(container._values)
    return {}, iter(container._members)
