"""
Pytest configuration and shared fixtures for jsonmodel tests.

Provides immutable test data fixtures and a handler that records parser
events together with the offset at which each one was emitted.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import jsonmodel


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    skip_reason: str = ""


class RecordingHandler(jsonmodel.JsonParserHandler[Any, Any]):
    """
    Logs every event as ``"<event> <args...> <offset>"``.

    Containers are represented by fresh empty ``JsonArray``/``JsonObject``
    handles that are never filled, so they always print as ``[]``/``{}``.
    """

    def __init__(self) -> None:
        self.events: list[str] = []
        self.last_location: jsonmodel.Location | None = None

    def _record(self, event: str, *args: Any) -> None:
        self.last_location = self.location
        assert self.last_location is not None
        parts = [event, *(str(arg) for arg in args), str(self.last_location.offset)]
        self.events.append(" ".join(parts))

    def start_null(self) -> None:
        self._record("start_null")

    def end_null(self) -> None:
        self._record("end_null")

    def start_boolean(self) -> None:
        self._record("start_boolean")

    def end_boolean(self, value: bool) -> None:
        self._record("end_boolean", str(value).lower())

    def start_string(self) -> None:
        self._record("start_string")

    def end_string(self, string: str) -> None:
        self._record("end_string", string)

    def start_number(self) -> None:
        self._record("start_number")

    def end_number(self, text: str) -> None:
        self._record("end_number", text)

    def start_array(self) -> jsonmodel.JsonArray:
        self._record("start_array")
        return jsonmodel.JsonArray()

    def end_array(self, array: Any) -> None:
        self._record("end_array", array)

    def start_array_value(self, array: Any) -> None:
        self._record("start_array_value", array)

    def end_array_value(self, array: Any) -> None:
        self._record("end_array_value", array)

    def start_object(self) -> jsonmodel.JsonObject:
        self._record("start_object")
        return jsonmodel.JsonObject()

    def end_object(self, obj: Any) -> None:
        self._record("end_object", obj)

    def start_object_name(self, obj: Any) -> None:
        self._record("start_object_name", obj)

    def end_object_name(self, obj: Any, name: str) -> None:
        self._record("end_object_name", obj, name)

    def start_object_value(self, obj: Any, name: str) -> None:
        self._record("start_object_value", obj, name)

    def end_object_value(self, obj: Any, name: str) -> None:
        self._record("end_object_value", obj, name)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def parser(handler: RecordingHandler) -> jsonmodel.JsonParser[Any, Any]:
    return jsonmodel.JsonParser(handler)


# https://json.org/JSON_checker/test/fail*.json, minus fail1 (a bare string
# is a valid document) and fail18 (19 levels is well within the limit)
JSON_CHECKER_FAILURES = [
    '["Unclosed array"',
    '{unquoted_key: "keys must be quoted"}',
    '["extra comma",]',
    '["double extra comma",,]',
    '[   , "<-- missing value"]',
    '["Comma after the close"],',
    '["Extra close"]]',
    '{"Extra comma": true,}',
    '{"Extra value after close": true} "misplaced quoted value"',
    '{"Illegal expression": 1 + 2}',
    '{"Illegal invocation": alert()}',
    '{"Numbers cannot have leading zeroes": 013}',
    '{"Numbers cannot be hex": 0x14}',
    '["Illegal backslash escape: \\x15"]',
    "[\\naked]",
    '["Illegal backslash escape: \\017"]',
    '{"Missing colon" null}',
    '{"Double colon":: null}',
    '{"Comma instead of colon", null}',
    '["Colon instead of comma": false]',
    '["Bad value", truth]',
    "['single quote']",
    '["\ttab\tcharacter\tin\tstring\t"]',
    '["tab\\   character\\   in\\  string\\  "]',
    '["line\nbreak"]',
    '["line\\\nbreak"]',
    "[0e]",
    "[0e+]",
    "[0e+-1]",
    '{"Comma instead if closing brace": true,',
    '["mismatch"}',
    # https://code.google.com/archive/p/simplejson/issues/3
    '["A\u001fZ control characters in string"]',
]

# https://json.org/JSON_checker/test/pass1.json without the \f escape
PASS1 = """[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}",
        "quotes": "&#34; \\u0022 %22 0x22 034 &#x22;",
        "\\/\\\\\\"\\uCAFE\\uBABE\\uAB98\\uFCDE\\ubcda\\uef4A\\b\\n\\r\\t`1~!@#$%^&*()_+-=[]{}|;:',./<>?"
: "A key can be any string"
    },
    0.5 ,98.6
,
99.44
,

1066,
1e1,
0.1e1,
1e-1,
1e00,2e+00,2e-00
,"rosebud"]"""


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must fail parsing.

    These cases from json.org JSON_checker ensure strict standards
    compliance and proper error handling for malformed JSON.
    """
    return [
        JsonTestCase(
            description=f"JSON_checker failure {idx}",
            input_data=doc,
            should_fail=True,
        )
        for idx, doc in enumerate(JSON_CHECKER_FAILURES)
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must parse successfully.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data=PASS1,
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases with their Python equivalents.
    """
    return [
        JsonTestCase("null value", "null", False, None),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42),
        JsonTestCase("negative integer", "-17", False, -17),
        JsonTestCase("float", "3.14", False, 3.14),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, []),
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1, 2, 3]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
    ]


def nested_arrays(depth: int) -> str:
    return "[" * depth + "]" * depth


def nested_objects(depth: int) -> str:
    return '{"foo":' * (depth - 1) + "{}" + "}" * (depth - 1)
