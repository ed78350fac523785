"""
JSON specification pass3 test from json.org test suite.

Validates parsing of nested object structure with proper
handling of string keys and values.
"""

import jsonmodel

# from https://json.org/JSON_checker/test/pass3.json
JSON = r"""
{
    "JSON Test Pattern pass3": {
        "The outermost value": "must be an object or array.",
        "In this test": "It is an object."
    }
}
"""


def test_parse() -> None:
    """
    Validates parsing and round-trip writing for nested objects.
    """
    res = jsonmodel.parse(JSON)

    out = str(res)
    assert res == jsonmodel.parse(out)
    assert jsonmodel.loads(out) == {
        "JSON Test Pattern pass3": {
            "The outermost value": "must be an object or array.",
            "In this test": "It is an object.",
        }
    }
