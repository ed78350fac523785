"""
JSON parsing performance benchmarks comparing jsonmodel against standard
libraries.

Compares parsing speed across different JSON data types and sizes:
- Standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)
- jsonmodel into Python objects (``loads``)
- jsonmodel into the value model (``parse``)
- jsonmodel pulling from a stream through a small buffer
"""

import json
from collections.abc import Callable
from io import StringIO
from typing import Any

import orjson
import pytest
import ujson  # type: ignore[import-untyped]

import jsonmodel
from benchmarks.data_generators import generate_test_data

DATA_TYPES = [
    "small_object",
    "large_object",
    "mixed_array",
    "number_heavy",
    "nested_structure",
    "string_heavy",
    "whitespace_heavy",
]


def _parse_streaming(text: str) -> Any:
    return jsonmodel.parse(StringIO(text), buffer_size=256)


PARSERS: list[tuple[str, Callable[[Any], Any]]] = [
    ("stdlib_json", json.loads),
    ("orjson", orjson.loads),
    ("ujson", ujson.loads),
    ("jsonmodel_loads", jsonmodel.loads),
    ("jsonmodel_parse", jsonmodel.parse),
    ("jsonmodel_streaming", _parse_streaming),
]


class TestParsingBenchmarks:
    """Benchmarks for JSON parsing performance across different libraries."""

    @pytest.mark.parametrize("data_type", DATA_TYPES)
    @pytest.mark.parametrize("parser,parse_func", PARSERS)
    def test_parsing(
        self,
        benchmark: Any,
        parser: str,
        parse_func: Callable[[Any], Any],
        data_type: str,
    ) -> None:
        """Benchmarks one library on one kind of document."""
        benchmark.group = data_type
        test_data: Any = generate_test_data(data_type)
        if parser == "orjson":
            # orjson expects bytes for optimal performance
            test_data = test_data.encode("utf-8")

        result = benchmark(parse_func, test_data)
        assert result is not None

    @pytest.mark.benchmark(group="deep_nesting")
    @pytest.mark.parametrize(
        "parser,parse_func",
        [
            ("jsonmodel_loads", jsonmodel.loads),
            ("jsonmodel_parse", jsonmodel.parse),
        ],
    )
    def test_deep_nesting(
        self, benchmark: Any, parser: str, parse_func: Callable[[str], Any]
    ) -> None:
        """Benchmarks documents nested to the maximum permitted depth."""
        result = benchmark(parse_func, generate_test_data("deep_nesting"))
        assert result is not None


class TestParserOverhead:
    """Isolates the cost of the parser from the cost of building values."""

    @pytest.mark.benchmark(group="handler_overhead")
    def test_null_handler(self, benchmark: Any) -> None:
        """Parses with a handler that builds nothing."""
        parser = jsonmodel.JsonParser(jsonmodel.JsonParserHandler())
        test_data = generate_test_data("large_object")
        benchmark(parser.parse, test_data)

    @pytest.mark.benchmark(group="handler_overhead")
    def test_default_handler(self, benchmark: Any) -> None:
        """Parses with the handler that builds the value model."""
        test_data = generate_test_data("large_object")
        result = benchmark(jsonmodel.parse, test_data)
        assert result.is_object


@pytest.mark.benchmark(group="serialization")
@pytest.mark.parametrize(
    "writer,write_func",
    [
        ("stdlib_json", lambda v: json.dumps(v, separators=(",", ":"))),
        ("orjson", orjson.dumps),
        ("ujson", ujson.dumps),
        ("jsonmodel", jsonmodel.dumps),
    ],
)
def test_serialization(
    benchmark: Any, writer: str, write_func: Callable[[Any], Any]
) -> None:
    """Benchmarks compact serialization of a large object."""
    data = json.loads(generate_test_data("large_object"))
    result = benchmark(write_func, data)
    assert result
