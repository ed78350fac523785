"""
Test data generators for JSON parsing benchmarks.

Creates JSON documents that stress different parts of the parser:
- Object member names and flat scalars (small/large objects)
- Number grammar (integers, fractions, exponents)
- Container nesting, up to the parser's depth limit
- Strings that need escapes, including control characters and surrogates
- Insignificant whitespace with mixed line endings

Documents are serialized with ``jsonmodel.dumps`` so the writer's output is
what the parser reads back. Each generator seeds its own ``random.Random``
so repeated runs benchmark identical input.
"""

import json
import random
import string
from typing import Any

import jsonmodel
from jsonmodel import MAX_NESTING_DEPTH

_SEED = 20240115
_ESCAPE_PROBABILITY = 0.3
_ESCAPABLE = '"\\/\b\n\r\t\x00\x0c\x1f\u2028'
_ASTRAL = "\U0001f600\U0001d11e\U00010348"


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "number_heavy": _generate_number_heavy,
        "nested_structure": _generate_nested_structure,
        "deep_nesting": _generate_deep_nesting,
        "string_heavy": _generate_string_heavy,
        "whitespace_heavy": _generate_whitespace_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(_SEED))


def _generate_small_object(rng: random.Random) -> str:
    """Generates a small JSON object (< 1KB) with basic key-value pairs."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "tags": ["admin", "beta"],
        "manager": None,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return jsonmodel.dumps(data)


def _generate_large_object(rng: random.Random) -> str:
    """Generates a large JSON object (> 10KB) of repeated records."""

    def record(i: int) -> dict[str, Any]:
        return {
            "id": f"rec_{i:06d}",
            "owner": _random_string(rng, 12),
            "amount": round(rng.uniform(1.0, 1000.0), 2),
            "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
            "settled": rng.choice([True, False]),
            "reference": None if rng.random() < 0.5 else _random_string(rng, 8),
            "labels": [_random_string(rng, 5) for _ in range(3)],
        }

    data = {
        "account": rng.randint(1000000, 9999999),
        "records": [record(i) for i in range(120)],
        "totals": {
            currency: round(rng.uniform(0, 1e5), 2)
            for currency in ("USD", "EUR", "GBP", "JPY")
        },
    }
    return jsonmodel.dumps(data)


def _generate_mixed_array(rng: random.Random) -> str:
    """Generates a large array with mixed data types."""
    makers = [
        lambda i: rng.randint(-1000, 1000),
        lambda i: round(rng.uniform(-100.0, 100.0), 3),
        lambda i: _random_string(rng, rng.randint(5, 30)),
        lambda i: rng.choice([True, False]),
        lambda i: None,
        lambda i: {"index": i, "value": _random_string(rng, 10)},
    ]
    return jsonmodel.dumps([rng.choice(makers)(i) for i in range(400)])


def _generate_number_heavy(rng: random.Random) -> str:
    """Generates an array of numbers covering every branch of the grammar."""
    numbers: list[Any] = []
    for _ in range(500):
        numbers.append(rng.randint(-(2**40), 2**40))
        numbers.append(rng.uniform(-1e6, 1e6))
        numbers.append(rng.uniform(-1, 1) * 10.0 ** rng.randint(-300, 300))
    return jsonmodel.dumps(numbers)


def _generate_nested_structure(rng: random.Random) -> str:
    """Generates a bushy nested structure, 7 levels deep."""

    def create_nested(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}

        return {
            "level": depth,
            "items": [create_nested(depth - 1) for _ in range(3)],
            "nested": {"data": _random_string(rng, 15)},
        }

    return jsonmodel.dumps(create_nested(7))


def _generate_deep_nesting(rng: random.Random) -> str:
    """Generates arrays and objects nested right up to the depth limit."""
    opening = []
    closing = []
    for _ in range(MAX_NESTING_DEPTH):
        if rng.random() < 0.5:
            opening.append("[")
            closing.append("]")
        else:
            opening.append('{"k":')
            closing.append("}")
    return "".join(opening) + "0" + "".join(reversed(closing))


def _generate_string_heavy(rng: random.Random) -> str:
    """Generates JSON with many strings that need escaping."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            roll = rng.random()
            if roll < _ESCAPE_PROBABILITY:
                chars.append(rng.choice(_ESCAPABLE))
            elif roll < _ESCAPE_PROBABILITY + 0.05:
                chars.append(rng.choice(_ASTRAL))
            else:
                chars.append(
                    rng.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    data = {
        "strings": [create_escaped_string() for _ in range(100)],
        "paths": {
            f"key_{i}": f"C:\\Users\\{_random_string(rng, 8)}\\file_{i}.txt"
            for i in range(20)
        },
    }
    return jsonmodel.dumps(data)


def _generate_whitespace_heavy(rng: random.Random) -> str:
    """Generates an indented document with mixed line endings."""
    data = json.loads(_generate_large_object(rng))
    lines = json.dumps(data, indent=4).split("\n")
    return "".join(
        line + rng.choice(["\n", "\r\n", "\r"]) for line in lines
    )


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(rng.choices(string.ascii_letters, k=length))
