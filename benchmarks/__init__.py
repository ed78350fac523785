"""
Benchmark suite for jsonmodel parsing performance.

Compares jsonmodel against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed and memory usage across different data types, for
both the value model (``jsonmodel.parse``) and plain Python objects
(``jsonmodel.loads``).
"""
