"""
Benchmark suite for lintjson parsing and serialization performance.

Compares lintjson against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed, serialization speed and memory usage across
document shapes typical for linter configurations.
"""
