"""ossid performance benchmarks.

Benchmark categories:
- Identifier generation, validation, timestamp extraction and comparison
- Example record construction, processing and validation

Run benchmarks with:
    uv run pytest benchmarks/ --benchmark-only
"""
