"""Performance benchmarks for localegen."""
