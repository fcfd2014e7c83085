"""Fuzz testing infrastructure for localegen.

This package contains:
- shadow_resolver: Simple reference resolver for differential testing
- test_resolution_oracle: Compares resolution tables against the shadow

Python 3.13+.
"""
