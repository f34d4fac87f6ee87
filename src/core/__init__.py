"""
Core domain models, spread primitives, and invariants.

This module contains the foundational building blocks of the card engine:
the permutation table, the spread engine, date arithmetic, card and result
models, and the JSON Schema contracts for results.
"""
