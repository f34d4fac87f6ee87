"""
Test suite for Cards of Destiny engine

Contains:
- tests/unit/          : Unit tests for permutation, spread engine, derivations and service
"""
