"""
Test suite for complexible

Contains:
- tests/unit/          : Unit tests for kernels, value types, and contracts
"""
