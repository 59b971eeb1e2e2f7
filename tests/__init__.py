"""
Test suite for dimalgebra

Contains:
- tests/unit/          : Unit tests for numeric primitives, Dimension, Unit,
                         Measure, the algebra facade and the standards catalog
"""
