"""
Core algebra: numeric primitives, domain value types, display hooks.

This module contains the foundational building blocks that are independent
of any catalog of standard units.
"""
