"""
Core value types, coercion primitives, and JSON contracts.

This module contains the foundational building blocks of a chart
configuration tree that are independent of any concrete chart shape.
"""
