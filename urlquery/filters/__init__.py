"""
Filter and sort primitives for urlquery.

This module provides the comparison operators, the `field-condition-value`
filter token and the `field-direction` sort token.
"""

from .models import (
    Condition,
    SortBy,
    Filter,
    Sort,
    qualify,
)

__all__ = [
    "Condition",
    "SortBy",
    "Filter",
    "Sort",
    "qualify",
]
