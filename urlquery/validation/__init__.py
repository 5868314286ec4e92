"""
Validation module for urlquery.

Caller-invoked checks that run after parsing: required parameters,
limit/offset presence and the limit cap.
"""

from .rules import (
    GLOBAL_MAX_LIMIT,
    assert_required,
    assert_limit_and_offset,
    cap_limit,
)

__all__ = [
    "GLOBAL_MAX_LIMIT",
    "assert_required",
    "assert_limit_and_offset",
    "cap_limit",
]
