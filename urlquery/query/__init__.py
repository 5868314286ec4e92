"""
Query building module for urlquery.

This module provides SQL statement generation from a parsed UrlQuery.
"""

from .builder import (
    SqlBuilder,
    SelectBuildResult,
    gen_sql,
)

__all__ = [
    "SqlBuilder",
    "SelectBuildResult",
    "gen_sql",
]
