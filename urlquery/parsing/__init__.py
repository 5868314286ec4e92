"""
Query string parsing for urlquery.

This module turns a raw URL query string into a UrlQuery model.
"""

from .parser import (
    UrlQuery,
    parse_url_query,
    FILTER_KEY,
    SORT_KEY,
    GROUP_KEY,
    LIMIT_KEY,
    OFFSET_KEY,
)

__all__ = [
    "UrlQuery",
    "parse_url_query",
    "FILTER_KEY",
    "SORT_KEY",
    "GROUP_KEY",
    "LIMIT_KEY",
    "OFFSET_KEY",
]
