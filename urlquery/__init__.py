"""
urlquery: URL query strings to parameterized SQL.

    >>> q = parse_url_query("userId=123&filter[]=price-ge-200&sort=price-desc", {"userId", "price"})
    >>> res = SqlBuilder(q).select("orders", ["id", "status"]).build()
    >>> res.sql
    'SELECT id, status FROM orders WHERE user_id = $1 AND price >= $2 ORDER BY price DESC'
"""

from .dialects import Dialect
from .errors import (
    ParseError,
    InvalidFilter,
    InvalidCondition,
    InvalidSort,
    InvalidSortBy,
    InvalidField,
    MissingParameter,
)
from .filters import Condition, SortBy, Filter, Sort
from .naming import Case
from .parsing import UrlQuery, parse_url_query
from .query import SqlBuilder, SelectBuildResult, gen_sql

__all__ = [
    "Dialect",
    "Case",
    "ParseError",
    "InvalidFilter",
    "InvalidCondition",
    "InvalidSort",
    "InvalidSortBy",
    "InvalidField",
    "MissingParameter",
    "Condition",
    "SortBy",
    "Filter",
    "Sort",
    "UrlQuery",
    "parse_url_query",
    "SqlBuilder",
    "SelectBuildResult",
    "gen_sql",
]
