import os
from dataclasses import replace
from typing import Collection, Optional, Tuple

from ..parsing import UrlQuery

GLOBAL_MAX_LIMIT = int(os.getenv("GLOBAL_MAX_LIMIT", "1000"))


def assert_required(query: UrlQuery, required: Collection[str]) -> None:
    query.check_required(required)


def assert_limit_and_offset(query: UrlQuery) -> Tuple[str, str]:
    return query.check_limit_and_offset()


def cap_limit(query: UrlQuery, max_limit: Optional[int] = None) -> UrlQuery:
    """
    Clamp a numeric `limit` to `max_limit` (filling it in when absent).
    Anything that is not a plain integer is passed through untouched so the
    driver rejects it the same way it would without a cap.
    """
    cap = GLOBAL_MAX_LIMIT if max_limit is None else int(max_limit)
    if query.limit is None:
        return replace(query, limit=str(cap))
    if not (query.limit.isascii() and query.limit.isdigit()):
        return query
    if int(query.limit) <= cap:
        return query
    return replace(query, limit=str(cap))
