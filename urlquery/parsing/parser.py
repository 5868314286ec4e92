from __future__ import annotations
from collections.abc import Collection
from dataclasses import dataclass, field
from typing import Optional, Tuple
from urllib.parse import unquote_plus
import logging

from ..errors import InvalidField, MissingParameter
from ..filters import Condition, Filter, Sort

log = logging.getLogger("urlquery.parsing")

FILTER_KEY = "filter[]"
SORT_KEY = "sort"
GROUP_KEY = "group"
LIMIT_KEY = "limit"
OFFSET_KEY = "offset"


@dataclass(frozen=True)
class UrlQuery:
    """
    Parsed form of a URL query string.

    `params` only records which plain keys were present (for required-field
    checks); their values live in `filters` as implicit equality filters, in
    the same left-to-right order as the input.
    """
    params: frozenset[str] = frozenset()
    filters: Tuple[Filter, ...] = ()
    group: Optional[str] = None
    sort: Optional[Sort] = None
    limit: Optional[str] = None
    offset: Optional[str] = None

    @classmethod
    def parse(cls, raw: str, allowed_fields: Collection[str], *, decode: bool = False) -> "UrlQuery":
        return parse_url_query(raw, allowed_fields, decode=decode)

    @property
    def limit_offset(self) -> Tuple[Optional[str], Optional[str]]:
        return self.limit, self.offset

    def check_required(self, required: Collection[str]) -> None:
        for name in required:
            if name not in self.params:
                raise MissingParameter(name)

    def check_limit(self) -> str:
        if self.limit is None:
            raise MissingParameter(LIMIT_KEY)
        return self.limit

    def check_offset(self) -> str:
        if self.offset is None:
            raise MissingParameter(OFFSET_KEY)
        return self.offset

    def check_limit_and_offset(self) -> Tuple[str, str]:
        return self.check_limit(), self.check_offset()


@dataclass
class _Draft:
    params: set[str] = field(default_factory=set)
    filters: list[Filter] = field(default_factory=list)
    group: Optional[str] = None
    sort: Optional[Sort] = None
    limit: Optional[str] = None
    offset: Optional[str] = None

    def freeze(self) -> UrlQuery:
        return UrlQuery(
            params=frozenset(self.params),
            filters=tuple(self.filters),
            group=self.group,
            sort=self.sort,
            limit=self.limit,
            offset=self.offset,
        )


def _split_pairs(raw: str, decode: bool):
    for token in raw.split("&"):
        key, sep, value = token.partition("=")
        if not sep:
            # bare flags like `?debug` carry nothing we can use
            continue
        if decode:
            key, value = unquote_plus(key), unquote_plus(value)
        yield key, value


def parse_url_query(raw: str, allowed_fields: Collection[str], *, decode: bool = False) -> UrlQuery:
    """
    Parse `raw` (the part of the URL after '?') against `allowed_fields`.

    Reserved keys:
      - filter[]=field-cond-value  -> appended to filters
      - sort=field-asc|desc        -> last one wins
      - group=field
      - limit=N, offset=N          -> kept verbatim
    Every other key must be an allowed field and becomes an implicit
    `key-eq-value` filter.

    Raises a ParseError subclass on the first bad token; nothing partial is returned.
    """
    draft = _Draft()

    for key, value in _split_pairs(raw, decode):
        if key == FILTER_KEY:
            draft.filters.append(Filter.parse(value, allowed_fields))
        elif key == SORT_KEY:
            draft.sort = Sort.parse(value, allowed_fields)
        elif key == GROUP_KEY:
            if value not in allowed_fields:
                raise InvalidField(value)
            draft.group = value
        elif key == LIMIT_KEY:
            draft.limit = value
        elif key == OFFSET_KEY:
            draft.offset = value
        else:
            if key not in allowed_fields:
                raise InvalidField(key)
            if key in draft.params:
                log.warning("Repeated parameter %r: each occurrence adds its own equality filter", key)
            draft.params.add(key)
            draft.filters.append(Filter.from_key_value(key, value, Condition.EQ))

    query = draft.freeze()
    log.debug("Parsed %r into %d filter(s)", raw, len(query.filters))
    return query


__all__ = [
    "UrlQuery",
    "parse_url_query",
    "FILTER_KEY",
    "SORT_KEY",
    "GROUP_KEY",
    "LIMIT_KEY",
    "OFFSET_KEY",
]
