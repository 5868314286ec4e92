# filters/models.py
from __future__ import annotations
from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

from ..dialects import Dialect
from ..errors import InvalidCondition, InvalidField, InvalidFilter, InvalidSort, InvalidSortBy
from ..naming import Case, convert

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

_SYMBOLS = {
    "EQ": "=",
    "NE": "!=",
    "GT": ">",
    "GE": ">=",
    "LT": "<",
    "LE": "<=",
}


class Condition(str, Enum):
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"

    @classmethod
    def parse(cls, token: str) -> "Condition":
        try:
            return cls(token)
        except ValueError:
            raise InvalidCondition(token) from None

    @property
    def token(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self.name]


class SortBy(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, token: str) -> "SortBy":
        try:
            return cls(token)
        except ValueError:
            raise InvalidSortBy(token) from None

    @property
    def keyword(self) -> str:
        return self.name


def qualify(field: str, table: str | None, case: Case | None) -> str:
    column = convert(field, case)
    return f"{table}.{column}" if table else column


# ---------------------------------------------------------------------------
# Core filter models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Filter:
    """
    One `field <condition> value` comparison. `value` stays an opaque string;
    coercing it to a column type is the database driver's job.

    Compact form used in query strings: filter[]=price-ge-200
    """
    field: str
    condition: Condition = Condition.EQ
    value: str = ""

    @classmethod
    def parse(cls, s: str, allowed_fields: Collection[str]) -> "Filter":
        # Only the first two separators count, so values may contain '-' (UUIDs, dates).
        parts = s.split("-", 2)
        if len(parts) != 3:
            raise InvalidFilter(s)
        field, condition, value = parts
        if field not in allowed_fields:
            raise InvalidField(field)
        return cls(field=field, condition=Condition.parse(condition), value=value)

    @classmethod
    def from_key_value(cls, key: str, value: str, condition: Condition = Condition.EQ) -> "Filter":
        return cls(field=key, condition=condition, value=value)

    def to_human(self) -> str:
        return f"{self.field} {self.condition.symbol} {self.value}"

    def to_token(self) -> str:
        return f"{self.field}-{self.condition.token}-{self.value}"

    def to_sql(
        self,
        idx: int,
        *,
        table: str | None = None,
        case: Case | None = None,
        dialect: Dialect = Dialect.POSTGRES,
    ) -> str:
        col = qualify(self.field, table, case)
        return f"{col} {self.condition.symbol} {dialect.placeholder(idx)}"

    def __str__(self) -> str:
        return self.to_human()


@dataclass(frozen=True)
class Sort:
    field: str
    sort_by: SortBy = SortBy.ASC

    @classmethod
    def parse(cls, s: str, allowed_fields: Collection[str]) -> "Sort":
        field, sep, direction = s.partition("-")
        if not sep:
            raise InvalidSort(s)
        if field not in allowed_fields:
            raise InvalidField(field)
        return cls(field=field, sort_by=SortBy.parse(direction))

    def to_sql(self, *, table: str | None = None, case: Case | None = None) -> str:
        return f"{qualify(self.field, table, case)} {self.sort_by.keyword}"

    def __str__(self) -> str:
        return f"{self.field}-{self.sort_by.value}"


__all__ = [
    "Condition",
    "SortBy",
    "Filter",
    "Sort",
    "qualify",
]
