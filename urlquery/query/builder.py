from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union
import logging

from ..dialects import Dialect
from ..filters import qualify
from ..naming import Case
from ..parsing import UrlQuery

log = logging.getLogger("urlquery.query")


class _ArgSink:
    """
    Collects (field, value) bind args and hands out placeholders.
    Numbering starts at `shift + 1` so a statement can be spliced after
    other already-bound parameters.
    """
    def __init__(self, *, shift: int = 0):
        self.shift = shift
        self.args: List[Tuple[str, str]] = []

    def add(self, field: str, value: str) -> int:
        self.args.append((field, value))
        return self.shift + len(self.args)


@dataclass
class SelectBuildResult:
    sql: str
    args: List[Tuple[str, str]] = field(default_factory=list)
    dialect: Dialect = Dialect.POSTGRES
    shift: int = 0

    @property
    def values(self) -> List[str]:
        return [value for _, value in self.args]

    @property
    def params(self) -> Union[List[str], Dict[str, str]]:
        """Bind values in the shape the driver for `dialect` expects."""
        if self.dialect.positional:
            return self.values
        return {
            self.dialect.param_name(self.shift + i): value
            for i, (_, value) in enumerate(self.args, start=1)
        }


# -----------------------------------------------------------------------------
# SELECT builder
# -----------------------------------------------------------------------------
def _normalize_columns(columns: Iterable[str]) -> str:
    """
    Turn a list of column names/expressions into a SELECT list.
    - If empty -> '*'
    - Entries are trusted caller configuration and passed through as-is.
    """
    cols = [c.strip() for c in (columns or []) if c.strip()]
    if not cols:
        return "*"
    return ", ".join(cols)


class SqlBuilder:
    """
    Renders a UrlQuery into a parameterized SELECT.

        builder = SqlBuilder(query).select("orders", ["id", "status"])
        builder.join("JOIN users ON users.id = orders.user_id")
        builder.map_columns({"userName": "users"})
        result = builder.build()

    A builder is single-use: build() consumes it.
    """

    def __init__(
        self,
        query: UrlQuery,
        *,
        dialect: Dialect = Dialect.POSTGRES,
        case: Optional[Case] = Case.SNAKE,
    ):
        self.query = query
        self.dialect = Dialect(dialect)
        self.case = None if case is None else Case(case)
        self._base: str = ""
        self._joins: List[str] = []
        self._column_tables: Dict[str, str] = {}
        self._shift = 0
        self._built = False

    def _ensure_open(self) -> None:
        if self._built:
            raise RuntimeError("SqlBuilder has already been built")

    def select(self, table: str, columns: Iterable[str] = ()) -> "SqlBuilder":
        self._ensure_open()
        self._base = f"SELECT {_normalize_columns(columns)} FROM {table}"
        return self

    def raw(self, sql: str) -> "SqlBuilder":
        self._ensure_open()
        self._base = sql.strip()
        return self

    def join(self, *fragments: str) -> "SqlBuilder":
        self._ensure_open()
        self._joins.extend(f.strip() for f in fragments if f.strip())
        return self

    def map_columns(self, column_tables: Mapping[str, str]) -> "SqlBuilder":
        self._ensure_open()
        self._column_tables.update(column_tables)
        return self

    def shift_bind(self, shift: int) -> "SqlBuilder":
        self._ensure_open()
        if shift < 0:
            raise ValueError("bind shift must not be negative")
        self._shift = shift
        return self

    def _where(self, sink: _ArgSink) -> str:
        parts: List[str] = []
        for f in self.query.filters:
            idx = sink.add(f.field, f.value)
            parts.append(
                f.to_sql(
                    idx,
                    table=self._column_tables.get(f.field),
                    case=self.case,
                    dialect=self.dialect,
                )
            )
        return " AND ".join(parts)

    def build(self) -> SelectBuildResult:
        self._ensure_open()
        if not self._base:
            raise RuntimeError("SqlBuilder needs select() or raw() before build()")
        self._built = True

        q = self.query
        sink = _ArgSink(shift=self._shift)
        clauses: List[str] = [self._base, *self._joins]

        where_body = self._where(sink)
        if where_body:
            clauses.append(f"WHERE {where_body}")

        if q.group:
            clauses.append(f"GROUP BY {qualify(q.group, self._column_tables.get(q.group), self.case)}")

        if q.sort:
            clauses.append(
                f"ORDER BY {q.sort.to_sql(table=self._column_tables.get(q.sort.field), case=self.case)}"
            )

        # OFFSET without LIMIT is dropped rather than rendered on its own.
        if q.limit is not None:
            clauses.append(f"LIMIT {q.limit}")
            if q.offset is not None:
                clauses.append(f"OFFSET {q.offset}")

        sql = " ".join(clauses)
        log.debug("Built %s with %d bind arg(s)", sql, len(sink.args))
        return SelectBuildResult(sql=sql, args=sink.args, dialect=self.dialect, shift=self._shift)


def gen_sql(
    query: UrlQuery,
    table: str,
    columns: Iterable[str],
    joins: Iterable[str] = (),
    *,
    dialect: Dialect = Dialect.POSTGRES,
    case: Optional[Case] = Case.SNAKE,
    column_tables: Optional[Mapping[str, str]] = None,
    shift: int = 0,
) -> Tuple[str, List[Any]]:
    """
    One-call form of SqlBuilder returning (sql, values).

        >>> q = UrlQuery.parse("userId=123&userName=bob", {"userId", "userName"})
        >>> gen_sql(q, "orders", ["id", "status"])
        ('SELECT id, status FROM orders WHERE user_id = $1 AND user_name = $2', ['123', 'bob'])
    """
    builder = (
        SqlBuilder(query, dialect=dialect, case=case)
        .select(table, columns)
        .join(*joins)
        .map_columns(column_tables or {})
        .shift_bind(shift)
    )
    res = builder.build()
    return res.sql, res.values


__all__ = [
    "SqlBuilder",
    "SelectBuildResult",
    "gen_sql",
]
