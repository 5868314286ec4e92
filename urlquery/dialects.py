from __future__ import annotations
from enum import Enum


class Dialect(str, Enum):
    """
    Placeholder style of the target database driver.
      - 'postgres'  -> $1, $2 ...     (asyncpg / numeric)
      - 'mysql'     -> ?              (qmark)
      - 'snowflake' -> %(p1)s ...     (pyformat)
    """
    POSTGRES = "postgres"
    MYSQL = "mysql"
    SNOWFLAKE = "snowflake"

    @property
    def positional(self) -> bool:
        return self is not Dialect.SNOWFLAKE

    def param_name(self, idx: int) -> str:
        return f"p{idx}"

    def placeholder(self, idx: int) -> str:
        if self is Dialect.POSTGRES:
            return f"${idx}"
        if self is Dialect.MYSQL:
            return "?"
        return f"%({self.param_name(idx)})s"


__all__ = ["Dialect"]
