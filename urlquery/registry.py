import json, os, typing as t
from dataclasses import dataclass, field
from pathlib import Path

import jsonschema
import yaml

from .dialects import Dialect
from .naming import Case
from .parsing import UrlQuery, parse_url_query
from .query import SelectBuildResult, SqlBuilder
from .validation import GLOBAL_MAX_LIMIT, cap_limit

ENDPOINTS_PATH = Path(os.getenv("ENDPOINTS_FILE", "config/endpoints.yaml"))

# ---------------------------------------------------------------------------
# JSON Schema for the endpoints file
# ---------------------------------------------------------------------------

ENDPOINT_SCHEMA: dict[str, t.Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "table": {"type": "string", "minLength": 1},
        "sql": {"type": "string", "minLength": 1},
        "columns": {"type": "array", "items": {"type": "string"}},
        "joins": {"type": "array", "items": {"type": "string"}},
        "allowedFields": {"type": "array", "items": {"type": "string"}},
        "columnTables": {"type": "object", "additionalProperties": {"type": "string"}},
        "required": {"type": "array", "items": {"type": "string"}},
        "maxLimit": {"type": "integer", "minimum": 1},
        "shiftBind": {"type": "integer", "minimum": 0},
        "case": {"enum": [c.value for c in Case] + [None]},
        "dialect": {"enum": [d.value for d in Dialect]},
    },
    "oneOf": [{"required": ["table"]}, {"required": ["sql"]}],
}

REGISTRY_SCHEMA: dict[str, t.Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Endpoints",
    "type": "object",
    "properties": {
        "endpoints": {"type": "object", "additionalProperties": ENDPOINT_SCHEMA},
    },
    "required": ["endpoints"],
}


@dataclass
class EndpointConfig:
    """
    Everything needed to translate one API endpoint's query strings:
    the allow-list plus the SELECT it renders into.
    """
    name: str
    allowed_fields: frozenset[str]
    table: str = ""
    sql: str = ""
    columns: list[str] = field(default_factory=list)
    joins: list[str] = field(default_factory=list)
    column_tables: dict[str, str] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    max_limit: int = GLOBAL_MAX_LIMIT
    shift_bind: int = 0
    case: t.Optional[Case] = Case.SNAKE
    dialect: Dialect = Dialect.POSTGRES

    @classmethod
    def from_dict(cls, name: str, data: dict[str, t.Any]) -> "EndpointConfig":
        case = data.get("case", Case.SNAKE.value)
        return cls(
            name=name,
            allowed_fields=frozenset(data.get("allowedFields", [])),
            table=data.get("table", ""),
            sql=data.get("sql", ""),
            columns=list(data.get("columns", [])),
            joins=list(data.get("joins", [])),
            column_tables=dict(data.get("columnTables", {})),
            required=list(data.get("required", [])),
            max_limit=int(data.get("maxLimit", GLOBAL_MAX_LIMIT)),
            shift_bind=int(data.get("shiftBind", 0)),
            case=None if case is None else Case(case),
            dialect=Dialect(data.get("dialect", Dialect.POSTGRES.value)),
        )

    def parse(self, raw: str, *, decode: bool = False) -> UrlQuery:
        query = parse_url_query(raw, self.allowed_fields, decode=decode)
        query.check_required(self.required)
        return cap_limit(query, self.max_limit)

    def builder(self, query: UrlQuery) -> SqlBuilder:
        b = SqlBuilder(query, dialect=self.dialect, case=self.case)
        if self.sql:
            b.raw(self.sql)
        else:
            b.select(self.table, self.columns)
        return b.join(*self.joins).map_columns(self.column_tables).shift_bind(self.shift_bind)

    def translate(self, raw: str, *, decode: bool = False) -> SelectBuildResult:
        return self.builder(self.parse(raw, decode=decode)).build()


class Registry:
    def __init__(self):
        self.endpoints: dict[str, EndpointConfig] = {}

    @classmethod
    def from_dict(cls, cfg: dict[str, t.Any]) -> "Registry":
        reg = cls()
        reg.load_dict(cfg)
        return reg

    def load_dict(self, cfg: dict[str, t.Any]) -> None:
        jsonschema.validate(instance=cfg, schema=REGISTRY_SCHEMA)
        self.endpoints = {
            name: EndpointConfig.from_dict(name, data)
            for name, data in cfg["endpoints"].items()
        }

    def load(self, path: t.Optional[Path] = None) -> None:
        path = Path(path) if path is not None else ENDPOINTS_PATH
        if not path.exists():
            raise RuntimeError(f"Endpoints file not found: {path}")
        with path.open("r", encoding="utf-8") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                cfg = yaml.safe_load(f)
            else:
                cfg = json.load(f)
        self.load_dict(cfg or {})

    def get(self, name: str) -> EndpointConfig:
        if name not in self.endpoints:
            raise KeyError(f"Unknown endpoint: {name}")
        return self.endpoints[name]

    def __contains__(self, name: str) -> bool:
        return name in self.endpoints
