from typing import Collection, Dict, List, Optional, Union

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from ..errors import MissingParameter, ParseError
from ..parsing import UrlQuery, parse_url_query
from ..registry import Registry


class SqlResponse(BaseModel):
    endpoint: str
    sql: str
    params: Union[List[str], Dict[str, str]]
    args: List[List[str]]
    dialect: str


class EndpointSummary(BaseModel):
    name: str
    table: Optional[str] = None
    allowedFields: List[str]
    required: List[str]
    maxLimit: int


def url_query(allowed_fields: Collection[str]):
    """
    Dependency that parses the request's own query string against
    `allowed_fields`, answering 400 on malformed input.
    """
    def _dep(request: Request) -> UrlQuery:
        try:
            return parse_url_query(request.url.query, allowed_fields, decode=True)
        except ParseError as e:
            raise HTTPException(status_code=400, detail=str(e))

    return _dep


def make_router(registry: Registry) -> APIRouter:
    router = APIRouter(tags=["sql"])

    @router.get("/endpoints", response_model=List[EndpointSummary])
    def list_endpoints():
        return [
            EndpointSummary(
                name=cfg.name,
                table=cfg.table or None,
                allowedFields=sorted(cfg.allowed_fields),
                required=cfg.required,
                maxLimit=cfg.max_limit,
            )
            for cfg in registry.endpoints.values()
        ]

    @router.get("/sql/{endpoint}", response_model=SqlResponse)
    def translate(endpoint: str, request: Request):
        try:
            cfg = registry.get(endpoint)
        except KeyError as e:
            raise HTTPException(status_code=404, detail=str(e))
        try:
            res = cfg.translate(request.url.query, decode=True)
        except (ParseError, MissingParameter) as e:
            raise HTTPException(status_code=400, detail=str(e))
        return SqlResponse(
            endpoint=endpoint,
            sql=res.sql,
            params=res.params,
            args=[[f, v] for f, v in res.args],
            dialect=res.dialect.value,
        )

    return router


__all__ = ["SqlResponse", "EndpointSummary", "url_query", "make_router"]
