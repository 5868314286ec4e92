from .sql_routes import SqlResponse, EndpointSummary, url_query, make_router

__all__ = ["SqlResponse", "EndpointSummary", "url_query", "make_router"]
