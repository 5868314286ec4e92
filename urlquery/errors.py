from __future__ import annotations


class ParseError(ValueError):
    """
    Base class for everything that can go wrong while turning a query string
    into a UrlQuery. A single ParseError aborts the whole parse.
    """
    message = "invalid query"

    def __init__(self, token: str | None = None):
        self.token = token
        detail = self.message if token is None else f"{self.message}: {token!r}"
        super().__init__(detail)


class InvalidFilter(ParseError):
    message = "invalid filter"


class InvalidCondition(ParseError):
    message = "invalid filter condition"


class InvalidSort(ParseError):
    message = "invalid sort"


class InvalidSortBy(ParseError):
    message = "invalid sort by"


class InvalidField(ParseError):
    message = "invalid field"


class MissingParameter(ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} is required")


__all__ = [
    "ParseError",
    "InvalidFilter",
    "InvalidCondition",
    "InvalidSort",
    "InvalidSortBy",
    "InvalidField",
    "MissingParameter",
]
