from __future__ import annotations
from enum import Enum
import re

_word_re = re.compile(r'[^0-9A-Za-z]+')


def to_snake(name: str) -> str:
    """
    Convert camelCase / PascalCase to snake_case.
    Example: 'developmentAreaId' -> 'development_area_id'
    """
    # Split an uppercase letter that starts a lowercase run
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    # Split an uppercase letter that follows a lowercase letter or digit
    s2 = re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()
    return _word_re.sub('_', s2).strip('_')


def to_camel(name: str) -> str:
    parts = [p for p in to_snake(name).split('_') if p]
    if not parts:
        return name
    return parts[0] + ''.join(p[:1].upper() + p[1:] for p in parts[1:])


def to_pascal(name: str) -> str:
    parts = [p for p in to_snake(name).split('_') if p]
    if not parts:
        return name
    return ''.join(p[:1].upper() + p[1:] for p in parts)


class Case(str, Enum):
    """Naming convention applied to field names when they are rendered as columns."""
    SNAKE = "snake"
    CAMEL = "camel"
    PASCAL = "pascal"
    UPPER_SNAKE = "upper_snake"

    def apply(self, name: str) -> str:
        if self is Case.SNAKE:
            return to_snake(name)
        if self is Case.CAMEL:
            return to_camel(name)
        if self is Case.PASCAL:
            return to_pascal(name)
        return to_snake(name).upper()


def convert(name: str, case: Case | None) -> str:
    return name if case is None else case.apply(name)


__all__ = ["Case", "convert", "to_snake", "to_camel", "to_pascal"]
