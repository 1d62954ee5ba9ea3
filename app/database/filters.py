"""
Query parameter to SQLAlchemy filter translation.

Each helper returns a boolean expression or ``None`` when the parameter was
not supplied, so callers can collect them and hand the non-empty ones to a
repository (they are AND-ed together there).
"""
from typing import Any, Optional
from sqlalchemy import ColumnElement, or_


def prefix_match(column: ColumnElement[Any], value: Optional[str]) -> Optional[ColumnElement[bool]]:
    """Case-insensitive ``startswith``; LIKE wildcards in ``value`` match literally."""
    if not value:
        return None
    return column.istartswith(value, autoescape=True)


def exact_match(column: ColumnElement[Any], value: Any) -> Optional[ColumnElement[bool]]:
    if value is None or value == "":
        return None
    return column == value


def search_any(term: Optional[str], *columns: ColumnElement[Any]) -> Optional[ColumnElement[bool]]:
    """Case-insensitive substring match of ``term`` against any of ``columns``."""
    if not term:
        return None
    return or_(*(column.icontains(term, autoescape=True) for column in columns))


def combine(*conditions: Optional[ColumnElement[bool]]) -> list[ColumnElement[bool]]:
    return [condition for condition in conditions if condition is not None]
