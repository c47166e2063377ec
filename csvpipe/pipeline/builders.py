"""
Factory functions binding configuration into reusable stages, plus the stock
predicates and mappers used by configuration-driven pipelines.
"""

from __future__ import annotations

from typing import Any, Iterable

from csvpipe.models import Mapper, Predicate, Record, is_associative, is_empty, is_positional

from .stages import AssociateStage, FilterStage, MapStage, SelectStage, Stage


def build_filter(predicate: Predicate, name: str = "filter") -> Stage:
    return FilterStage(predicate, name)


def build_select(fields: Iterable[str], name: str = "select") -> Stage:
    return SelectStage(fields, name)


def build_map(mapper: Mapper, name: str = "map") -> Stage:
    return MapStage(mapper, name)


def build_associate(name: str = "associate") -> Stage:
    return AssociateStage(name)


def not_empty(record: Record) -> bool:
    return not is_empty(record)


def stringify_values(record: Any) -> Any:
    """Convert every value of a record to ``str``, keeping its shape."""
    if is_associative(record):
        return {k: str(v) for k, v in record.items()}
    if is_positional(record):
        return [str(v) for v in record]
    return str(record)


def field_equals(field: str, value: Any) -> Predicate:
    """Predicate keeping associative records whose ``field`` equals ``value``."""

    def predicate(record: Record) -> bool:
        return is_associative(record) and record.get(field) == value

    return predicate
