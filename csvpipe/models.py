"""
Record and record sequence types shared by every pipeline stage.

A record is either positional (an ordered list or tuple of scalar values, such
as a raw CSV row) or associative (an insertion-ordered dict of field name to
scalar value, such as a row after header binding).

A record sequence is a lazy, single-pass iterator of records. It is exhausted
after one full pull-through and offers no replay; stages always accept any
iterable and always return a fresh generator.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Iterator, List, Sequence, Tuple, Union

Scalar = Union[None, bool, int, float, str]

PositionalRecord = Union[List[Any], Tuple[Any, ...]]
AssociativeRecord = Dict[str, Any]
Record = Union[PositionalRecord, AssociativeRecord]

RecordSequence = Iterator[Any]
RecordSource = Iterable[Any]

Predicate = Callable[[Any], bool]
Mapper = Callable[[Any], Any]
StageFunction = Callable[[RecordSource], RecordSequence]


def is_associative(record: Any) -> bool:
    return isinstance(record, Mapping)


def is_positional(record: Any) -> bool:
    # str and bytes are sequences too, but never a row
    return isinstance(record, Sequence) and not isinstance(record, (str, bytes, bytearray))


def is_empty(record: Any) -> bool:
    """True for records with no fields, or whose fields are all blank."""
    if is_associative(record):
        values: Iterable[Any] = record.values()
    elif is_positional(record):
        values = record
    else:
        return not record
    return all(v is None or v == "" for v in values)
