"""
Lazy record processing primitives.

Each function takes any iterable of records and returns a generator. Nothing
is pulled from the input until the returned generator is advanced, so errors
raised while producing a record surface exactly when that record is pulled.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from csvpipe.exceptions import ShapeMismatchError
from csvpipe.models import (
    AssociativeRecord,
    Mapper,
    Predicate,
    RecordSequence,
    RecordSource,
    is_associative,
    is_positional,
)


def to_assoc(records: RecordSource) -> RecordSequence:
    """
    Bind every record to the field names found in the first record.

    The first record is consumed as the header and is not yielded. Each
    following record is zipped against the header into a dict.

    Args:
        records: Positional records, header first

    Yields:
        One associative record per data row

    Raises:
        ShapeMismatchError: When a record is not positional, or its length
            differs from the header's
    """
    header: Optional[List[Any]] = None
    for row_number, row in enumerate(records, start=1):
        if not is_positional(row):
            raise ShapeMismatchError("expected a positional record", record=row, row_number=row_number)
        if header is None:
            header = list(row)
            continue
        if len(row) != len(header):
            raise ShapeMismatchError.length_mismatch(header, row, row_number)
        yield dict(zip(header, row))


def do_select(records: RecordSource, fields: Iterable[str]) -> RecordSequence:
    """
    Keep only the given fields of associative records.

    Fields keep the order they have in the record. Requested fields missing
    from a record are left out of that output record.
    """
    wanted = set(fields)
    for row in records:
        if not is_associative(row):
            raise ShapeMismatchError("expected an associative record", record=row)
        selected: AssociativeRecord = {k: v for k, v in row.items() if k in wanted}
        yield selected


def do_filter(records: RecordSource, predicate: Predicate) -> RecordSequence:
    """Yield the records for which ``predicate`` returns a truthy value."""
    for row in records:
        if predicate(row):
            yield row


def do_map(records: RecordSource, mapper: Mapper) -> RecordSequence:
    """Yield ``mapper(record)`` for every record."""
    for row in records:
        yield mapper(row)


def pass_through(records: RecordSource) -> RecordSequence:
    """Re-yield every record unchanged."""
    for row in records:
        yield row
