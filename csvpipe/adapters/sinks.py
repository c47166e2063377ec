"""
Record sinks: drain a record sequence into a stream, a file, or a count.

Every sink pulls the whole sequence. Errors raised while producing records
propagate unchanged; failures of the sink itself are raised as WriteError.
"""

from __future__ import annotations

import csv
import os
import sys
import tempfile
from pathlib import Path
from pprint import pformat
from typing import IO, Any, List, Optional, Union

from csvpipe.exceptions import AlreadyExistsError, WriteError
from csvpipe.logger import get_logger
from csvpipe.models import RecordSource, is_associative, is_positional


def _row_values(row: Any) -> List[Any]:
    if is_associative(row):
        return list(row.values())
    if is_positional(row):
        return list(row)
    raise WriteError(f"cannot serialize {type(row).__name__} as a CSV row")


def write_to_resource(
    output_stream: IO[str], records: RecordSource, delimiter: str = ",", enclosure: str = '"'
) -> int:
    """
    Write every record as one CSV row to an open text stream.

    Associative records are written as their values, in key order. The
    stream is not closed by this function.

    Returns:
        Number of rows written

    Raises:
        WriteError: If a row cannot be written; remaining records are not pulled
    """
    try:
        writer = csv.writer(output_stream, delimiter=delimiter, quotechar=enclosure, lineterminator="\n")
    except TypeError as e:
        raise WriteError(f"cannot write CSV to {output_stream!r}: {e}", e) from e

    written = 0
    for row in records:
        values = _row_values(row)
        try:
            writer.writerow(values)
        except (csv.Error, OSError, ValueError) as e:
            raise WriteError(f"error when writing row {written + 1}: {e}", e) from e
        written += 1
    return written


def write_to_file(
    records: RecordSource,
    path: Union[str, Path],
    delimiter: str = ",",
    enclosure: str = '"',
    overwrite: bool = False,
) -> int:
    """
    Write every record as one CSV row to a file.

    Args:
        records: Records to write
        path: Destination file
        delimiter: CSV field delimiter
        enclosure: CSV quote character
        overwrite: Replace ``path`` if it already exists

    Returns:
        Number of rows written

    Raises:
        AlreadyExistsError: If ``path`` exists and ``overwrite`` is false
        WriteError: If the file cannot be opened or a row cannot be written
    """
    path = Path(path)
    logger = get_logger()
    if path.exists() and not overwrite:
        logger.error(f"Refusing to overwrite existing file: {path}")
        raise AlreadyExistsError(path)

    # records are staged next to path, and path is only replaced after the last row is written
    try:
        fout = tempfile.NamedTemporaryFile(
            "w", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False, newline="", encoding="utf-8"
        )
    except OSError as e:
        logger.error(f"Can not write to {path}: {e}")
        raise WriteError(f"can not open {path}: {e}", e) from e

    staged = Path(fout.name)
    try:
        with fout:
            written = write_to_resource(fout, records, delimiter, enclosure)
        if path.exists() and not overwrite:
            logger.error(f"Refusing to overwrite existing file: {path}")
            raise AlreadyExistsError(path)
        try:
            os.replace(staged, path)
        except OSError as e:
            raise WriteError(f"can not move output into place at {path}: {e}", e) from e
    finally:
        staged.unlink(missing_ok=True)

    logger.info(f"Wrote {written} records to {path}")
    return written

