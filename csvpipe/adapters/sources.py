"""
Record sources backed by CSV text.

Sources are generators: opening files and parsing rows only happens while the
caller pulls records, and file handles are released when the sequence is
exhausted, fails, or is closed early.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import IO, Union

from csvpipe.exceptions import InvalidSourceError, NotFoundError
from csvpipe.logger import get_logger
from csvpipe.models import RecordSequence


def read_from_resource(input_stream: IO[str], delimiter: str = ",", enclosure: str = '"') -> RecordSequence:
    """
    Read CSV rows one at a time from an open text stream.

    The stream is not closed by this function. Blank lines are skipped.

    Args:
        input_stream: Readable text stream, opened with ``newline=""`` for files
        delimiter: CSV field delimiter
        enclosure: CSV quote character

    Yields:
        One list of string fields per row

    Raises:
        InvalidSourceError: If the stream cannot be read or parsed as CSV
    """
    try:
        reader = csv.reader(input_stream, delimiter=delimiter, quotechar=enclosure)
    except (TypeError, ValueError) as e:
        raise InvalidSourceError(f"cannot read CSV from {input_stream!r}: {e}", e) from e

    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except (csv.Error, OSError, ValueError) as e:
            raise InvalidSourceError(f"probably invalid resource (line {reader.line_num}): {e}", e) from e
        if not row:
            continue
        yield row


def read_from_file(path: Union[str, Path], delimiter: str = ",", enclosure: str = '"') -> RecordSequence:
    """
    Read CSV rows one at a time from a file.

    Raises:
        NotFoundError: On the first pull, if ``path`` does not exist
        InvalidSourceError: If the file cannot be parsed as CSV
    """
    path = Path(path)
    logger = get_logger()
    if not path.is_file():
        logger.error(f"Source file not found: {path}")
        raise NotFoundError(path)

    logger.info(f"Reading records from {path}")
    with open(path, "r", newline="", encoding="utf-8") as fin:
        yield from read_from_resource(fin, delimiter, enclosure)
