"""
Lazy pipelines for tabular records.

Compose filtering, field selection, row mapping and header binding into a
single stage that transforms a CSV source into a derived sequence of records,
pulling one record at a time.
"""

from .adapters import do_count, do_print, read_from_file, read_from_resource, write_to_file, write_to_resource
from .exceptions import (
    AlreadyExistsError,
    BaseError,
    ConfigurationError,
    InvalidSourceError,
    NotFoundError,
    ShapeMismatchError,
    StageError,
    WriteError,
)
from .pipeline import (
    Pipeline,
    Stage,
    build_associate,
    build_filter,
    build_map,
    build_select,
    combine_stages,
    do_filter,
    do_map,
    do_select,
    to_assoc,
)

__version__ = "0.1.0"

__all__ = [
    "AlreadyExistsError",
    "BaseError",
    "ConfigurationError",
    "InvalidSourceError",
    "NotFoundError",
    "Pipeline",
    "ShapeMismatchError",
    "Stage",
    "StageError",
    "WriteError",
    "build_associate",
    "build_filter",
    "build_map",
    "build_select",
    "combine_stages",
    "do_count",
    "do_filter",
    "do_map",
    "do_print",
    "do_select",
    "read_from_file",
    "read_from_resource",
    "to_assoc",
    "write_to_file",
    "write_to_resource",
]
