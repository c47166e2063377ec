"""
Source and sink adapters

Turn CSV streams and files into record sequences, and drain record sequences
into streams, files, counts, or diagnostic output.
"""

from .sinks import do_count, do_print, write_to_file, write_to_resource
from .sources import read_from_file, read_from_resource

__all__ = [
    "do_count",
    "do_print",
    "read_from_file",
    "read_from_resource",
    "write_to_file",
    "write_to_resource",
]
