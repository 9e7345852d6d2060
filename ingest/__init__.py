"""Utilities for reading source datasets and writing record collections."""

from .tsv import load_job_zones, load_source_rows, read_tsv, write_tsv

__all__ = [
    "load_job_zones",
    "load_source_rows",
    "read_tsv",
    "write_tsv",
]
