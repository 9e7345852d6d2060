"""Core title normalization, expansion and identifier helpers."""

from .concepts import extract_concepts
from .expansion import expand_title
from .identifiers import to_display_name, to_identifier
from .titles import CleanedTitle, SuffixSplit, find_suffix, normalize_title

__all__ = [
    "CleanedTitle",
    "SuffixSplit",
    "expand_title",
    "extract_concepts",
    "find_suffix",
    "normalize_title",
    "to_display_name",
    "to_identifier",
]
