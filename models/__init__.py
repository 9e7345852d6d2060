"""Pydantic models for occupation source rows and output records."""

from .occupations import (
    ConceptRecord,
    ConceptRelationshipRecord,
    ExpansionRecord,
    OccupationRecord,
    SourceRow,
)

__all__ = [
    "ConceptRecord",
    "ConceptRelationshipRecord",
    "ExpansionRecord",
    "OccupationRecord",
    "SourceRow",
]
