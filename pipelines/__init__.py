"""Record assembly pipelines for occupation taxonomies."""

from __future__ import annotations

__all__ = [
    "AssemblyResult",
    "OccupationAssembler",
    "assemble_occupations",
    "run_pipeline",
]

from .occupations import AssemblyResult, OccupationAssembler, assemble_occupations, run_pipeline
