"""Assemble occupation, expansion and concept records from source rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Sequence, TypeVar

from config import PipelineSettings
from core.concept_quality import Severity, analyze_concepts, group_by_severity
from core.concepts import extract_concepts
from core.expansion import expand_title
from core.identifiers import generate_short_name, to_display_name, to_identifier
from core.titles import normalize_title
from ingest.tsv import load_job_zones, load_source_rows, write_tsv
from models.occupations import (
    OCCUPATION_CATEGORY_TYPE,
    OCCUPATION_TYPE,
    ConceptRecord,
    ConceptRelationshipRecord,
    ExpansionRecord,
    OccupationRecord,
    SourceRow,
)
from nlp.semantic_parser import SemanticParser
from utils.logging_context import log_context

logger = logging.getLogger(__name__)

T = TypeVar("T")

EXAMPLE_TITLES: tuple[str, ...] = (
    "Career Counselors and Advisors",
    "Treasurers and Controllers",
    "Environmental Science and Protection Technicians, Including Health",
    "Life, Physical, and Social Science Technicians, All Other",
    "Transportation, Storage, and Distribution Managers",
    "Computer and Information Systems Managers",
)


def dedupe(items: Iterable[T], key: Callable[[T], Hashable]) -> List[T]:
    """Return ``items`` without repeats of ``key``, first occurrence wins."""

    seen: set[Hashable] = set()
    unique: List[T] = []
    for item in items:
        marker = key(item)
        if marker in seen:
            continue
        seen.add(marker)
        unique.append(item)
    return unique


@dataclass
class AssemblyResult:
    """Finalised record collections for one run."""

    occupations: List[OccupationRecord] = field(default_factory=list)
    expansions: List[ExpansionRecord] = field(default_factory=list)
    concepts: List[ConceptRecord] = field(default_factory=list)
    relationships: List[ConceptRelationshipRecord] = field(default_factory=list)
    skipped_rows: int = 0
    parser_name: str | None = None

    def summary(self) -> Dict[str, Any]:
        return {
            "occupations": len(self.occupations),
            "expansions": len(self.expansions),
            "concepts": len(self.concepts),
            "relationships": len(self.relationships),
            "skipped_rows": self.skipped_rows,
            "parser": self.parser_name or "heuristic",
        }


class OccupationAssembler:
    """Build and deduplicate the four record collections for one run.

    Rows are consumed in source order. Deduplication runs once in
    :meth:`finalize` over the complete collections: occupations and
    expansions by ``id``, concepts by ``id`` (sorted afterwards) and
    relationships by ``(fromId, toId)``. An assembler belongs to a single run.
    """

    def __init__(
        self,
        job_zones: Mapping[str, str] | None = None,
        *,
        parser: SemanticParser | None = None,
    ) -> None:
        self._job_zones = dict(job_zones or {})
        self.parser = parser
        self._occupations: List[OccupationRecord] = []
        self._expansions: List[ExpansionRecord] = []
        self._concepts: List[str] = []
        self._relationships: List[ConceptRelationshipRecord] = []
        self._skipped = 0

    def add_row(self, row: SourceRow | Mapping[str, Any]) -> OccupationRecord | None:
        """Add one source row, returning its occupation record or ``None`` if skipped."""

        source = row if isinstance(row, SourceRow) else SourceRow.model_validate(dict(row))
        if not source.is_complete:
            self._skipped += 1
            logger.debug("Skipping row without code or title: %r", source.code or source.title)
            return None

        cleaned = normalize_title(source.title)
        occupation_id = to_identifier(cleaned.text)
        if not occupation_id:
            self._skipped += 1
            logger.warning("Skipping %s: title %r yields no identifier", source.code, source.title)
            return None

        category = OCCUPATION_TYPE
        if cleaned.is_category_other and not cleaned.inclusion_note:
            category = OCCUPATION_CATEGORY_TYPE

        # Pass-through columns never override the fixed record columns.
        payload: Dict[str, Any] = {
            key: value
            for key, value in source.extras.items()
            if key not in OccupationRecord.COLUMNS and key not in OccupationRecord.model_fields
        }
        payload.update(
            id=occupation_id,
            name=source.title,
            description=source.description,
            code=source.code,
            shortName=generate_short_name(cleaned.text),
            sourceCode=source.code,
            jobZone=self._job_zones.get(source.code, ""),
            category=category,
        )
        occupation = OccupationRecord.model_validate(payload)
        self._occupations.append(occupation)

        for expansion_id in expand_title(source.title):
            if expansion_id == occupation_id:
                continue
            self._expansions.append(
                ExpansionRecord(
                    id=expansion_id,
                    name=to_display_name(expansion_id),
                    parent_code=source.code,
                    parent_id=occupation_id,
                )
            )

        for concept in extract_concepts(source.title):
            self._concepts.append(concept)
            self._relationships.append(ConceptRelationshipRecord(from_id=occupation_id, to_id=concept))
        return occupation

    def add_rows(self, rows: Iterable[SourceRow | Mapping[str, Any]]) -> None:
        for row in rows:
            self.add_row(row)

    def finalize(self) -> AssemblyResult:
        """Deduplicate the collected records and return the final collections."""

        concept_ids = sorted(dedupe(self._concepts, key=lambda concept: concept))
        result = AssemblyResult(
            occupations=dedupe(self._occupations, key=lambda record: record.id),
            expansions=dedupe(self._expansions, key=lambda record: record.id),
            concepts=[ConceptRecord(id=concept, name=to_display_name(concept)) for concept in concept_ids],
            relationships=dedupe(self._relationships, key=lambda record: record.key),
            skipped_rows=self._skipped,
            parser_name=getattr(self.parser, "name", None),
        )
        logger.info(
            "Kept %d of %d occupations and %d of %d expansions after deduplication",
            len(result.occupations),
            len(self._occupations),
            len(result.expansions),
            len(self._expansions),
        )
        return result


def assemble_occupations(
    rows: Iterable[SourceRow | Mapping[str, Any]],
    job_zones: Mapping[str, str] | None = None,
    *,
    parser: SemanticParser | None = None,
) -> AssemblyResult:
    """Run the assembler over ``rows`` and return the finalised collections."""

    assembler = OccupationAssembler(job_zones, parser=parser)
    assembler.add_rows(rows)
    return assembler.finalize()


def _extra_columns(records: Sequence[OccupationRecord]) -> List[str]:
    columns: List[str] = []
    for record in records:
        for key in record.model_extra or {}:
            if key not in columns and key not in OccupationRecord.COLUMNS:
                columns.append(key)
    return columns


def write_results(result: AssemblyResult, settings: PipelineSettings) -> Dict[str, int]:
    """Write the collections; only occupations are written when empty."""

    written: Dict[str, int] = {}
    occupation_columns = list(OccupationRecord.COLUMNS) + _extra_columns(result.occupations)
    written["occupations"] = write_tsv(
        settings.occupations_path,
        (record.to_row() for record in result.occupations),
        occupation_columns,
    )
    if result.expansions:
        written["expansions"] = write_tsv(
            settings.expansions_path,
            (record.to_row() for record in result.expansions),
            ExpansionRecord.COLUMNS,
        )
    if result.concepts:
        written["concepts"] = write_tsv(
            settings.concepts_path,
            (record.to_row() for record in result.concepts),
            ConceptRecord.COLUMNS,
        )
    if result.relationships:
        written["relationships"] = write_tsv(
            settings.concept_relationships_path,
            (record.to_row() for record in result.relationships),
            ConceptRelationshipRecord.COLUMNS,
        )
    return written


def describe_title(title: str) -> Dict[str, Any]:
    """Return the identifier, expansions and concepts derived from ``title``."""

    return {
        "title": title,
        "id": to_identifier(normalize_title(title).text),
        "expansions": expand_title(title),
        "concepts": extract_concepts(title),
    }


def log_examples(rows: Sequence[SourceRow], titles: Iterable[str] = EXAMPLE_TITLES) -> List[Dict[str, Any]]:
    """Log how showcase titles present in ``rows`` are transformed."""

    described: List[Dict[str, Any]] = []
    for title in titles:
        stem = title.split(",")[0]
        found = next((row for row in rows if row.title == title or stem in row.title), None)
        if found is None:
            continue
        details = describe_title(found.title)
        described.append(details)
        logger.info(
            "%r -> id=%s expansions=%s concepts=%s",
            details["title"],
            details["id"],
            ", ".join(details["expansions"]),
            ", ".join(details["concepts"]),
        )
    return described


def run_pipeline(
    settings: PipelineSettings,
    *,
    parser: SemanticParser | None = None,
    show_examples: bool = False,
) -> AssemblyResult:
    """Read the source, assemble records and write all output collections.

    Raises:
        SourceNotFoundError: If the source file is missing. Nothing is written.
        SourceFormatError: If the source lacks code or title columns.
    """

    with log_context(stage="read", source=settings.source_file.name):
        rows = load_source_rows(settings.source_file)
        logger.info("Found %d occupation rows in %s", len(rows), settings.source_file)
        job_zones = load_job_zones(settings.job_zones_file)

    assembler = OccupationAssembler(job_zones, parser=parser)
    with log_context(stage="assemble"):
        assembler.add_rows(rows)

    with log_context(stage="dedupe"):
        result = assembler.finalize()

    with log_context(stage="write"):
        write_results(result, settings)

    with log_context(stage="analyze"):
        issues = analyze_concepts((record.to_row() for record in result.concepts), parser=parser)
        grouped = group_by_severity(issues)
        if grouped[Severity.HIGH]:
            logger.warning("%d concept(s) look like failed expansions", len(grouped[Severity.HIGH]))
        logger.info(
            "Concept quality: %d high, %d medium, %d low",
            len(grouped[Severity.HIGH]),
            len(grouped[Severity.MEDIUM]),
            len(grouped[Severity.LOW]),
        )
        if show_examples:
            log_examples(rows)

    logger.info("Summary: %s", result.summary())
    return result


__all__ = [
    "AssemblyResult",
    "EXAMPLE_TITLES",
    "OccupationAssembler",
    "assemble_occupations",
    "dedupe",
    "describe_title",
    "log_examples",
    "run_pipeline",
    "write_results",
]
