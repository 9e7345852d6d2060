"""CLI for scanning a generated concepts TSV for parsing problems."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence


def main(argv: Sequence[str] | None = None) -> None:
    """Print a severity-grouped report and exit non-zero on high severity issues.

    Example::

        python -m cli.analyze_concepts --concepts .data/OccupationConcepts.tsv
    """

    parser = argparse.ArgumentParser(description="Concept quality analyzer")
    parser.add_argument("--concepts", type=Path, help="Concepts TSV (defaults to the configured output)")
    parser.add_argument("--no-parser", action="store_true", help="Skip semantic parser detection")
    args = parser.parse_args(argv)

    from config import load_settings
    from core.concept_quality import Severity, analyze_concepts, format_report, group_by_severity
    from core.errors import OccupationPipelineError
    from ingest.tsv import read_tsv
    from nlp.semantic_parser import detect_semantic_parser
    from utils.logging_context import configure_logging, log_context

    settings = load_settings()
    configure_logging(level=settings.log_level)
    concepts_path = args.concepts or settings.concepts_path

    with log_context(stage="analyze", source=concepts_path.name):
        try:
            concepts = read_tsv(concepts_path)
        except OccupationPipelineError as exc:
            raise SystemExit(str(exc)) from exc
        semantic_parser = detect_semantic_parser(
            settings.spacy_model,
            enabled=settings.use_parser and not args.no_parser,
        )
        issues = analyze_concepts(concepts, parser=semantic_parser)

    print(format_report(issues, len(concepts)))
    if group_by_severity(issues)[Severity.HIGH]:
        raise SystemExit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
