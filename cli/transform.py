"""CLI for turning O*NET occupation titles into occupation and concept records."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Occupation title normalizer and cartesian expander")
    parser.add_argument("--source", type=Path, help="O*NET occupation data TSV")
    parser.add_argument("--job-zones", type=Path, help="Optional job zone reference TSV")
    parser.add_argument("--output-dir", type=Path, help="Directory for the generated TSV files")
    parser.add_argument(
        "--no-parser",
        action="store_true",
        help="Skip semantic parser detection and use heuristic parsing only",
    )
    parser.add_argument(
        "--examples",
        action="store_true",
        help="Log how a few showcase titles are transformed",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Override OCCUPATIONS_LOG_LEVEL",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Run the occupation pipeline and write the four record collections.

    Example::

        python -m cli.transform --source ONET.OccupationData.tsv --output-dir .data
    """

    args = build_parser().parse_args(argv)

    from config import load_settings
    from core.errors import OccupationPipelineError
    from nlp.semantic_parser import detect_semantic_parser
    from pipelines.occupations import run_pipeline
    from utils.logging_context import configure_logging

    settings = load_settings()
    overrides: dict[str, object] = {}
    if args.source is not None:
        overrides["source_file"] = args.source
    if args.job_zones is not None:
        overrides["job_zones_file"] = args.job_zones
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    if args.no_parser:
        overrides["use_parser"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    settings = dataclasses.replace(settings, **overrides)

    configure_logging(level=settings.log_level)
    logger.info("Reading from %s", settings.source_file)

    parser = detect_semantic_parser(settings.spacy_model, enabled=settings.use_parser)
    try:
        run_pipeline(settings, parser=parser, show_examples=args.examples)
    except OccupationPipelineError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover
    main()
