from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator

_DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [stage=%(stage)s source=%(source)s] %(name)s: %(message)s"

_stage_var: contextvars.ContextVar[str] = contextvars.ContextVar("stage", default="-")
_source_var: contextvars.ContextVar[str] = contextvars.ContextVar("source", default="-")
_DEFAULT_RECORD_FACTORY = logging.getLogRecordFactory()
_RECORD_FACTORY_INSTALLED = False


def _apply_context(record: logging.LogRecord) -> None:
    record.stage = _stage_var.get("-")
    record.source = _source_var.get("-")


class _ContextFilter(logging.Filter):
    """Inject contextual fields into log records for consistent formatting."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - logging protocol
        _apply_context(record)
        return True


def _coerce(value: str | None) -> str:
    if value is None:
        return "-"
    stripped = value.strip()
    return stripped or "-"


def configure_logging(*, level: int | str = logging.INFO) -> None:
    """Ensure the root logger formats records with the pipeline context."""

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_DEFAULT_LOG_FORMAT)
        root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers:
        formatter = handler.formatter or logging.Formatter(_DEFAULT_LOG_FORMAT)
        handler.setFormatter(formatter)
    has_filter = any(isinstance(flt, _ContextFilter) for flt in root.filters)
    if not has_filter:
        root.addFilter(_ContextFilter())
    global _RECORD_FACTORY_INSTALLED
    if not _RECORD_FACTORY_INSTALLED:
        default_factory = _DEFAULT_RECORD_FACTORY

        def _record_factory(*args: object, **kwargs: object) -> logging.LogRecord:
            record = default_factory(*args, **kwargs)
            _apply_context(record)
            return record

        logging.setLogRecordFactory(_record_factory)
        _RECORD_FACTORY_INSTALLED = True


@contextmanager
def log_context(*, stage: str | None = None, source: str | None = None) -> Iterator[None]:
    """Bind the pipeline stage and/or source file to records logged inside the block.

    Blank values are logged as ``-``. Outer values are restored on exit.
    """

    tokens: list[tuple[contextvars.ContextVar[str], contextvars.Token[str]]] = []
    if stage is not None:
        tokens.append((_stage_var, _stage_var.set(_coerce(stage))))
    if source is not None:
        tokens.append((_source_var, _source_var.set(_coerce(source))))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)
