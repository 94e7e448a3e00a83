"""structlog setup for processes that embed the palette engine."""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

from via_palette.config import Settings, settings

_LOG_LEVEL_MAP: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _warn_stderr(message: str) -> None:
    print(f"WARNING: {message}", file=sys.stderr)


class _TeeWriter:
    """Mirror log lines to stdout and a JSON-lines file.

    A file that cannot be opened or written is dropped and logging carries on
    to stdout alone.
    """

    def __init__(self, file_path: str) -> None:
        self._path = file_path
        self._file: IO[str] | None = None
        try:
            self._file = open(file_path, "a")  # noqa: SIM115
        except OSError as exc:
            _warn_stderr(f"Could not open log file {file_path!r}: {exc}. Logging to stdout only.")

    def _disable(self, action: str) -> None:
        self._file = None
        _warn_stderr(f"Log file {action} failed for {self._path!r}. File logging disabled.")

    def write(self, data: str) -> None:
        sys.stdout.write(data)
        if self._file is None:
            return
        try:
            self._file.write(data)
            self._file.flush()
        except (OSError, ValueError):
            self._disable("write")

    def flush(self) -> None:
        sys.stdout.flush()
        if self._file is None:
            return
        try:
            self._file.flush()
        except (OSError, ValueError):
            self._disable("flush")


def resolve_level(name: str) -> int:
    """Map a LOG_LEVEL string to a stdlib level, defaulting to INFO."""
    return _LOG_LEVEL_MAP.get(name.strip().upper(), logging.INFO)


def configure_logging(config: Settings | None = None) -> None:
    """Configure structlog: console output in development, JSON elsewhere.

    With LOG_FILE set, every line is also appended to that file.
    """
    cfg = config or settings
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if cfg.environment == "development":
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        # JSON lines carry the traceback as a string field
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    logger_factory: structlog.types.WrappedLogger
    if cfg.log_file:
        # PrintLoggerFactory only needs write() and flush()
        logger_factory = structlog.PrintLoggerFactory(file=_TeeWriter(cfg.log_file))  # type: ignore[arg-type]
    else:
        logger_factory = structlog.PrintLoggerFactory()

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(cfg.log_level)),
        context_class=dict,
        logger_factory=logger_factory,
        cache_logger_on_first_use=True,
    )
