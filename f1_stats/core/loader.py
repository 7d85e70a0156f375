"""Results file loader for the F1 statistics engine."""

from __future__ import annotations

import logging
from pathlib import Path

from f1_stats.core.models import Dataset
from f1_stats.core.parser import ParseResult, parse_lines

log = logging.getLogger(__name__)


class DataNotFoundError(FileNotFoundError):
    """The results path does not point at an existing file."""


class DataReadError(OSError):
    """The results file exists but could not be read."""


def read_results(path: str | Path) -> ParseResult:
    """Read and parse a results file, returning dataset and diagnostics.

    The whole file is read into memory before parsing.

    Args:
        path: Location of the results file.

    Returns:
        The :class:`~f1_stats.core.parser.ParseResult` for the file.

    Raises:
        DataNotFoundError: If *path* is not an existing regular file.
        DataReadError: If the file cannot be read or is not valid UTF-8.
    """
    results_path = Path(path)
    if not results_path.is_file():
        raise DataNotFoundError(f"File not found: {results_path}")

    try:
        text = results_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DataReadError(f"Error reading file {results_path}: {exc}") from exc

    return parse_lines(text.splitlines())


def load_results(path: str | Path) -> Dataset:
    """Load a results file into a read-only dataset.

    Rejected lines and entries are reported through the module logger
    and are not part of the return value.

    Raises:
        DataNotFoundError: If *path* is not an existing regular file.
        DataReadError: If the file cannot be read.
    """
    result = read_results(path)

    if result.diagnostics:
        log.warning("Malformed entries detected: %d", len(result.diagnostics))
        for message in result.diagnostics:
            log.warning("- %s", message)

    log.info("Loaded %d seasons from %s", len(result.dataset), path)
    return result.dataset
