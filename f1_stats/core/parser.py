"""Line parser for the season results file.

Each line has the form::

    <year>,<name>: <points> <wins>(,<name>: <points> <wins>)*

for example ``2023,Max Verstappen: 575 19,Sergio Perez: 285 2``.

Parsing is tolerant: a line that cannot be read is dropped and described
by a diagnostic string instead of raising.  A season line is kept only
when every one of its driver entries parses (all-or-nothing per line).
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

from f1_stats.core.models import (
    UNKNOWN_DRIVER,
    Dataset,
    DriverResult,
    freeze_dataset,
)

_DRIVER_PATTERN: re.Pattern[str] = re.compile(r"([\w\s]+):\s(\d+(?:\.\d+)?)\s+(\d+)")
_YEAR_PATTERN: re.Pattern[str] = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a whole file.

    Attributes:
        dataset: Read-only mapping of season year to driver results.
        diagnostics: One human-readable message per rejected line or entry,
            in the order they were encountered.
    """

    dataset: Dataset
    diagnostics: tuple[str, ...]


@dataclass(frozen=True)
class LineResult:
    """Outcome of parsing a single line.

    ``season`` is ``None`` when the line was rejected.
    """

    season: tuple[int, tuple[DriverResult, ...]] | None
    diagnostics: tuple[str, ...]


# ---------------------------------------------------------------------------
# Entry and line parsing
# ---------------------------------------------------------------------------


def parse_driver(entry: str) -> DriverResult:
    """Parse one ``name: points wins`` entry.

    Never raises: an entry that does not match the grammar yields
    :data:`~f1_stats.core.models.UNKNOWN_DRIVER`.
    """
    match = _DRIVER_PATTERN.fullmatch(entry.strip())
    if match is None:
        return UNKNOWN_DRIVER
    name, points, wins = match.groups()
    try:
        result = DriverResult(name=name, points=float(points), wins=int(wins))
    except ValueError:
        # digit runs past the interpreter's int conversion limit
        return UNKNOWN_DRIVER
    if not math.isfinite(result.points):
        return UNKNOWN_DRIVER
    return result


def parse_line(line: str) -> LineResult:
    """Parse one season line into ``(year, results)`` plus diagnostics."""
    prefix, sep, remainder = line.partition(",")
    if not sep or _YEAR_PATTERN.fullmatch(prefix.strip()) is None:
        return LineResult(None, (f"Invalid line structure: {line}",))

    try:
        year = int(prefix)
    except ValueError:
        return LineResult(None, (f"Invalid line structure: {line}",))

    entries = remainder.split(",")
    drivers = tuple(parse_driver(entry) for entry in entries)

    bad_entries = tuple(
        f"Malformed driver entry: {entry}"
        for entry, driver in zip(entries, drivers)
        if driver.is_unknown
    )
    if bad_entries:
        return LineResult(None, bad_entries + (f"Year {year}: {line}",))
    return LineResult((year, drivers), ())


# ---------------------------------------------------------------------------
# Whole-file parsing
# ---------------------------------------------------------------------------


def parse_lines(lines: Iterable[str]) -> ParseResult:
    """Parse every line of a results file.

    Whitespace-only lines are skipped silently.  When the same year
    appears on more than one accepted line the last one wins.

    Args:
        lines: Raw lines, with or without trailing newlines.

    Returns:
        A :class:`ParseResult` holding the read-only dataset and the
        diagnostics collected for every rejected line or entry.
    """
    parsed = [parse_line(line.rstrip("\r\n")) for line in lines if line.strip()]
    dataset = freeze_dataset(p.season for p in parsed if p.season is not None)
    diagnostics = tuple(msg for p in parsed for msg in p.diagnostics)
    return ParseResult(dataset=dataset, diagnostics=diagnostics)
