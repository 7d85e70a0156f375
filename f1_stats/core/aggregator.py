"""Season statistics computed from a parsed results dataset.

Every function here is pure: it reads the dataset, never mutates it and
never performs I/O, so results are identical across repeated calls.
Absence (unknown year, no matching driver) is expressed as ``None`` or
an empty container rather than an exception.
"""

from __future__ import annotations

from collections import defaultdict

from f1_stats.core.models import Dataset, DriverResult


def get_winners(data: Dataset) -> dict[int, DriverResult]:
    """Return the first listed driver of every non-empty season.

    The first entry on a season line is taken to be the champion.
    Seasons without entries are omitted.
    """
    return {year: drivers[0] for year, drivers in data.items() if drivers}


def get_season_results(data: Dataset, year: int) -> tuple[DriverResult, ...] | None:
    """Return the results for *year* in file order, or ``None``."""
    return data.get(year)


def get_total_races_by_year(data: Dataset) -> dict[int, int]:
    """Sum the ``wins`` field of every driver per season.

    The name is historical: the input carries no race count, so the
    season's recorded wins stand in for it.
    """
    return {year: sum(d.wins for d in drivers) for year, drivers in data.items()}


def get_average_points_by_year(data: Dataset) -> dict[int, float]:
    """Mean points per driver for each season (0.0 for an empty season)."""
    averages: dict[int, float] = {}
    for year, drivers in data.items():
        total = sum(d.points for d in drivers)
        averages[year] = total / len(drivers) if drivers else 0.0
    return averages


def get_total_points_by_year(data: Dataset) -> list[tuple[int, float]]:
    """Total points scored per season, newest season first."""
    totals = [
        (year, float(sum(d.points for d in drivers))) for year, drivers in data.items()
    ]
    return sorted(totals, key=lambda item: -item[0])


def get_driver_points(data: Dataset, query: str) -> dict[str, float]:
    """Total points across all seasons for drivers whose name contains *query*.

    Matching is a case-insensitive substring test; totals are grouped by
    the exact driver name as written in the file.

    Args:
        data: Parsed results dataset.
        query: Full or partial driver name.

    Returns:
        ``{driver_name: total_points}``, empty when nothing matches.
    """
    needle = query.lower()
    totals: defaultdict[str, float] = defaultdict(float)
    for drivers in data.values():
        for driver in drivers:
            if needle in driver.name.lower():
                totals[driver.name] += driver.points
    return dict(totals)
