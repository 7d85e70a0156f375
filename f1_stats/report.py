"""Tabular rendering of aggregation results.

Each ``*_table`` function turns the output of one
:mod:`f1_stats.core.aggregator` query into a :class:`pandas.DataFrame`
with display ordering applied; :func:`render` formats a frame as
fixed-width text for the console.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import pandas as pd

from f1_stats.core.models import DriverResult


def _one_decimal(value: float) -> str:
    return f"{value:.1f}"


def _two_decimals(value: float) -> str:
    return f"{value:.2f}"


# Column formatters shared by every table.
_FORMATTERS = {
    "Points": _one_decimal,
    "Total Points": _one_decimal,
    "Average Points": _two_decimals,
}


def render(frame: pd.DataFrame) -> str:
    """Format *frame* as fixed-width text without the index.

    A dashed rule as wide as the header separates it from the rows.
    """
    formatters = {col: fmt for col, fmt in _FORMATTERS.items() if col in frame.columns}
    text = frame.to_string(index=False, justify="left", formatters=formatters)
    header, _, body = text.partition("\n")
    lines = [header, "-" * len(header)]
    if body:
        lines.append(body)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def winners_table(winners: Mapping[int, DriverResult]) -> pd.DataFrame:
    """Season winners, newest season first."""
    rows = [
        {"Year": year, "Winner": d.name, "Points": d.points, "Wins": d.wins}
        for year, d in winners.items()
    ]
    frame = pd.DataFrame(rows, columns=["Year", "Winner", "Points", "Wins"])
    return frame.sort_values("Year", ascending=False, ignore_index=True)


def season_table(results: Iterable[DriverResult]) -> pd.DataFrame:
    """One season's drivers ordered by points, then wins, both descending."""
    rows = [{"Driver": d.name, "Points": d.points, "Wins": d.wins} for d in results]
    frame = pd.DataFrame(rows, columns=["Driver", "Points", "Wins"])
    return frame.sort_values(
        ["Points", "Wins"], ascending=False, kind="stable", ignore_index=True
    )


def total_races_table(totals: Mapping[int, int]) -> pd.DataFrame:
    frame = pd.DataFrame(list(totals.items()), columns=["Year", "Total Races"])
    return frame.sort_values("Year", ascending=False, ignore_index=True)


def average_points_table(averages: Mapping[int, float]) -> pd.DataFrame:
    frame = pd.DataFrame(list(averages.items()), columns=["Year", "Average Points"])
    return frame.sort_values("Year", ascending=False, ignore_index=True)


def total_points_table(totals: Iterable[tuple[int, float]]) -> pd.DataFrame:
    """Season totals in the order given (the aggregator sorts by year)."""
    return pd.DataFrame(list(totals), columns=["Year", "Total Points"])


def driver_points_table(points: Mapping[str, float]) -> pd.DataFrame:
    """Driver totals, highest first."""
    frame = pd.DataFrame(list(points.items()), columns=["Driver", "Total Points"])
    return frame.sort_values(
        "Total Points", ascending=False, kind="stable", ignore_index=True
    )
