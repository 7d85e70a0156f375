"""Result models for the F1 statistics dataset.

A season's results are stored as an ordered tuple of :class:`DriverResult`
records; the first record is conventionally the season winner.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

UNKNOWN_NAME: str = "Unknown"


@dataclass(frozen=True)
class DriverResult:
    """Immutable record of one driver's season.

    Attributes:
        name: Driver name as written in the source file.
        points: Championship points scored in the season (>= 0.0).
        wins: Wins recorded for the season (>= 0).
    """

    name: str
    points: float
    wins: int

    def __post_init__(self) -> None:
        """Validate result fields."""
        if not self.name:
            raise ValueError("name must not be empty.")
        if self.points < 0.0:
            raise ValueError("points must be >= 0.0.")
        if self.wins < 0:
            raise ValueError("wins must be >= 0.")

    @property
    def is_unknown(self) -> bool:
        """True for the placeholder produced by an unparseable entry."""
        return self.name == UNKNOWN_NAME


# Placeholder returned when a driver entry does not match the line grammar.
UNKNOWN_DRIVER: DriverResult = DriverResult(name=UNKNOWN_NAME, points=0.0, wins=0)

Dataset = Mapping[int, tuple[DriverResult, ...]]


def freeze_dataset(seasons: Iterable[tuple[int, Iterable[DriverResult]]]) -> Dataset:
    """Build a read-only dataset from ``(year, results)`` pairs.

    Later pairs for the same year replace earlier ones.
    """
    return MappingProxyType({year: tuple(results) for year, results in seasons})
