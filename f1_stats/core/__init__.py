"""Core parsing and aggregation modules for the F1 statistics engine."""

from f1_stats.core.aggregator import (
    get_average_points_by_year,
    get_driver_points,
    get_season_results,
    get_total_points_by_year,
    get_total_races_by_year,
    get_winners,
)
from f1_stats.core.loader import (
    DataNotFoundError,
    DataReadError,
    load_results,
    read_results,
)
from f1_stats.core.models import (
    UNKNOWN_DRIVER,
    Dataset,
    DriverResult,
    freeze_dataset,
)
from f1_stats.core.parser import ParseResult, parse_driver, parse_line, parse_lines

__all__ = [
    "DataNotFoundError",
    "DataReadError",
    "Dataset",
    "DriverResult",
    "ParseResult",
    "UNKNOWN_DRIVER",
    "freeze_dataset",
    "get_average_points_by_year",
    "get_driver_points",
    "get_season_results",
    "get_total_points_by_year",
    "get_total_races_by_year",
    "get_winners",
    "load_results",
    "parse_driver",
    "parse_line",
    "parse_lines",
    "read_results",
]
