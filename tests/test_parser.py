"""Tests for the results line parser."""

from __future__ import annotations

import pytest

from f1_stats.core.models import UNKNOWN_DRIVER, DriverResult
from f1_stats.core.parser import parse_driver, parse_line, parse_lines

# ---------------------------------------------------------------------------
# Driver entries
# ---------------------------------------------------------------------------


def test_parse_driver_valid_entry() -> None:
    """A well-formed entry yields the name, points and wins."""
    assert parse_driver("Max Verstappen: 575 19") == DriverResult(
        "Max Verstappen", 575.0, 19
    )


def test_parse_driver_decimal_points_and_padding() -> None:
    """Fractional points and surrounding whitespace are accepted."""
    result = parse_driver("  Lewis Hamilton: 387.5   8 ")
    assert result == DriverResult("Lewis Hamilton", 387.5, 8)


@pytest.mark.parametrize(
    "entry",
    [
        "Max Verstappen 575 19",  # missing colon
        "Max Verstappen:575 19",  # no space after colon
        "Max Verstappen: -5 19",  # negative points
        "Max Verstappen: 575",  # missing wins
        "Max Verstappen: 575 1.5",  # fractional wins
        "Max-Verstappen: 575 19",  # punctuation in name
        "",
    ],
)
def test_parse_driver_malformed_returns_sentinel(entry: str) -> None:
    """Entries outside the grammar never raise and yield the sentinel."""
    result = parse_driver(entry)
    assert result == UNKNOWN_DRIVER
    assert result.is_unknown


def test_parse_driver_oversized_digit_runs_return_sentinel() -> None:
    """Numbers too long to convert yield the sentinel instead of raising."""
    assert parse_driver("Max Verstappen: 1 " + "9" * 5000) == UNKNOWN_DRIVER
    assert parse_driver("Max Verstappen: " + "9" * 5000 + " 1") == UNKNOWN_DRIVER


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------


def test_parse_line_preserves_driver_order() -> None:
    """Drivers keep the order in which they appear on the line."""
    line = parse_line("2023,Max Verstappen: 575 19,Sergio Perez: 285 2")
    assert line.diagnostics == ()
    assert line.season == (
        2023,
        (DriverResult("Max Verstappen", 575.0, 19), DriverResult("Sergio Perez", 285.0, 2)),
    )


def test_parse_line_without_comma_is_invalid() -> None:
    """A line with no comma is reported as an invalid structure."""
    line = parse_line("Invalid Line Format")
    assert line.season is None
    assert line.diagnostics == ("Invalid line structure: Invalid Line Format",)


def test_parse_line_non_numeric_year_is_invalid() -> None:
    """The year prefix must be an integer."""
    line = parse_line("20x3,Max Verstappen: 575 19")
    assert line.season is None
    assert line.diagnostics[0].startswith("Invalid line structure")


def test_parse_line_rejects_whole_season_on_bad_entry() -> None:
    """One malformed entry discards the season and reports both levels."""
    raw = "2023,Max Verstappen 575 19,Sergio Perez: 285 2"
    line = parse_line(raw)
    assert line.season is None
    assert line.diagnostics == (
        "Malformed driver entry: Max Verstappen 575 19",
        f"Year 2023: {raw}",
    )


def test_parse_line_driver_named_unknown_is_rejected() -> None:
    """A driver literally named Unknown is indistinguishable from the sentinel."""
    assert parse_line("2023,Unknown: 10 1").season is None


# ---------------------------------------------------------------------------
# Whole files
# ---------------------------------------------------------------------------


def test_parse_lines_partitions_good_and_bad_lines() -> None:
    """Only well-formed seasons reach the dataset; the rest are diagnosed."""
    result = parse_lines(
        [
            "2023,Max Verstappen 575 19,Sergio Perez: 285 2",
            "Invalid Line Format",
            "2022,Max Verstappen: 454 15",
        ]
    )
    assert set(result.dataset) == {2022}
    assert len(result.diagnostics) == 3


def test_parse_lines_empty_input() -> None:
    """No lines yield an empty dataset and no diagnostics."""
    result = parse_lines([])
    assert dict(result.dataset) == {}
    assert result.diagnostics == ()


def test_parse_lines_skips_blank_lines() -> None:
    """Whitespace-only lines are ignored without a diagnostic."""
    result = parse_lines(["", "   ", "2022,Max Verstappen: 454 15\n"])
    assert list(result.dataset) == [2022]
    assert result.diagnostics == ()


def test_parse_lines_last_duplicate_year_wins() -> None:
    """A later line for the same year replaces the earlier one."""
    result = parse_lines(
        ["2022,Max Verstappen: 454 15", "2022,Charles Leclerc: 308 3"]
    )
    assert result.dataset[2022] == (DriverResult("Charles Leclerc", 308.0, 3),)


def test_parse_lines_rejected_duplicate_keeps_earlier() -> None:
    """A rejected later line does not erase an accepted earlier one."""
    result = parse_lines(["2022,Max Verstappen: 454 15", "2022,broken"])
    assert result.dataset[2022][0].name == "Max Verstappen"


def test_parsed_dataset_is_read_only() -> None:
    """The returned dataset cannot be modified."""
    result = parse_lines(["2022,Max Verstappen: 454 15"])
    with pytest.raises(TypeError):
        result.dataset[2023] = ()  # type: ignore[index]
    assert isinstance(result.dataset[2022], tuple)


def test_parse_lines_oversized_year_is_invalid_structure() -> None:
    """A year too long to convert is diagnosed and later lines still load."""
    bad = "9" * 5000 + ",Max Verstappen: 1 1"
    result = parse_lines([bad, "2022,Max Verstappen: 454 15"])
    assert list(result.dataset) == [2022]
    assert result.diagnostics == (f"Invalid line structure: {bad}",)


def test_parse_lines_oversized_wins_rejects_season() -> None:
    """An unconvertible wins count discards only its own season."""
    result = parse_lines(
        ["2023,Max Verstappen: 1 " + "9" * 5000, "2022,Max Verstappen: 454 15"]
    )
    assert list(result.dataset) == [2022]
    assert result.diagnostics[-1].startswith("Year 2023: ")
