"""Interactive text menu over the aggregation queries.

The menu never terminates the process.  :func:`handle_choice` reports
whether the user asked to exit and :func:`run_menu` simply returns,
leaving the exit decision to the caller.
"""

from __future__ import annotations

from collections.abc import Callable

from f1_stats import report
from f1_stats.core.aggregator import (
    get_average_points_by_year,
    get_driver_points,
    get_season_results,
    get_total_points_by_year,
    get_total_races_by_year,
    get_winners,
)
from f1_stats.core.models import Dataset

Reader = Callable[[str], str]
Writer = Callable[[str], None]

EXIT_OPTION: int = 7

MENU_TEXT: str = """
F1 Statistics Application Menu:
1. Display winners by year
2. Display results for a specific season
3. Display total races for each season
4. Display average points per season
5. Display total points per season
6. Display total points for a specific driver
7. Exit
"""


# ---------------------------------------------------------------------------
# Menu actions
# ---------------------------------------------------------------------------


def show_winners(data: Dataset, read: Reader, write: Writer) -> None:
    """Print the winner of every season, newest first."""
    winners = get_winners(data)
    if not winners:
        write("\nNo winners data available.")
        return
    write("\nWinners by Year:")
    write(report.render(report.winners_table(winners)))


def show_season_results(data: Dataset, read: Reader, write: Writer) -> None:
    """Prompt for a year and print its drivers by points, then wins."""
    raw = read("Enter the year: ").strip()
    try:
        year = int(raw)
    except ValueError:
        write("Invalid year input. Please enter a valid year.")
        return

    results = get_season_results(data, year)
    if results is None:
        write(f"No data found for the year {year}.")
        return
    write(f"\nResults for {year}:")
    write(report.render(report.season_table(results)))


def show_total_races(data: Dataset, read: Reader, write: Writer) -> None:
    """Print the summed wins of each season."""
    totals = get_total_races_by_year(data)
    if not totals:
        write("\nNo data available to display total races.")
        return
    write("\nTotal Races by Year:")
    write(report.render(report.total_races_table(totals)))


def show_average_points(data: Dataset, read: Reader, write: Writer) -> None:
    """Print the mean driver points of each season."""
    averages = get_average_points_by_year(data)
    if not averages:
        write("\nNo data available to display average points.")
        return
    write("\nAverage Points by Year:")
    write(report.render(report.average_points_table(averages)))


def show_total_points(data: Dataset, read: Reader, write: Writer) -> None:
    """Print the total points scored in each season."""
    totals = get_total_points_by_year(data)
    if not totals:
        write("\nNo data available to display total points.")
        return
    write("\nTotal Points Per Season:")
    write(report.render(report.total_points_table(totals)))


def show_driver_points(data: Dataset, read: Reader, write: Writer) -> None:
    """Prompt for a name fragment and print matching drivers' career points."""
    query = read("Enter the driver's full name or part of the name: ").strip()
    points = get_driver_points(data, query)
    if not points:
        write(f"No drivers found matching '{query}'.")
        return
    write(f"\nTotal Points for Drivers Matching '{query}':")
    write(report.render(report.driver_points_table(points)))


MENU_ACTIONS: dict[int, Callable[[Dataset, Reader, Writer], None]] = {
    1: show_winners,
    2: show_season_results,
    3: show_total_races,
    4: show_average_points,
    5: show_total_points,
    6: show_driver_points,
}


# ---------------------------------------------------------------------------
# Loop
# ---------------------------------------------------------------------------


def handle_choice(choice: str, data: Dataset, read: Reader, write: Writer) -> bool:
    """Run the action selected by *choice*.

    Returns:
        ``True`` when the user asked to exit, ``False`` otherwise.
    """
    try:
        option = int(choice.strip())
    except ValueError:
        option = None

    if option == EXIT_OPTION:
        write("Exiting Application...")
        return True

    action = MENU_ACTIONS.get(option)
    if action is None:
        write("Invalid Option, Please try again.")
    else:
        action(data, read, write)
    return False


def run_menu(
    data: Dataset, read: Reader | None = None, write: Writer | None = None
) -> None:
    """Show the menu until the user exits or input is exhausted.

    *read* and *write* default to :func:`input` and :func:`print`.
    """
    read = read or input
    write = write or print
    while True:
        write(MENU_TEXT)
        try:
            choice = read("Enter Selected Option: ")
            if handle_choice(choice, data, read, write):
                return
        except EOFError:
            write("Exiting Application...")
            return
