"""Command-line entry point for the F1 statistics application."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from f1_stats import __version__
from f1_stats.config import load_settings
from f1_stats.core.loader import DataNotFoundError, DataReadError, load_results
from f1_stats.menu import run_menu

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="f1-stats",
        description="Browse F1 season results from a text file.",
    )
    parser.add_argument(
        "results",
        nargs="?",
        type=Path,
        help="Season results file (defaults to the one named in the settings).",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Alternative settings YAML file.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load the results file and run the interactive menu.

    Returns:
        Process exit status: 0 on a normal exit, 1 when the results file
        cannot be loaded, 2 when the settings are invalid.
    """
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings(args.settings)
    except (FileNotFoundError, ValueError) as exc:
        print(exc)
        print("Exiting application...")
        return 2

    logging.basicConfig(level=settings.log_level, format=settings.log_format)

    print("Welcome to the F1 Statistics CLI Application")
    results_path = args.results or settings.data_file

    try:
        data = load_results(results_path)
    except DataNotFoundError as exc:
        print(exc)
        print("Exiting application...")
        return 1
    except DataReadError as exc:
        print(f"Unexpected error: {exc}")
        print("Exiting application...")
        return 1

    run_menu(data)
    log.debug("Menu closed")
    return 0
