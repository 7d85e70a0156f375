"""CLI entrypoint for the F1 season statistics application."""

from __future__ import annotations

import sys

from f1_stats.cli import main

if __name__ == "__main__":
    sys.exit(main() or 0)
