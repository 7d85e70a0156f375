"""F1 season statistics: results file parser and aggregation queries."""

__version__ = "0.1.0"
