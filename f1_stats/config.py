"""Settings loader for the F1 statistics CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

DATA_DIR: Path = Path(__file__).resolve().parent / "data"
SETTINGS_PATH: Path = DATA_DIR / "settings.yaml"

_REQUIRED_FIELDS: tuple[str, ...] = (
    "data_file",
    "log_level",
    "log_format",
)


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Attributes:
        data_file: Absolute path of the season results file.
        log_level: Numeric :mod:`logging` level.
        log_format: Format string passed to :func:`logging.basicConfig`.
    """

    data_file: Path
    log_level: int
    log_format: str


def load_settings(path: Path | None = None) -> Settings:
    """Load runtime settings from a YAML file.

    A relative ``data_file`` is resolved against the directory holding
    the settings file.

    Args:
        path: Optional override for the settings file path.

    Returns:
        Validated :class:`Settings`.

    Raises:
        FileNotFoundError: If the settings file does not exist.
        ValueError: If a field is missing, empty, or names an unknown
            logging level.
    """
    settings_path = path or SETTINGS_PATH
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with open(settings_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {settings_path} must contain a mapping")

    for field in _REQUIRED_FIELDS:
        if field not in data:
            raise ValueError(f"Settings file is missing required field '{field}'")
        if not isinstance(data[field], str) or not data[field].strip():
            raise ValueError(f"Settings field '{field}' must be a non-empty string")

    level_name = data["log_level"].upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Settings field 'log_level': unknown level {data['log_level']!r}")

    data_file = Path(data["data_file"])
    if not data_file.is_absolute():
        data_file = settings_path.resolve().parent / data_file

    return Settings(data_file=data_file, log_level=level, log_format=data["log_format"])
