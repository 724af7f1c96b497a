"""Configuration for expr-calc.

Settings live in `.expr-calc/config.json` under the "calculator" key:

    {"calculator": {"history_capacity": 50, "history_display_count": 10,
                    "log_level": "INFO"}}
"""

import json
from dataclasses import dataclass
from pathlib import Path

from .history import DEFAULT_CAPACITY


CONFIG_DIR = ".expr-calc"
CONFIG_FILE = "config.json"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CalculatorConfig:
    """Calculator configuration options."""

    history_capacity: int = DEFAULT_CAPACITY
    history_display_count: int = 10  # Entries shown by `history`
    log_level: str = "WARNING"


def config_path(project_path: str = ".") -> Path:
    """Location of the config file for a project."""
    return Path(project_path) / CONFIG_DIR / CONFIG_FILE


def load_config(project_path: str = ".") -> CalculatorConfig:
    """Load calculator configuration.

    Args:
        project_path: Directory containing `.expr-calc/`.

    Returns:
        CalculatorConfig with settings from config.json or defaults.
    """
    config_file = config_path(project_path)
    defaults = CalculatorConfig()

    if not config_file.exists():
        return defaults

    try:
        with open(config_file) as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError):
        return defaults

    section = data.get("calculator", {}) if isinstance(data, dict) else {}
    if not isinstance(section, dict):
        section = {}

    capacity = section.get("history_capacity", defaults.history_capacity)
    if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
        capacity = defaults.history_capacity

    display_count = section.get("history_display_count", defaults.history_display_count)
    if not isinstance(display_count, int) or isinstance(display_count, bool) or display_count < 1:
        display_count = defaults.history_display_count

    log_level = str(section.get("log_level", defaults.log_level)).upper()
    if log_level not in LOG_LEVELS:
        log_level = defaults.log_level

    return CalculatorConfig(
        history_capacity=capacity,
        history_display_count=display_count,
        log_level=log_level,
    )
