"""
wordcount Configuration Management.

Handles loading and saving user configuration from ~/.wordcount/config.yaml.
Configuration values are merged with CLI arguments, with CLI taking precedence.
"""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional
import logging

import yaml

from wordcount.counting.count_units import CountMode


# Default configuration directory
CONFIG_DIR = Path.home() / ".wordcount"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

OUTPUT_FORMATS = ("tsv", "json", "yaml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class WordcountConfig:
    """wordcount configuration settings.

    Attributes:
        mode: Default counting mode ('char', 'word', 'line')
        output_format: Default output format ('tsv', 'json', 'yaml')
        top: Default number of rows to keep (None = all)
        log_level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_file: Optional log file path
    """
    mode: str = CountMode.default().value
    output_format: str = "tsv"
    top: Optional[int] = None
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert config to dictionary, excluding None values."""
        return {k: v for k, v in asdict(self).items() if v is not None}


def get_config_dir() -> Path:
    """Get the wordcount configuration directory, creating if needed."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return CONFIG_DIR


def load_config() -> WordcountConfig:
    """Load configuration from file, returning defaults if not found."""
    if not CONFIG_FILE.exists():
        return WordcountConfig()

    try:
        with open(CONFIG_FILE) as f:
            data = yaml.safe_load(f) or {}

        items = data.items()
    except (OSError, yaml.YAMLError, AttributeError) as e:
        logging.warning(f"Error loading config file: {e}. Using defaults.")
        return WordcountConfig()

    # Unknown keys are skipped, bad values fall back to the field default
    config = WordcountConfig()
    for key, value in items:
        if key not in _FIELD_PARSERS:
            continue
        try:
            setattr(config, key, parse_config_value(key, "none" if value is None else str(value)))
        except ValueError as e:
            logging.warning(f"Invalid value for '{key}' in config file: {e}. Using default.")

    return config


def save_config(config: WordcountConfig) -> Path:
    """Save configuration to file."""
    get_config_dir()  # Ensure directory exists

    with open(CONFIG_FILE, "w") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

    return CONFIG_FILE


def get_config_path() -> Path:
    """Get the path to the config file."""
    return CONFIG_FILE


def _parse_optional_int(raw: str) -> Optional[int]:
    if raw.strip().lower() in ("", "none", "null"):
        return None
    value = int(raw)
    if value < 1:
        raise ValueError(f"expected a positive integer, got {raw!r}")
    return value


def _parse_optional_str(raw: str) -> Optional[str]:
    if raw.strip().lower() in ("", "none", "null"):
        return None
    return raw


def _parse_choice(choices):
    def parse(raw: str) -> str:
        value = raw.strip()
        for choice in choices:
            if value.lower() == choice.lower():
                return choice
        raise ValueError(f"expected one of {', '.join(choices)}, got {raw!r}")
    return parse


_FIELD_PARSERS = {
    "mode": lambda raw: CountMode.parse(raw).value,
    "output_format": _parse_choice(OUTPUT_FORMATS),
    "top": _parse_optional_int,
    "log_level": _parse_choice(LOG_LEVELS),
    "log_file": _parse_optional_str,
}


def parse_config_value(key: str, raw: str) -> Any:
    """Convert a command-line string into the typed value for a config field.

    Raises:
        ValueError: If the key is unknown or the value is invalid for it
    """
    if key not in _FIELD_PARSERS:
        valid = ", ".join(f.name for f in fields(WordcountConfig))
        raise ValueError(f"Unknown config key {key!r}. Valid keys: {valid}")
    return _FIELD_PARSERS[key](raw)


# Verbosity level mapping for CLI
VERBOSITY_LEVELS = {
    1: logging.INFO,      # -v: info messages
    2: logging.DEBUG,     # -vv: debug messages
}


def setup_logging(
    verbosity: int = 0,
    log_file: Optional[str] = None,
    default_level: str = "WARNING",
) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbosity: 0 = default_level, 1 = INFO, 2+ = DEBUG
        log_file: Optional file to write logs to
        default_level: Level name used when no -v flag is given
    """
    if verbosity <= 0:
        level = logging.getLevelName(default_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    else:
        level = VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)

    # Format varies by verbosity
    if verbosity >= 2:
        fmt = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"
    elif verbosity >= 1:
        fmt = "%(levelname)s: %(message)s"
    else:
        fmt = "%(message)s"

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=fmt,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )


# Global config instance (lazy-loaded)
_config: Optional[WordcountConfig] = None


def get_config() -> WordcountConfig:
    """Get the global configuration, loading from file if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global config to force reload."""
    global _config
    _config = None
