"""Configuration file management for budgetplan."""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from budgetplan.errors import ConfigError

DEFAULT_CURRENCY = "£"
DEFAULT_PRECISION = 2
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Immutable display and logging settings."""

    currency: str = DEFAULT_CURRENCY
    precision: int = DEFAULT_PRECISION
    log_level: str = DEFAULT_LOG_LEVEL

    def round_amount(self, amount: float) -> float:
        """Round to the configured precision; -0.0 becomes 0.0."""
        return round(amount, self.precision) + 0.0

    def format_amount(self, amount: float) -> str:
        """Format an amount with the currency symbol, e.g. "-£1,234.50".

        The sign is taken after rounding, so -0.001 formats as "£0.00".
        """
        rounded = self.round_amount(amount)
        sign = "-" if rounded < 0 else ""
        return f"{sign}{self.currency}{abs(rounded):,.{self.precision}f}"


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "budgetplan" / "config.toml"


def default_config() -> dict[str, Any]:
    return {
        "currency": DEFAULT_CURRENCY,
        "precision": DEFAULT_PRECISION,
        "log_level": DEFAULT_LOG_LEVEL,
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults.

    A missing file or missing keys give the default values.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Settings built from the config file.

    Raises:
        ConfigError: If the file is not valid TOML, precision is not a
            non-negative integer, or log_level is not a logging level name.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return Settings()
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file: {e}") from e

    precision = config.get("precision", DEFAULT_PRECISION)
    # bool is an int subclass
    if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0:
        raise ConfigError(f"precision must be a non-negative integer (got {precision!r})")

    log_level = str(config.get("log_level", DEFAULT_LOG_LEVEL)).upper()
    if log_level not in logging.getLevelNamesMapping():
        raise ConfigError(f"Unknown log_level '{log_level}'")

    return Settings(
        currency=str(config.get("currency", DEFAULT_CURRENCY)),
        precision=precision,
        log_level=log_level,
    )
