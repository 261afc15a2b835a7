"""
Configuration loader for parsing YAML roster configuration.
"""

import yaml
from pathlib import Path
from typing import Dict, Any
from datetime import date, timedelta

from .generator import align_to_monday
from .models import RosterConfig


class ConfigurationError(Exception):
    """Custom exception for configuration errors."""

    pass


class InvalidDateFormatError(ConfigurationError):
    """Raised when a date is not in ISO 8601 format (YYYY-MM-DD)."""

    pass


class ConfigLoader:
    """Loads and validates roster configuration from YAML files."""

    DEFAULT_WEEKS = 4

    def __init__(self, config_path: str | Path):
        """
        Initialize the ConfigLoader with a configuration file path.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        self.config_path = Path(config_path)

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        self._raw_config: Dict[str, Any] | None = None
        self._config: RosterConfig | None = None

    def load(self) -> RosterConfig:
        """
        Load and parse the configuration file.

        Returns:
            RosterConfig object with all parsed data

        Raises:
            InvalidDateFormatError: If the start date is not in ISO 8601 format
            ConfigurationError: If configuration is invalid
        """
        with open(self.config_path, "r") as f:
            self._raw_config = yaml.safe_load(f) or {}

        if not isinstance(self._raw_config, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(self._raw_config).__name__}"
            )

        self._config = self._parse_config()
        return self._config

    def reload(self) -> RosterConfig:
        """Reload the configuration from the file."""
        return self.load()

    @property
    def config(self) -> RosterConfig:
        """
        Get the loaded configuration.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._config

    @property
    def raw_config(self) -> Dict[str, Any]:
        """
        Get the raw configuration dictionary.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._raw_config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._raw_config

    def _parse_config(self) -> RosterConfig:
        """Parse raw YAML data into RosterConfig object."""
        raw = self._raw_config

        roster = raw.get("roster", {}) or {}
        start_date = roster.get("start_date")
        if not isinstance(start_date, date):
            raise InvalidDateFormatError(
                f"start_date must be in ISO 8601 format (YYYY-MM-DD), got: {start_date}. "
                f"Example: 2024-06-03"
            )

        weeks = self._parse_weeks(roster.get("weeks", self.DEFAULT_WEEKS))

        name = roster.get("name")
        if name is not None:
            name = str(name)

        policy = raw.get("policy", {}) or {}
        allow_unassign_locked = policy.get("allow_unassign_locked", False)
        if not isinstance(allow_unassign_locked, bool):
            raise ConfigurationError(
                f"policy.allow_unassign_locked must be true or false, got: {allow_unassign_locked}"
            )

        return RosterConfig(
            start_date=start_date,
            weeks=weeks,
            name=name,
            allow_unassign_locked=allow_unassign_locked,
        )

    def _parse_weeks(self, weeks: Any) -> int:
        """Check that weeks is a whole number within the allowed range."""
        if isinstance(weeks, bool) or not isinstance(weeks, int):
            raise ConfigurationError(f"weeks must be a whole number, got: {weeks}")

        if not RosterConfig.MIN_WEEKS <= weeks <= RosterConfig.MAX_WEEKS:
            raise ConfigurationError(
                f"weeks must be between {RosterConfig.MIN_WEEKS} and "
                f"{RosterConfig.MAX_WEEKS}, got {weeks}"
            )
        return weeks

    def get_summary(self) -> str:
        """
        Get a summary of the loaded configuration.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        config = self.config
        start = align_to_monday(config.start_date)

        lines = [
            f"Configuration from: {self.config_path}",
            f"Roster: {config.name or '(default name)'}",
            f"Planning Period: {start} to {start + timedelta(days=config.total_days - 1)}",
            f"Duration: {config.weeks} weeks ({config.total_days} days)",
            f"Unassigning locked shifts: {'allowed' if config.allow_unassign_locked else 'not allowed'}",
        ]

        if start != config.start_date:
            lines.append(f"Note: start date {config.start_date} moved back to Monday {start}")

        return "\n".join(lines)
