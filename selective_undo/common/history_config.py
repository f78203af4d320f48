"""
Configuration for drawing history.

Settings live in a small JSON file next to the editor's other session data:

    {"max_actions": 100, "log_level": "INFO"}
"""

import json
import logging
import os
from dataclasses import dataclass, asdict
from typing import Any, Dict

from selective_undo.errors import ConfigError


logger = logging.getLogger(__name__)

DEFAULT_MAX_ACTIONS = 50
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class HistoryConfig:
    """
    History settings.

    Attributes:
        max_actions: Maximum number of committed actions kept (must be >= 1)
        log_level: Level applied to the ``selective_undo`` logger
    """
    max_actions: int = DEFAULT_MAX_ACTIONS
    log_level: str = "WARNING"

    def __post_init__(self):
        if isinstance(self.max_actions, bool) or not isinstance(self.max_actions, int) \
                or self.max_actions < 1:
            raise ValueError(f"max_actions must be a positive integer, got {self.max_actions!r}")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HistoryConfig':
        """Create from dictionary. Unknown keys are ignored."""
        unknown = set(data) - {"max_actions", "log_level"}
        if unknown:
            logger.warning("Ignoring unknown history settings: %s", ", ".join(sorted(unknown)))
        return cls(
            max_actions=data.get("max_actions", DEFAULT_MAX_ACTIONS),
            log_level=data.get("log_level", "WARNING")
        )

    @classmethod
    def load(cls, filepath: str) -> 'HistoryConfig':
        """
        Load settings from a JSON file.

        A missing file yields the defaults.

        Raises:
            ConfigError: If the file cannot be read or holds invalid values
        """
        if not os.path.exists(filepath):
            logger.debug("No history config at %s, using defaults", filepath)
            return cls()
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to load history config {filepath}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"History config {filepath} must contain a JSON object")
        try:
            return cls.from_dict(data)
        except ValueError as e:
            raise ConfigError(f"Invalid history config {filepath}: {e}") from e

    def save(self, filepath: str) -> None:
        """Write settings to a JSON file."""
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=4)

    def apply_log_level(self) -> None:
        """Set the package logger to the configured level."""
        logging.getLogger("selective_undo").setLevel(self.log_level)
