"""Configuration for the srt parser."""

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping

from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Hours share the 0 - 59 bound of minutes and seconds, not a clock-of-day one.
DEFAULT_MAX_HOURS = 59


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for parsing srt text."""
    max_hours: int = DEFAULT_MAX_HOURS

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Check that every setting is usable.

        Raises:
            ConfigurationError: If a setting has the wrong type or range
        """
        if isinstance(self.max_hours, bool) or not isinstance(self.max_hours, int):
            raise ConfigurationError(
                f"max_hours must be an integer, got {type(self.max_hours).__name__}"
            )
        if self.max_hours < 0:
            raise ConfigurationError(f"max_hours must not be negative, got {self.max_hours}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ParserConfig":
        """Build a config from a mapping, ignoring unknown keys.

        Args:
            data: Mapping of setting names to values

        Returns:
            A validated ParserConfig
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key in known:
                values[key] = value
            else:
                logger.warning(f"Ignoring unknown parser setting: {key}")
        return cls(**values)
