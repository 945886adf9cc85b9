"""Engine configuration loader.

This module loads engine settings from a YAML file so hosts can tune logging
without touching code. Rules of play are not configurable here; only the
diagnostic side of the engine is.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

import yaml

if TYPE_CHECKING:
    from ..game.log_manager import LogManager


DEFAULT_CONFIG_RELATIVE_PATH = "assets/config/engine.yaml"


@dataclass(frozen=True)
class EngineConfig:
    """Settings for an engine instance."""
    log_level: str = "INFO"
    max_log_messages: int = 1000
    enabled_log_categories: Optional[tuple[str, ...]] = None  # None enables all
    log_directory: str = "logs"

    def create_log_manager(self) -> "LogManager":
        """Build a LogManager matching these settings."""
        from ..game.log_manager import LogCategory, LogLevel, LogManager

        categories = None
        if self.enabled_log_categories is not None:
            categories = [LogCategory[name.upper()] for name in self.enabled_log_categories]

        return LogManager(
            max_messages=self.max_log_messages,
            default_level=LogLevel[self.log_level.upper()],
            enabled_categories=categories,
            log_directory=self.log_directory,
        )


class EngineConfigLoader:
    """Loads EngineConfig from YAML with caching and fallbacks."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or self._find_default_config_path()
        self._cached_config: Optional[EngineConfig] = None

    def _find_default_config_path(self) -> str:
        """Find the default engine.yaml relative to the project."""
        # Walk up from this file to find assets/config/engine.yaml
        current_dir = Path(__file__).parent
        for _ in range(5):  # Limit search depth
            config_path = current_dir / DEFAULT_CONFIG_RELATIVE_PATH
            if config_path.exists():
                return str(config_path)
            current_dir = current_dir.parent

        # Fallback: assume it's relative to the working directory
        return DEFAULT_CONFIG_RELATIVE_PATH

    def load_config(self, force_reload: bool = False) -> EngineConfig:
        """Load engine configuration, using cache if available.

        A missing or malformed file yields the default configuration.
        """
        if self._cached_config is not None and not force_reload:
            return self._cached_config

        if not os.path.exists(self.config_path):
            print(f"Warning: Engine config file not found: {self.config_path}")
            self._cached_config = EngineConfig()
            return self._cached_config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
            self._cached_config = self._parse_config(raw)
        except (yaml.YAMLError, ValueError, TypeError, KeyError) as e:
            print(f"Warning: Invalid engine config {self.config_path}: {e}")
            self._cached_config = EngineConfig()

        return self._cached_config

    def _parse_config(self, raw: Any) -> EngineConfig:
        if not isinstance(raw, dict):
            raise ValueError("Engine config must be a mapping")

        logging_section = raw.get("logging", {}) or {}
        if not isinstance(logging_section, dict):
            raise ValueError("'logging' section must be a mapping")

        defaults = EngineConfig()
        level = str(logging_section.get("level", defaults.log_level)).upper()
        from ..game.log_manager import LogCategory, LogLevel
        if level not in LogLevel.__members__:
            raise ValueError(f"Unknown log level: {level}")

        categories = logging_section.get("categories")
        if categories is not None:
            categories = tuple(str(name).upper() for name in categories)
            unknown = [name for name in categories if name not in LogCategory.__members__]
            if unknown:
                raise ValueError(f"Unknown log categories: {unknown}")

        max_messages = int(logging_section.get("max_messages", defaults.max_log_messages))
        if max_messages <= 0:
            raise ValueError(f"max_messages must be positive, got {max_messages}")

        return EngineConfig(
            log_level=level,
            max_log_messages=max_messages,
            enabled_log_categories=categories,
            log_directory=str(logging_section.get("directory", defaults.log_directory)),
        )


# Global loader instance
_default_loader = EngineConfigLoader()


def get_engine_config(force_reload: bool = False) -> EngineConfig:
    """Get the default engine configuration."""
    return _default_loader.load_config(force_reload)
