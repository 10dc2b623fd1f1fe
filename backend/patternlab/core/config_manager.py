from typing import List, Optional, Tuple
import logging
from pydantic import field_validator
from pydantic_settings import BaseSettings
from patternlab.core.patterns.singleton import Singleton


EXAMPLE_NAMES = ["singleton", "factory", "adapter", "decorator", "strategy", "observer"]


class Settings(BaseSettings):
    """Catalog settings read from PATTERNLAB_* environment variables."""

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    # Which demonstrations the CLI runs when none are named
    enabled_examples: List[str] = list(EXAMPLE_NAMES)

    # Strategy demonstration
    strategy_left_operand: int = 10
    strategy_right_operand: int = 5

    # Observer demonstration
    isolate_observer_failures: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("enabled_examples")
    @classmethod
    def _known_examples(cls, value: List[str]) -> List[str]:
        unknown = [name for name in value if name not in EXAMPLE_NAMES]
        if unknown:
            raise ValueError(f"Unknown examples: {', '.join(unknown)}")
        return value

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level"""
        return "DEBUG" if self.debug else self.log_level

    class Config:
        env_file = ".env"
        env_prefix = "PATTERNLAB_"
        extra = "ignore"


class ConfigManager(Singleton):
    """
    Singleton Configuration Manager.

    Loads the catalog settings once and hands them out to the demonstrations
    and to the command-line entry point.
    """

    def _setup(self):
        self._settings: Optional[Settings] = None
        self._logger = logging.getLogger(__name__)
        self._load_settings()

    def _load_settings(self):
        try:
            self._settings = Settings()
            self._logger.info(f"Configuration loaded successfully. Debug mode: {self._settings.debug}")
        except Exception as e:
            self._logger.error(f"Failed to load configuration: {e}")
            raise

    @property
    def settings(self) -> Settings:
        """Get the catalog settings."""
        if self._settings is None:
            self._load_settings()
        return self._settings

    def reload_settings(self):
        """Reload settings from environment variables and .env file."""
        self._logger.info("Reloading configuration settings...")
        self._load_settings()

    def is_debug_mode(self) -> bool:
        return self.settings.debug

    def get_logging_settings(self) -> dict:
        """Get logging configuration settings."""
        return {
            "level": self.settings.effective_log_level,
            "debug": self.settings.debug,
        }

    def get_enabled_examples(self) -> List[str]:
        return list(self.settings.enabled_examples)

    def get_strategy_operands(self) -> Tuple[int, int]:
        """Operands the Strategy demonstration applies every operation to."""
        return self.settings.strategy_left_operand, self.settings.strategy_right_operand

    def should_isolate_observer_failures(self) -> bool:
        return self.settings.isolate_observer_failures


config_manager = ConfigManager.get_instance()

settings = config_manager.settings
