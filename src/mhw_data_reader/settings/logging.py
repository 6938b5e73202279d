"""
Logging-related settings for mhw_data_reader.

Level names are shared by the stored console level, the CLI's
--log-level option and setup_logging.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/mhw_data_reader.csv"
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_CONSOLE_LEVEL = "WARNING"


def is_valid_level(name: str) -> bool:
    return name.upper() in VALID_LEVELS


def level_number(name: str, default: int = logging.WARNING) -> int:
    """Map a level name to its numeric value; unknown names give `default`.

    Only the names in VALID_LEVELS are looked up, so arbitrary attributes of
    the logging module are never mistaken for levels.
    """
    if not is_valid_level(name):
        return default
    return logging.getLevelName(name.upper())


class LoggingSettings:
    """Console and file logging switches stored under `logging/`."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_bool(self, key: str, default: bool) -> bool:
        value = self.settings.value(key, default)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _set(self, key: str, value: object) -> None:
        self.settings.setValue(key, value)
        self.settings.sync()

    @property
    def console_logging(self) -> bool:
        return self._get_bool("logging/console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set("logging/console_enabled", value)

    @property
    def console_log_level(self) -> str:
        """Stored console level name, as written (validated on write only)."""
        value = self.settings.value("logging/console_level", DEFAULT_CONSOLE_LEVEL)
        return str(value) if value is not None else DEFAULT_CONSOLE_LEVEL

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        if is_valid_level(value):
            self._set("logging/console_level", value.upper())
        else:
            logger.warning(
                f"Invalid console log level: {value}, keeping current: {self.console_log_level}"
            )

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool("logging/console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set("logging/console_use_colors", value)

    @property
    def file_logging(self) -> bool:
        return self._get_bool("logging/file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set("logging/file_enabled", value)

    @property
    def log_file_path(self) -> str:
        """CSV log location, relative to the working directory."""
        return LOG_FILE_PATH
