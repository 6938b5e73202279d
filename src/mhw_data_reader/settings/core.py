"""
Core settings management for mhw_data_reader.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from .types import ConfigError, ConfigVersion, ValidationResult
from .validation import SettingsValidator
from .logging import LoggingSettings
from .link import LinkSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Settings live in the platform store by default; passing `settings_file`
    switches to an INI file at that path instead.
    """

    def __init__(
        self,
        profile: str = "default",
        settings_file: Optional[Union[str, Path]] = None,
    ):
        """Initialize settings.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Optional INI file to use instead of the platform store
        """
        if settings_file is not None:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("mhw_data_reader", "mhw_data_reader")

        if self.settings.status() != QSettings.Status.NoError:
            raise ConfigError(f"Cannot access settings at {self.settings.fileName()}")

        self.profile = profile
        # Profile is a group: mhw_data_reader/<profile>/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._logging = LoggingSettings(self.settings)
        self._link = LinkSettings(self.settings)

        self._ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    def _ensure_version(self) -> None:
        """Stamp the configuration version on first use."""
        if not str(self.settings.value("app/version", "")):
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")

    # === SUBSYSTEM ACCESS ===

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def link(self) -> LinkSettings:
        """Access name-linking settings subsystem."""
        return self._link

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        return self._logging.log_file_path

    # === LINK SETTINGS (DELEGATED) ===

    @property
    def name_stride(self) -> int:
        return self._link.name_stride

    @name_stride.setter
    def name_stride(self, value: int) -> None:
        self._link.name_stride = value

    @property
    def name_offset(self) -> int:
        return self._link.name_offset

    @name_offset.setter
    def name_offset(self, value: int) -> None:
        self._link.name_offset = value

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        """Get path to settings file."""
        return self.settings.fileName()

    def reset_to_defaults(self) -> None:
        """Reset all settings in the current profile to defaults."""
        self.settings.remove("")
        self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
        self.settings.sync()
        logger.info(f"Settings for profile '{self.profile}' reset to defaults")
