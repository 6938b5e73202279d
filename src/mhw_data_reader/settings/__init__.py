"""
Settings package for mhw_data_reader.

Type-safe configuration on top of Qt's QSettings, stored either in the
platform settings store or in an INI file.

Usage:
    from mhw_data_reader.settings import AppSettings

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .logging import LoggingSettings
from .link import LinkSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "LoggingSettings",
    "LinkSettings",
]
