"""
Settings validation system for mhw_data_reader.
"""

import logging
from typing import List, TYPE_CHECKING

from .logging import is_valid_level
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        # Values written by hand into the store bypass the setters
        stride = self.settings.link.name_stride
        if stride < 1:
            errors.append(f"Name stride must be at least 1: {stride}")

        offset = self.settings.link.name_offset
        if offset < 0:
            errors.append(f"Name offset must not be negative: {offset}")
        elif offset >= stride:
            warnings.append(
                f"Name offset {offset} is not smaller than stride {stride}; "
                "names will overlap the next item's entries"
            )

        level = self.settings.logging.console_log_level
        if not is_valid_level(level):
            warnings.append(f"Unknown console log level: {level}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
