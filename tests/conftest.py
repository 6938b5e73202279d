"""Shared pytest fixtures."""

import logging
import logging.handlers
from pathlib import Path
from typing import Iterator

import pytest

from mhw_data_reader.settings import AppSettings


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Remove the handlers installed by setup_logging after each test."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture
def app_settings(settings_file: Path) -> AppSettings:
    return AppSettings(settings_file=settings_file)
