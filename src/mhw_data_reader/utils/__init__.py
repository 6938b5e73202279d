"""Utility helpers for mhw_data_reader."""

from .logging_config import setup_logging

__all__ = ["setup_logging"]
