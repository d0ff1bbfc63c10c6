"""
Utilities Module

This module contains shared utilities and helper functions.
"""

from .logging import get_logger, setup_logging
from .config import Config

__all__ = ["Config", "get_logger", "setup_logging"]
