"""Utility functions and configuration management."""

from hoops_digest.utils.config import get_settings
from hoops_digest.utils.logging import get_logger

__all__ = ["get_settings", "get_logger"]
