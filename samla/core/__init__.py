"""
Core utilities and configuration for Samla.

This package provides logging configuration, settings and application folder
resolution shared by the rest of the client core.
"""

from samla.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
