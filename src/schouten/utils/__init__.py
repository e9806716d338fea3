"""Utility modules for schouten."""

from schouten.utils.logging import setup_logger

__all__ = ["setup_logger"]
