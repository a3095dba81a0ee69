"""Logging configuration for the Logistics domain.

Reuses the process-wide setup in :mod:`shared.logging`.
"""

from shared.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
