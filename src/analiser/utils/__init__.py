"""Utility modules for analiser.

Provides:
- logger: get_logger for namespaced logging, configure_cli_logging for the driver
"""

from analiser.utils.logger import configure_cli_logging, get_logger

__all__ = ["configure_cli_logging", "get_logger"]
