"""
Utility helpers shared across igniteorm packages.
"""

from .logging import configure_logging, get_logger, resolve_log_level
from .naming import camel_to_snake, is_plain_identifier

__all__ = ["camel_to_snake", "configure_logging", "get_logger", "is_plain_identifier", "resolve_log_level"]
