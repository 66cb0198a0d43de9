"""
wacloud core components.

Configuration and logging shared by every messaging component.
"""

from .config.settings import settings
from .logging import get_logger, setup_app_logging, setup_logging

__all__ = ["settings", "get_logger", "setup_app_logging", "setup_logging"]
