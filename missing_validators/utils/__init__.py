"""
Shared utilities: settings and logging.
"""

from missing_validators.utils.config import Settings, get_settings, settings
from missing_validators.utils.logger import setup_logger, log_error

__all__ = ['Settings', 'get_settings', 'settings', 'setup_logger', 'log_error']
