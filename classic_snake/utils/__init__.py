"""
Configuration and logging helpers for Classic Snake.
"""

from .config_loader import AppConfig, DisplayConfig, LoggingConfig, load_config, save_config
from .logging_setup import setup_logging

__all__ = [
    'AppConfig',
    'DisplayConfig',
    'LoggingConfig',
    'load_config',
    'save_config',
    'setup_logging',
]
