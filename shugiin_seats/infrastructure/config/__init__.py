"""
Configuration module for shugiin_seats.

設定とロギングの一元化モジュール。
"""

from shugiin_seats.infrastructure.config.logging_config import LOG_FORMAT, setup_logging
from shugiin_seats.infrastructure.config.settings import (
    ENV_PREFIX,
    Settings,
    get_settings,
    reload_settings,
)


__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reload_settings",
    "ENV_PREFIX",
    # Logging
    "LOG_FORMAT",
    "setup_logging",
]
