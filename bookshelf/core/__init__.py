"""
Bookshelf Core - Application Infrastructure.

Provides:
- ConfigManager: Configuration with persistence and change notification
- Signal: Synchronous observer used by non-Qt code
- setup_logging: Loguru configuration
- catalog: Catalog data models and loader

Usage:
    from bookshelf.core import ConfigManager, setup_logging

    setup_logging(debug_mode=True)
    config = ConfigManager("config.json")
"""
from .config import (
    ConfigManager,
    AppConfig,
    GeneralSettings,
    LayoutSettings,
    ScrollSettings,
)
from .events import Signal
from .logging import setup_logging

__all__ = [
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "LayoutSettings",
    "ScrollSettings",
    "Signal",
    "setup_logging",
]
