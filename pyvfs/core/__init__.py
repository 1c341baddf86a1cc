"""
PyVFS Core Module

Configuration shared by the rest of the library.
"""

from .config_loader import (
    Config,
    ConfigLoader,
    LoggingConfig,
    NamespaceConfig,
    get_config,
)

__all__ = [
    'Config',
    'ConfigLoader',
    'LoggingConfig',
    'NamespaceConfig',
    'get_config',
]
