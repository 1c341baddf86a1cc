"""
PyVFS Exception Hierarchy

Architecture:
    NamespaceException
    ├── EntryNotFoundError
    ├── AlreadyExistsError
    ├── InvalidPathError
    ├── NotADirectoryError
    ├── EmptyNameError
    └── BlockNotFoundError
    ConfigException
    ├── ConfigLoadError
    └── ConfigValidationError
"""

from .fs_exceptions import (
    NamespaceException,
    EntryNotFoundError,
    AlreadyExistsError,
    InvalidPathError,
    NotADirectoryError,
    EmptyNameError,
    BlockNotFoundError,
)

from .config_exceptions import (
    ConfigException,
    ConfigLoadError,
    ConfigValidationError,
)

__all__ = [
    # Namespace exceptions
    "NamespaceException",
    "EntryNotFoundError",
    "AlreadyExistsError",
    "InvalidPathError",
    "NotADirectoryError",
    "EmptyNameError",
    "BlockNotFoundError",
    # Configuration exceptions
    "ConfigException",
    "ConfigLoadError",
    "ConfigValidationError",
]
