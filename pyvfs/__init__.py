"""
PyVFS - An in-process virtual filesystem namespace

A tree of directories and files addressed by POSIX-like paths, with
shell-style "cd" and "mkdir" over lexically normalized paths.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .filesystem import (
    Namespace,
    PathResolver,
    Entry,
    File,
    Directory,
    Attribs,
    ContentHandle,
    BlockStore,
    MemoryBlockStore,
)
from .exceptions import (
    NamespaceException,
    EntryNotFoundError,
    AlreadyExistsError,
    InvalidPathError,
    NotADirectoryError,
    EmptyNameError,
)

__all__ = [
    'Namespace',
    'PathResolver',
    'Entry',
    'File',
    'Directory',
    'Attribs',
    'ContentHandle',
    'BlockStore',
    'MemoryBlockStore',
    'NamespaceException',
    'EntryNotFoundError',
    'AlreadyExistsError',
    'InvalidPathError',
    'NotADirectoryError',
    'EmptyNameError',
]
