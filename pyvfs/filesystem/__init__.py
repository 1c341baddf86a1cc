"""
PyVFS Namespace Module

Provides the in-process directory namespace:
- Lexical path reduction
- File and directory entries with POSIX-like metadata
- A working-directory cursor with cd/mkdir
- A content-addressable block store seam for payloads
"""

from .path_resolver import PathResolver, PathComponent, ComponentKind
from .block_store import BlockStore, MemoryBlockStore, ContentHandle, compute_digest
from .entry import Entry, File, Directory, Attribs, Permission
from .namespace import Namespace

__all__ = [
    # Path Resolver
    'PathResolver',
    'PathComponent',
    'ComponentKind',
    # Block Store
    'BlockStore',
    'MemoryBlockStore',
    'ContentHandle',
    'compute_digest',
    # Entries
    'Entry',
    'File',
    'Directory',
    'Attribs',
    'Permission',
    # Namespace
    'Namespace',
]
