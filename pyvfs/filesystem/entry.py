"""
Entry Module

The directory tree data model. An Entry is either a File or a
Directory; a Directory owns its children by name. Entries never point
back at their parents, so any subtree is a plain acyclic value that can
be copied, compared, or encoded.

Author: YSNRFD
Version: 1.0.0
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Flag
from typing import Optional, Any, Iterable, List, Tuple

from .block_store import ContentHandle
from .path_resolver import ComponentKind, PathComponent, PathResolver
from pyvfs.exceptions import (
    AlreadyExistsError,
    EmptyNameError,
    EntryNotFoundError,
    InvalidPathError,
    NotADirectoryError,
)


class Permission(Flag):
    """File permission bits."""
    OWNER_READ = 0o400
    OWNER_WRITE = 0o200
    OWNER_EXEC = 0o100

    GROUP_READ = 0o040
    GROUP_WRITE = 0o020
    GROUP_EXEC = 0o010

    OTHER_READ = 0o004
    OTHER_WRITE = 0o002
    OTHER_EXEC = 0o001

    OWNER_RWX = OWNER_READ | OWNER_WRITE | OWNER_EXEC

    DEFAULT_FILE = OWNER_READ | OWNER_WRITE | GROUP_READ | OTHER_READ
    DEFAULT_DIR = OWNER_RWX | GROUP_READ | GROUP_EXEC | OTHER_READ | OTHER_EXEC


S_ISUID = 0o4000
S_ISGID = 0o2000
S_ISVTX = 0o1000


@dataclass
class Attribs:
    """
    Per-entry metadata.

    Stored only; nothing in the namespace enforces these bits.
    """

    mtime: float = field(default_factory=time.time)
    posix: int = Permission.DEFAULT_FILE.value  # lower 9 permission bits
    sticky: bool = False
    setgid: bool = False
    setuid: bool = False
    uid: int = 0
    gid: int = 0

    @property
    def mode(self) -> int:
        """Full mode including setuid/setgid/sticky bits."""
        mode = self.posix & 0o777
        if self.setuid:
            mode |= S_ISUID
        if self.setgid:
            mode |= S_ISGID
        if self.sticky:
            mode |= S_ISVTX
        return mode

    @classmethod
    def from_mode(cls, mode: int, uid: int = 0, gid: int = 0) -> 'Attribs':
        attribs = cls(uid=uid, gid=gid)
        attribs.chmod(mode)
        return attribs

    def chmod(self, mode: int) -> None:
        """Change permission mode, special bits included."""
        self.posix = mode & 0o777
        self.setuid = bool(mode & S_ISUID)
        self.setgid = bool(mode & S_ISGID)
        self.sticky = bool(mode & S_ISVTX)

    def chown(self, uid: int, gid: int) -> None:
        """Change owner and group."""
        self.uid = uid
        self.gid = gid

    def touch(self) -> None:
        """Update modification time."""
        self.mtime = time.time()

    def to_dict(self) -> dict[str, Any]:
        return {
            'mtime': self.mtime,
            'mode': oct(self.mode),
            'uid': self.uid,
            'gid': self.gid,
        }


class Entry(ABC):
    """A node in the namespace tree: either a File or a Directory."""

    attribs: Attribs

    @property
    @abstractmethod
    def is_directory(self) -> bool:
        pass

    def as_directory(self) -> Optional['Directory']:
        """Downcast to Directory, or None for a File."""
        return None

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Plain representation suitable for encoding."""
        pass


@dataclass(eq=True)
class File(Entry):
    """A file entry with an opaque payload."""

    name: str
    content: ContentHandle = field(default_factory=ContentHandle)
    attribs: Attribs = field(default_factory=Attribs)

    @property
    def is_directory(self) -> bool:
        return False

    @property
    def size(self) -> int:
        return self.content.size

    def to_dict(self) -> dict[str, Any]:
        return {
            'type': 'file',
            'name': self.name,
            'size': self.content.size,
            'digest': self.content.digest(),
            'attribs': self.attribs.to_dict(),
        }


@dataclass(eq=True)
class Directory(Entry):
    """
    A directory entry.

    Members are keyed by name; names are unique, non-empty and contain
    no separator. Iteration order carries no meaning.
    """

    members: dict[str, Entry] = field(default_factory=dict)
    attribs: Attribs = field(
        default_factory=lambda: Attribs(posix=Permission.DEFAULT_DIR.value)
    )

    @property
    def is_directory(self) -> bool:
        return True

    def as_directory(self) -> Optional['Directory']:
        return self

    def lookup(self, name: str) -> Optional[Entry]:
        """Get a member by name, or None if absent."""
        return self.members.get(name)

    def insert(self, name: str, entry: Entry) -> None:
        """
        Add a new member.

        Args:
            name: Member name
            entry: Entry to insert

        Raises:
            EmptyNameError: If name is empty
            InvalidPathError: If name contains a separator or is "." or ".."
            AlreadyExistsError: If a member with this name exists
        """
        if not name:
            raise EmptyNameError(name)
        if not PathResolver.is_valid_name(name):
            raise InvalidPathError(name, reason="not a valid entry name")
        if name in self.members:
            raise AlreadyExistsError(name)

        self.members[name] = entry
        self.attribs.touch()

    def walk(self, components: Iterable[PathComponent]) -> Tuple['Directory', Tuple[str, ...]]:
        """
        Follow reduced path components down from this directory.

        A ROOT component returns the walk to this directory.

        Args:
            components: Reduced path components

        Returns:
            Tuple of (directory reached, names leading to it)

        Raises:
            EntryNotFoundError: If a named component does not exist
            NotADirectoryError: If a component is a file
            InvalidPathError: If a "." or ".." component is met
        """
        components = list(components)
        directory = self
        names: List[str] = []

        for component in components:
            if component.kind is ComponentKind.ROOT:
                directory = self
                names = []
            elif component.kind is ComponentKind.NAMED:
                names.append(component.name)
                entry = directory.lookup(component.name)
                if entry is None:
                    raise EntryNotFoundError(
                        PathResolver.from_names(names), component=component.name
                    )
                child = entry.as_directory()
                if child is None:
                    raise NotADirectoryError(
                        PathResolver.from_names(names), component=component.name
                    )
                directory = child
            else:
                raise InvalidPathError(
                    PathResolver.render(components),
                    reason=f"unresolved '{component}' component"
                )

        return directory, tuple(names)

    def names(self) -> List[str]:
        """Sorted member names."""
        return sorted(self.members)

    def __contains__(self, name: object) -> bool:
        return name in self.members

    def __len__(self) -> int:
        return len(self.members)

    def to_dict(self) -> dict[str, Any]:
        return {
            'type': 'directory',
            'attribs': self.attribs.to_dict(),
            'members': {
                name: self.members[name].to_dict() for name in self.names()
            },
        }
