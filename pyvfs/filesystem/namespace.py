"""
Namespace Module

An in-process directory namespace with a current working directory.

The cursor is kept as the tuple of names leading from the root to the
current directory and is re-resolved against the tree whenever the
directory itself is needed. It can therefore never dangle: every
operation either validates a new position completely before adopting
it or leaves the old one in place.

Instances are not thread-safe; callers sharing one across threads must
serialize access themselves.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import replace
from typing import Optional, List, Tuple

from .block_store import ContentHandle
from .entry import Attribs, Directory, Entry, File
from .path_resolver import PathResolver
from pyvfs.core.config_loader import NamespaceConfig, get_config
from pyvfs.exceptions import (
    AlreadyExistsError,
    EmptyNameError,
    EntryNotFoundError,
    NamespaceException,
    NotADirectoryError,
)
from pyvfs.logger import get_logger


class Namespace:
    """
    Directory tree plus a working-directory cursor.

    Example:
        >>> ns = Namespace()
        >>> ns.mkdir('home')
        >>> ns.cd('home')
        >>> ns.pwd()
        '/home'
    """

    def __init__(
        self,
        config: Optional[NamespaceConfig] = None,
        restore_cwd_after_mkdir: Optional[bool] = None
    ):
        self._config = replace(config or get_config().namespace)
        self._restore_cwd_after_mkdir = (
            self._config.restore_cwd_after_mkdir
            if restore_cwd_after_mkdir is None
            else restore_cwd_after_mkdir
        )
        self._root = Directory(attribs=self._dir_attribs())
        self._cwd: Tuple[str, ...] = ()
        self._logger = get_logger('namespace')

    def _dir_attribs(self) -> Attribs:
        return Attribs.from_mode(
            self._config.dir_mode,
            uid=self._config.default_uid,
            gid=self._config.default_gid
        )

    def _file_attribs(self) -> Attribs:
        return Attribs.from_mode(
            self._config.file_mode,
            uid=self._config.default_uid,
            gid=self._config.default_gid
        )

    @property
    def root(self) -> Directory:
        return self._root

    @property
    def cwd(self) -> str:
        """Base path of the cursor, always absolute and reduced."""
        return PathResolver.from_names(self._cwd)

    @property
    def current(self) -> Directory:
        """The directory the cursor points at."""
        directory, _ = self._walk(self.cwd)
        return directory

    def pwd(self) -> str:
        return self.cwd

    def _walk(self, path: str) -> Tuple[Directory, Tuple[str, ...]]:
        """
        Resolve a path to a directory.

        Args:
            path: Path, relative to the cursor unless absolute

        Returns:
            Tuple of (directory, names from root to it)

        Raises:
            EntryNotFoundError: If a named component does not exist
            NotADirectoryError: If a component is a file
            InvalidPathError: If a "." or ".." survives reduction
        """
        target = PathResolver.join(self.cwd, path)
        components = PathResolver.reduce_components(PathResolver.components(target))
        return self._root.walk(components)

    def cd(self, path: str) -> None:
        """
        Change the working directory.

        The cursor moves only if the whole path resolves to a directory.

        Args:
            path: Target path, relative to the cursor unless absolute

        Raises:
            EntryNotFoundError: If a named component does not exist
            NotADirectoryError: If a component is a file
            InvalidPathError: If a "." or ".." survives reduction
        """
        try:
            _, names = self._walk(path)
        except NamespaceException as e:
            self._logger.debug(
                "Change directory failed",
                context={'cwd': self.cwd, 'path': path, 'error_code': e.error_code}
            )
            raise

        self._cwd = names
        self._logger.debug("Changed directory", context={'path': self.cwd})

    def _prepare_create(self, name: str) -> Tuple[str, Tuple[str, ...]]:
        """
        Validate a creation target and move the cursor onto its parent.

        On failure the cursor is restored and the error propagates. On
        success the cursor is left at the parent and the leaf name is
        returned along with the cursor position from before the call.
        """
        saved = self._cwd

        try:
            if not name:
                raise EmptyNameError(name)

            target = PathResolver.join(self.cwd, name)
            parent_path, leaf = PathResolver.split(target)
            if not leaf:
                raise EmptyNameError(PathResolver.reduce(target))

            self.cd(parent_path)

            if leaf in self.current:
                raise AlreadyExistsError(PathResolver.join(self.cwd, leaf))
        except NamespaceException as e:
            self._cwd = saved
            self._logger.debug(
                "Create failed",
                context={'cwd': self.cwd, 'path': name, 'error_code': e.error_code}
            )
            raise

        return leaf, saved

    def mkdir(self, name: str) -> None:
        """
        Create an empty directory.

        The parent is reached with an internal ``cd``. If that fails the
        cursor is restored; if it succeeds the cursor stays on the parent
        unless the namespace is configured to return to where it started.

        Args:
            name: Path of the new directory, relative to the cursor
                unless absolute

        Raises:
            EmptyNameError: If the target has no leaf name
            AlreadyExistsError: If the parent already has that name
            EntryNotFoundError: If the parent path does not exist
            NotADirectoryError: If the parent path runs through a file
            InvalidPathError: If the parent path cannot be walked
        """
        leaf, saved = self._prepare_create(name)

        self.current.insert(leaf, Directory(attribs=self._dir_attribs()))
        self._logger.debug(
            "Created directory",
            context={'path': PathResolver.join(self.cwd, leaf)}
        )

        if self._restore_cwd_after_mkdir:
            self._cwd = saved

    def touch(self, name: str, content: bytes = b'') -> File:
        """
        Create a file.

        Follows the same validate-then-insert steps and cursor rules
        as :meth:`mkdir`.

        Args:
            name: Path of the new file
            content: Initial payload

        Returns:
            The new File entry

        Raises:
            TypeError: If content is not bytes-like
        """
        if not isinstance(content, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"File content must be bytes-like, not {type(content).__name__}"
            )

        leaf, saved = self._prepare_create(name)

        entry = File(name=leaf, content=ContentHandle(bytes(content)), attribs=self._file_attribs())
        self.current.insert(leaf, entry)
        self._logger.debug(
            "Created file",
            context={'path': PathResolver.join(self.cwd, leaf), 'size': entry.size}
        )

        if self._restore_cwd_after_mkdir:
            self._cwd = saved

        return entry

    def stat(self, path: str) -> Entry:
        """
        Look up an entry without moving the cursor.

        Raises:
            EntryNotFoundError: If the entry does not exist
            NotADirectoryError: If a parent component is a file
            InvalidPathError: If the path cannot be walked
        """
        parent_path, leaf = PathResolver.split(PathResolver.join(self.cwd, path))
        parent, _ = self._walk(parent_path)

        if not leaf:
            return parent

        entry = parent.lookup(leaf)
        if entry is None:
            raise EntryNotFoundError(PathResolver.join(parent_path, leaf), component=leaf)
        return entry

    def exists(self, path: str) -> bool:
        """Check if a path resolves to an entry."""
        try:
            self.stat(path)
        except NamespaceException:
            return False
        return True

    def listdir(self, path: str = '.') -> List[str]:
        """
        List the member names of a directory.

        Raises:
            NotADirectoryError: If path is a file
        """
        entry = self.stat(path)
        directory = entry.as_directory()
        if directory is None:
            raise NotADirectoryError(PathResolver.reduce(PathResolver.join(self.cwd, path)))
        return directory.names()
