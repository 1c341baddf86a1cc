"""
Path Resolver Module

Lexical path handling for the namespace. Nothing in here consults the
directory tree: paths are decomposed into components, reduced, and
rendered back to strings purely syntactically.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple


SEPARATOR = '/'


class ComponentKind(Enum):
    """Classification of a single path component."""
    ROOT = 'root'
    CURRENT = 'current'
    PARENT = 'parent'
    NAMED = 'named'


@dataclass(frozen=True)
class PathComponent:
    """One component of a path. Only NAMED components carry a name."""
    kind: ComponentKind
    name: str = ''

    def __str__(self) -> str:
        if self.kind is ComponentKind.ROOT:
            return SEPARATOR
        if self.kind is ComponentKind.CURRENT:
            return '.'
        if self.kind is ComponentKind.PARENT:
            return '..'
        return self.name


ROOT = PathComponent(ComponentKind.ROOT)
CURRENT = PathComponent(ComponentKind.CURRENT)
PARENT = PathComponent(ComponentKind.PARENT)


class PathResolver:
    """
    Decomposes, reduces and manipulates namespace paths.

    Reduction follows shell semantics without touching the tree:

    - ``.`` survives only as the very first component of a relative path
    - ``..`` removes a preceding name, stays literal after ``.``/``..``
      or at the start, and is absorbed by the root
    - repeated and trailing separators disappear

    Example:
        >>> PathResolver.reduce('./a//b//../')
        './a'
        >>> PathResolver.reduce('//..')
        '/'
    """

    @staticmethod
    def components(path: str) -> List[PathComponent]:
        """
        Split a path into classified components.

        Args:
            path: Path string to decompose

        Returns:
            Components in path order
        """
        result: List[PathComponent] = []

        if path.startswith(SEPARATOR):
            result.append(ROOT)

        for index, segment in enumerate(path.split(SEPARATOR)):
            if not segment:
                continue
            if segment == '.':
                # A leading "." marks the path as anchored at the current directory
                if index == 0:
                    result.append(CURRENT)
            elif segment == '..':
                result.append(PARENT)
            else:
                result.append(PathComponent(ComponentKind.NAMED, segment))

        return result

    @staticmethod
    def reduce_components(components: Iterable[PathComponent]) -> List[PathComponent]:
        """
        Lexically reduce a component sequence.

        Args:
            components: Unreduced components

        Returns:
            Reduced components
        """
        reduced: List[PathComponent] = []

        for position, component in enumerate(components):
            kind = component.kind

            if kind is ComponentKind.CURRENT:
                if position == 0:
                    reduced.append(component)
            elif kind is ComponentKind.ROOT:
                reduced = [ROOT]
            elif kind is ComponentKind.PARENT:
                last = reduced[-1].kind if reduced else None
                if last is None or last in (ComponentKind.CURRENT, ComponentKind.PARENT):
                    reduced.append(PARENT)
                elif last is ComponentKind.NAMED:
                    reduced.pop()
                # parent of the root is the root
            else:
                reduced.append(component)

        return reduced

    @staticmethod
    def render(components: Iterable[PathComponent]) -> str:
        """
        Render components back into a path string.

        Args:
            components: Components to render

        Returns:
            Path string; ``''`` for no components
        """
        parts = list(components)

        if parts and parts[0].kind is ComponentKind.ROOT:
            return SEPARATOR + SEPARATOR.join(str(c) for c in parts[1:])
        return SEPARATOR.join(str(c) for c in parts)

    @staticmethod
    def reduce(path: str) -> str:
        """
        Lexically reduce a path string.

        Args:
            path: Path to reduce

        Returns:
            Reduced path string
        """
        return PathResolver.render(
            PathResolver.reduce_components(PathResolver.components(path))
        )

    @staticmethod
    def join(base: str, path: str) -> str:
        """
        Join a path onto a base path without reducing it.

        An absolute ``path`` replaces ``base`` entirely.

        Args:
            base: Base path
            path: Path to append

        Returns:
            Joined path string
        """
        if PathResolver.is_absolute(path) or not base:
            return path
        if base.endswith(SEPARATOR):
            return base + path
        return base + SEPARATOR + path

    @staticmethod
    def split(path: str) -> Tuple[str, str]:
        """
        Split a path into its reduced parent and leaf name.

        The leaf is empty when the reduced path does not end in a name,
        e.g. for ``/``, ``.`` or ``..``.

        Args:
            path: Path string

        Returns:
            Tuple of (parent, leaf)
        """
        reduced = PathResolver.reduce_components(PathResolver.components(path))

        if not reduced or reduced[-1].kind is not ComponentKind.NAMED:
            return (PathResolver.render(reduced), '')

        leaf = reduced.pop().name
        return (PathResolver.render(reduced), leaf)

    @staticmethod
    def from_names(names: Iterable[str]) -> str:
        """Build an absolute path from a sequence of names below the root."""
        return SEPARATOR + SEPARATOR.join(names)

    @staticmethod
    def is_absolute(path: str) -> bool:
        """Check if a path is absolute."""
        return path.startswith(SEPARATOR)

    @staticmethod
    def is_valid_name(name: str) -> bool:
        """Check if a string can be used as a directory member name."""
        return bool(name) and SEPARATOR not in name and name not in ('.', '..')
