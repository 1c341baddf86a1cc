"""
Namespace Exceptions

Exceptions raised by path resolution and directory tree operations.
Every failed namespace operation surfaces as one of these; none of them
leaves the tree or the cursor partially updated.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class NamespaceException(Exception):
    """
    Base exception for all namespace-related errors.

    Attributes:
        message: Human-readable error description
        path: Path associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.error_code = error_code or 4000
        self.context = context or {}
        if path is not None:
            self.context["path"] = path

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path is not None:
            base = f"{base} (path={self.path})"
        return base


class EntryNotFoundError(NamespaceException):
    """
    A named path component does not exist.

    Raised while walking the tree when a directory has no member
    with the requested name.

    Example:
        >>> raise EntryNotFoundError("/a/b", component="b")
    """

    def __init__(
        self,
        path: str,
        component: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if component is not None:
            ctx["component"] = component
        super().__init__(
            message=f"No such file or directory: {path}",
            path=path,
            error_code=4001,
            context=ctx
        )
        self.component = component


class AlreadyExistsError(NamespaceException):
    """
    The target name is already occupied in its parent directory.

    Example:
        >>> raise AlreadyExistsError("/tmp")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File exists: {path}",
            path=path,
            error_code=4002,
            context=context
        )


class InvalidPathError(NamespaceException):
    """
    The path cannot be walked against the tree.

    Raised when a "." or ".." survives lexical reduction and reaches
    the tree walk, or when a name is not usable as a directory member.
    """

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Invalid path: {path}",
            path=path,
            error_code=4006,
            context=ctx
        )
        self.reason = reason


class NotADirectoryError(NamespaceException):
    """
    A path component resolved to a file where a directory was needed.

    Example:
        >>> raise NotADirectoryError("/etc/passwd/x", component="passwd")
    """

    def __init__(
        self,
        path: str,
        component: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if component is not None:
            ctx["component"] = component
        super().__init__(
            message=f"Not a directory: {path}",
            path=path,
            error_code=4009,
            context=ctx
        )
        self.component = component


class EmptyNameError(NamespaceException):
    """
    The resolved leaf name is empty.

    Raised by creation operations whose target reduces to the root
    or to a bare "." marker.
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Empty entry name: {path!r}",
            path=path,
            error_code=4010,
            context=context
        )


class BlockNotFoundError(NamespaceException):
    """
    No block with the given digest exists in the block store.

    Example:
        >>> raise BlockNotFoundError("e3b0c442...")
    """

    def __init__(
        self,
        digest: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["digest"] = digest
        super().__init__(
            message=f"Block not found: {digest}",
            error_code=4020,
            context=ctx
        )
        self.digest = digest
