"""
Block Store Module

Content-addressable storage seam for file payloads.

File entries hold a ContentHandle, an immutable byte sequence that knows
its own SHA-256 digest. A BlockStore maps digests to bytes. The tree walk
never touches a store, so a remote or persistent store can be dropped in
without changing namespace logic.

Author: YSNRFD
Version: 1.0.0
"""

import hashlib
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass

from pyvfs.exceptions import BlockNotFoundError
from pyvfs.logger import get_logger


def compute_digest(data: bytes) -> str:
    """Hash a block the way every BlockStore keys it."""
    return hashlib.sha256(data).hexdigest()


@dataclass(frozen=True)
class ContentHandle:
    """Opaque, immutable handle to a file's payload."""
    data: bytes = b''

    @property
    def size(self) -> int:
        return len(self.data)

    def digest(self) -> str:
        return compute_digest(self.data)

    def store_into(self, store: 'BlockStore') -> str:
        """Write the payload into a store and return its digest."""
        return store.put(self.data)

    @classmethod
    def from_store(cls, store: 'BlockStore', digest: str) -> 'ContentHandle':
        """
        Materialize a handle from a stored block.

        Raises:
            BlockNotFoundError: If the store has no such block
        """
        return cls(store.get(digest))


class BlockStore(ABC):
    """
    Abstract put/get-by-hash service.

    Example:
        >>> class RemoteStore(BlockStore):
        ...     def put(self, data: bytes) -> str: ...
        ...     def get(self, digest: str) -> bytes: ...
        ...     def contains(self, digest: str) -> bool: ...
    """

    @abstractmethod
    def put(self, data: bytes) -> str:
        """
        Store a block.

        Args:
            data: Block contents

        Returns:
            Hex digest the block is addressed by
        """
        pass

    @abstractmethod
    def get(self, digest: str) -> bytes:
        """
        Fetch a block by digest.

        Raises:
            BlockNotFoundError: If no block has this digest
        """
        pass

    @abstractmethod
    def contains(self, digest: str) -> bool:
        """Check whether a block with this digest is stored."""
        pass

    def __contains__(self, digest: object) -> bool:
        return isinstance(digest, str) and self.contains(digest)


class MemoryBlockStore(BlockStore):
    """Dict-backed BlockStore living in the current process."""

    def __init__(self):
        self._blocks: dict[str, bytes] = {}
        self._lock = threading.Lock()
        self._logger = get_logger('block_store')

    def put(self, data: bytes) -> str:
        digest = compute_digest(data)
        with self._lock:
            if digest not in self._blocks:
                self._blocks[digest] = bytes(data)
                self._logger.debug(
                    "Stored block", context={'digest': digest, 'size': len(data)}
                )
        return digest

    def get(self, digest: str) -> bytes:
        with self._lock:
            data = self._blocks.get(digest)
        if data is None:
            raise BlockNotFoundError(digest)
        return data

    def contains(self, digest: str) -> bool:
        with self._lock:
            return digest in self._blocks

    def __len__(self) -> int:
        with self._lock:
            return len(self._blocks)
