"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate removal system.
These protocols enforce structural typing using Python's `typing.Protocol` so that
collectors, hashers and selectors can be swapped (e.g. by scripted test doubles)
without touching the engine or the resolver.

Key Components:
---------------
- HashState / HashAlgorithm: Incremental 256-bit digest functions (BLAKE3, SHA-256).
- Hasher: Interface for computing the whole-file digest of a path.
- FileCollector: Interface for turning root directories into a flat list of file paths.
- Selector: Interface for choosing which files of a duplicate bucket to remove.
"""

from typing import Protocol, List, Sequence


# ===== Interfaces =====

class HashState(Protocol):
    """Running digest computation, fed chunk by chunk."""
    def update(self, data: bytes) -> object: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic incremental hash algorithms.

    Allows plugging in different 256-bit hash functions without affecting
    the rest of the hashing and resolution logic.
    """
    name: str
    digest_size: int

    def new(self) -> HashState:
        """Returns a fresh hashing state."""
        ...


class Hasher(Protocol):
    """Interface for hashing the complete content of a file."""
    def compute_full_hash(self, path: str) -> bytes:
        """
        Computes the digest of the whole file.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        ...


class FileCollector(Protocol):
    """
    Interface for enumerating files below a set of root directories.
    """
    def collect(self, roots: Sequence[str]) -> List[str]:
        """
        Collect every non-directory entry beneath each root, recursively.

        Raises:
            CollectionError: If a root cannot be enumerated.
        """
        ...


class Selector(Protocol):
    """
    Interface for choosing which files of one duplicate bucket are removed.
    """
    def select(self, digest: bytes, paths: Sequence[str]) -> List[str]:
        """
        Args:
            digest: The bucket's content digest.
            paths: Files sharing that digest (at least two).

        Returns:
            The subset of `paths` to remove. An empty list keeps all of them.
        """
        ...
