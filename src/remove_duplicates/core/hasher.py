"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements whole-file content hashing using pluggable 256-bit hash algorithms.

HasherImpl streams a file through the algorithm in fixed-size chunks, so memory use
stays constant regardless of file size.
"""

import hashlib

import blake3

from remove_duplicates.core.interfaces import Hasher, HashAlgorithm, HashState
from remove_duplicates.core.models import HashAlgorithmName

READ_CHUNK_SIZE = 1024 * 1024  # 1 MiB


# Use the same way to implement and use any other hashing algorithm
class Blake3AlgorithmImpl(HashAlgorithm):
    name = "blake3"
    digest_size = 32

    def new(self) -> HashState:
        return blake3.blake3()


class Sha256AlgorithmImpl(HashAlgorithm):
    name = "sha256"
    digest_size = 32

    def new(self) -> HashState:
        return hashlib.sha256()


ALGORITHMS = {
    HashAlgorithmName.BLAKE3: Blake3AlgorithmImpl,
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl,
}


def get_algorithm(name: HashAlgorithmName) -> HashAlgorithm:
    """Returns a new algorithm instance for the given name."""
    try:
        return ALGORITHMS[name]()
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {name!r}")


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Errors are not swallowed here: callers decide how a failed file is handled.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = READ_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or Blake3AlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_full_hash(self, path: str) -> bytes:
        state = self.algorithm.new()
        with open(path, 'rb') as f:
            while True:
                chunk = f.read(self.chunk_size)
                if not chunk:
                    break
                state.update(chunk)
        return state.digest()
