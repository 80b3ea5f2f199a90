"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and domain logic for content hashing and duplicate removal.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union
import os


# =============================
# Enums
# =============================

class RemovalMethod(Enum):
    """
    Policy used to decide which files of a duplicate bucket are removed.
    """
    NEWEST = "newest"
    OLDEST = "oldest"
    INTERACTIVE = "interactive"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            RemovalMethod.NEWEST: "Keep newest",
            RemovalMethod.OLDEST: "Keep oldest",
            RemovalMethod.INTERACTIVE: "Interactive",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            RemovalMethod.NEWEST:
                "Keep the most recently modified file, remove the rest",
            RemovalMethod.OLDEST:
                "Keep the least recently modified file, remove the rest",
            RemovalMethod.INTERACTIVE:
                "Ask which files to remove for every duplicate bucket",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class HashAlgorithmName(Enum):
    BLAKE3 = "blake3"
    SHA256 = "sha256"

    def __repr__(self) -> str:
        return self.value


class RemovalReason(str, Enum):
    REFERENT_MATCH = "referent-match"
    POLICY = "policy"
    INTERACTIVE = "interactive"


class RemovalStatus(str, Enum):
    REMOVED = "removed"
    WOULD_REMOVE = "would-remove"
    FAILED = "failed"


# ======================
#  Core Data Models
# ======================

# digest (32 raw bytes) -> paths sharing that digest, in hashing completion order
HashBuckets = Dict[bytes, List[str]]


@dataclass(frozen=True)
class FileRecord:
    """
    A file path together with its last modification time.
    Always built fresh from the file system, never cached between stages.
    """
    path: str
    modified_at: datetime

    @classmethod
    def from_path(cls, path: str) -> "FileRecord":
        """Reads the current mtime of `path`. Raises OSError if it cannot be stat'ed."""
        stat_result = os.stat(path)
        return cls(path=path, modified_at=datetime.fromtimestamp(stat_result.st_mtime))

    def __repr__(self):
        return f"<FileRecord path={self.path}, modified_at={self.modified_at:%Y-%m-%d %H:%M:%S}>"


@dataclass(frozen=True)
class ReferentIndex:
    """
    Digests of the protected referent files.
    `paths` holds the referent files themselves so they are never planned for removal,
    even when a referent directory is also passed as a source.
    """
    digests: FrozenSet[bytes] = frozenset()
    paths: FrozenSet[str] = frozenset()

    @classmethod
    def from_buckets(cls, buckets: HashBuckets) -> "ReferentIndex":
        paths = {
            os.path.normpath(os.path.abspath(p))
            for bucket in buckets.values()
            for p in bucket
        }
        return cls(digests=frozenset(buckets.keys()), paths=frozenset(paths))

    def is_referent_path(self, path: str) -> bool:
        return os.path.normpath(os.path.abspath(path)) in self.paths

    def __contains__(self, digest: object) -> bool:
        return digest in self.digests

    def __len__(self) -> int:
        return len(self.digests)


@dataclass(frozen=True)
class PlannedRemoval:
    reason: RemovalReason
    paths: Tuple[str, ...]


@dataclass
class RemovalPlan:
    """
    Ordered mapping of digest -> PlannedRemoval.
    Only digests with at least one path to remove are present.
    """
    entries: Dict[bytes, PlannedRemoval] = field(default_factory=dict)

    def add(self, digest: bytes, reason: RemovalReason, paths: Iterable[str]) -> None:
        paths = tuple(paths)
        if not paths:
            return
        self.entries[digest] = PlannedRemoval(reason=reason, paths=paths)

    def all_paths(self) -> List[str]:
        return [p for entry in self.entries.values() for p in entry.paths]

    def items(self) -> Iterator[Tuple[bytes, PlannedRemoval]]:
        return iter(self.entries.items())

    def __contains__(self, digest: object) -> bool:
        return digest in self.entries

    def __getitem__(self, digest: bytes) -> PlannedRemoval:
        return self.entries[digest]

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self):
        return f"<RemovalPlan digests={len(self.entries)}, files={len(self.all_paths())}>"


@dataclass(frozen=True)
class RemovalOutcome:
    path: str
    digest: bytes
    reason: RemovalReason
    status: RemovalStatus
    error: Optional[str] = None


@dataclass
class RemovalReport:
    """
    Result of applying a RemovalPlan: one outcome per planned path, in plan order.
    """
    dry_run: bool = False
    outcomes: List[RemovalOutcome] = field(default_factory=list)
    bytes_freed: int = 0

    def _count(self, status: RemovalStatus) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def removed(self) -> int:
        return self._count(RemovalStatus.REMOVED)

    @property
    def would_remove(self) -> int:
        return self._count(RemovalStatus.WOULD_REMOVE)

    @property
    def failed(self) -> List[RemovalOutcome]:
        return [o for o in self.outcomes if o.status == RemovalStatus.FAILED]

    def paths(self, status: RemovalStatus) -> List[str]:
        return [o.path for o in self.outcomes if o.status == status]


@dataclass
class HashStats:
    """
    Statistics collected during a single HashEngine run.
    """
    files_total: int = 0
    files_hashed: int = 0
    files_failed: int = 0
    buckets: int = 0
    total_time: float = 0.0

    def print_summary(self, label: str = "Hashing") -> str:
        return (
            f"{label}: {self.files_hashed}/{self.files_total} files hashed, "
            f"{self.files_failed} failed, {self.buckets} unique digests "
            f"in {self.total_time:.3f}s"
        )


"""
DTO for removal parameters with built-in validation.
Interface-agnostic — used by the CLI and by tests.
"""


@dataclass(frozen=True)
class RemovalParams:
    """Immutable run configuration, passed explicitly to every component."""
    sources: Tuple[str, ...]
    referents: Tuple[str, ...] = ()
    threads: int = 1
    remove_by: RemovalMethod = RemovalMethod.NEWEST
    dry_run: bool = False
    verbose: bool = False
    hash_algorithm: HashAlgorithmName = HashAlgorithmName.BLAKE3

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.sources:
            raise ValueError("At least one source directory is required")

        if any(not s for s in self.sources):
            raise ValueError("Source directory cannot be empty")

        if self.threads < 1:
            raise ValueError("Thread count must be at least 1")

        if not isinstance(self.remove_by, RemovalMethod):
            raise ValueError(f"Unknown removal method: {self.remove_by!r}")

        if not isinstance(self.hash_algorithm, HashAlgorithmName):
            raise ValueError(f"Unknown hash algorithm: {self.hash_algorithm!r}")

    @staticmethod
    def from_cli_values(
            sources: List[str],
            referents_str: Optional[List[str]] = None,
            threads: int = 1,
            remove_by: Union[str, RemovalMethod] = "newest",
            dry_run: bool = False,
            verbose: bool = False,
            hash_algorithm: Union[str, HashAlgorithmName] = "blake3",
    ) -> "RemovalParams":
        """
        Factory method to create params from raw command-line values.
        Each referent value may hold several comma-separated directories.
        Method and algorithm may be given as enum members or as their string values.
        """
        referents = [
            item.strip()
            for value in (referents_str or [])
            for item in value.split(",")
            if item.strip()
        ]

        try:
            method = RemovalMethod(remove_by)
        except ValueError:
            raise ValueError(
                f"Invalid removal method: '{remove_by}'. "
                f"Valid options: {', '.join(m.value for m in RemovalMethod)}"
            )

        try:
            algorithm = HashAlgorithmName(hash_algorithm)
        except ValueError:
            raise ValueError(
                f"Invalid hash algorithm: '{hash_algorithm}'. "
                f"Valid options: {', '.join(a.value for a in HashAlgorithmName)}"
            )

        return RemovalParams(
            sources=tuple(sources),
            referents=tuple(referents),
            threads=threads,
            remove_by=method,
            dry_run=dry_run,
            verbose=verbose,
            hash_algorithm=algorithm,
        )
