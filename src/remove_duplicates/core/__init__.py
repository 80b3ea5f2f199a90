"""
Core duplicate removal engine — collector, hasher, worker pool, resolver and selector.

This package contains the performance-critical foundation of remove-duplicates:
- FileCollectorImpl: recursive directory traversal into a flat list of paths
- HasherImpl + Blake3AlgorithmImpl/Sha256AlgorithmImpl: streamed whole-file 256-bit digests
- HashEngine: fixed-size thread pool grouping paths by digest
- Sorter: modification-time ordering with unreadable files set aside
- DuplicateResolver: referent / newest / oldest / interactive removal planning
- ConsoleSelector: interactive prompt for choosing files to remove
- Models: FileRecord, ReferentIndex, RemovalPlan, RemovalReport and configuration objects

All components are pure Python with no console dependencies except ConsoleSelector.
"""

from .collector import FileCollectorImpl, CollectionError
from .hasher import HasherImpl, Blake3AlgorithmImpl, Sha256AlgorithmImpl, get_algorithm
from .engine import HashEngine
from .sorter import Sorter
from .resolver import DuplicateResolver
from .selector import ConsoleSelector, parse_selection
from .models import (
    FileRecord, HashBuckets, HashStats, HashAlgorithmName, ReferentIndex,
    RemovalMethod, RemovalReason, RemovalStatus, PlannedRemoval, RemovalPlan,
    RemovalOutcome, RemovalReport, RemovalParams)

__all__ = [
    "FileCollectorImpl",
    "CollectionError",
    "HasherImpl",
    "Blake3AlgorithmImpl",
    "Sha256AlgorithmImpl",
    "get_algorithm",
    "HashEngine",
    "Sorter",
    "DuplicateResolver",
    "ConsoleSelector",
    "parse_selection",
    "FileRecord",
    "HashBuckets",
    "HashStats",
    "HashAlgorithmName",
    "ReferentIndex",
    "RemovalMethod",
    "RemovalReason",
    "RemovalStatus",
    "PlannedRemoval",
    "RemovalPlan",
    "RemovalOutcome",
    "RemovalReport",
    "RemovalParams",
]
