"""
remove-duplicates — content-hash based duplicate file removal.

Core features:
- Whole-file BLAKE3 (or SHA-256) digests computed by a fixed-size thread pool
- Removal policies: keep newest, keep oldest, or choose interactively
- Referent directories: any source file already present in a referent is removed
- Dry-run mode reporting every file that would be removed
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("remove-duplicates")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API: only what users should import directly
from remove_duplicates.commands import RemoveDuplicatesCommand
from remove_duplicates.core import (
    RemovalParams, RemovalMethod, RemovalPlan, RemovalReport, ReferentIndex,
    HashEngine, DuplicateResolver, ConsoleSelector)
from remove_duplicates.services import FileService, RemovalExecutor

__all__ = [
    "RemoveDuplicatesCommand",
    "RemovalParams",
    "RemovalMethod",
    "RemovalPlan",
    "RemovalReport",
    "ReferentIndex",
    "HashEngine",
    "DuplicateResolver",
    "ConsoleSelector",
    "FileService",
    "RemovalExecutor",
    "__version__",
]
