"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/collector.py
Implements file collection for one or more root directories.
Features:
- Recursively walks each root with os.walk (symlinked directories are not followed)
- Returns every non-directory entry as a flat list of paths, roots in the given order
- Overlapping roots never yield the same file twice
- Any traversal error aborts collection and propagates to the caller
"""

import os
import time
import logging
from pathlib import Path
from typing import List, Optional, Callable, Sequence, Set

from remove_duplicates.core.interfaces import FileCollector

logger = logging.getLogger(__name__)


class CollectionError(RuntimeError):
    """Raised when a root directory cannot be enumerated."""


class FileCollectorImpl(FileCollector):
    """
    Collects file paths below a set of root directories.
    Unlike the hashing stage, collection is all-or-nothing: one unreadable directory
    fails the whole run before any file is hashed.
    A file reachable from several roots (a repeated or nested root) is listed once,
    under the first path it was found by.
    """

    def collect(self,
                roots: Sequence[str],
                progress_callback: Optional[Callable[[str, int, object], None]] = None) -> List[str]:
        found_files: List[str] = []
        seen: Set[str] = set()
        start_time = time.time()

        for root in roots:
            for path in self._collect_root(root):
                key = os.path.normpath(os.path.abspath(path))
                if key in seen:
                    continue
                seen.add(key)
                found_files.append(path)
            if progress_callback:
                progress_callback('collecting', len(found_files), None)

        logger.debug(f"Collected {len(found_files)} files from {len(roots)} root(s) "
                     f"in {time.time() - start_time:.2f} seconds")
        return found_files

    @staticmethod
    def _collect_root(root: str) -> List[str]:
        root_path = Path(root)

        # Validate root directory exists and is accessible
        if not root_path.exists():
            error_msg = f"Directory does not exist: {root}"
            logger.error(error_msg)
            raise CollectionError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {root}"
            logger.error(error_msg)
            raise CollectionError(error_msg)

        def _on_error(error: OSError) -> None:
            raise CollectionError(f"Cannot read directory {error.filename}: {error.strerror}") from error

        logger.debug(f"Collecting directory: {root}")
        files: List[str] = []
        for dirpath, dirnames, filenames in os.walk(str(root_path), onerror=_on_error):
            dirnames.sort()
            for filename in sorted(filenames):
                files.append(os.path.join(dirpath, filename))
        return files
