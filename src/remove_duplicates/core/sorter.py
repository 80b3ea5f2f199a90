"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
Pure ordering logic for duplicate buckets.
Orders paths by modification time read from the file system at call time.
"""
import logging
from typing import List, Sequence, Tuple

from remove_duplicates.core.models import FileRecord, RemovalMethod

logger = logging.getLogger(__name__)


class Sorter:
    """
    Orders the files of one bucket so that the survivor comes first.
    Sorting priority (applied lexicographically):
    1. Modification time: newest first for NEWEST, oldest first for OLDEST
    2. Path, so equal timestamps always resolve the same way
    Paths whose metadata cannot be read are left out of the ordering and returned separately.
    """

    @staticmethod
    def read_records(paths: Sequence[str]) -> Tuple[List[FileRecord], List[str]]:
        """Stat every path. Returns (records, unreadable paths)."""
        records = []
        unreadable = []
        for path in paths:
            try:
                records.append(FileRecord.from_path(path))
            except OSError as e:
                logger.warning(f"Error getting file info for {path}: {e}")
                unreadable.append(path)
        return records, unreadable

    @staticmethod
    def sort_by_modified_time(paths: Sequence[str], method: RemovalMethod) -> Tuple[List[str], List[str]]:
        """
        Returns (ordered paths, unreadable paths).
        Raises ValueError for methods that do not order by time.
        """
        if method not in (RemovalMethod.NEWEST, RemovalMethod.OLDEST):
            raise ValueError(f"Cannot order by modification time for method: {method!r}")

        records, unreadable = Sorter.read_records(sorted(paths))
        # Stable sort: paths were sorted first, so ties stay in path order
        records.sort(key=lambda r: r.modified_at, reverse=(method == RemovalMethod.NEWEST))
        return [r.path for r in records], unreadable
