"""
Unified command orchestrator for duplicate removal.
This is the SINGLE source of truth for the workflow. The CLI only adds console I/O.
"""
import logging
from typing import Callable, List, Optional

from remove_duplicates.core.collector import FileCollectorImpl
from remove_duplicates.core.engine import HashEngine
from remove_duplicates.core.hasher import HasherImpl, get_algorithm
from remove_duplicates.core.interfaces import FileCollector, Selector
from remove_duplicates.core.models import (
    HashBuckets, HashStats, ReferentIndex, RemovalOutcome, RemovalParams,
    RemovalPlan, RemovalReport)
from remove_duplicates.core.resolver import DuplicateResolver
from remove_duplicates.services.removal_service import RemovalExecutor

logger = logging.getLogger(__name__)


class RemoveDuplicatesCommand:
    """
    Orchestrates the entire removal workflow:
    1. Collect referent and source files (any collection error aborts here)
    2. Hash referents into a ReferentIndex, then hash sources into buckets
    3. Resolve buckets into a RemovalPlan
    4. Apply the plan (or report it in dry-run mode)

    Usage:
        params = RemovalParams(sources=("/photos",), referents=("/backup",), threads=4)
        command = RemoveDuplicatesCommand(selector=ConsoleSelector())
        report = command.execute(params, on_outcome=print_outcome)
    """

    def __init__(self,
                 selector: Optional[Selector] = None,
                 collector: Optional[FileCollector] = None,
                 executor: Optional[RemovalExecutor] = None):
        self._collector = collector or FileCollectorImpl()
        self._resolver = DuplicateResolver(selector)
        self._executor = executor or RemovalExecutor()
        self.referent_stats = HashStats()
        self.source_stats = HashStats()
        self.plan = RemovalPlan()

    def execute(
            self,
            params: RemovalParams,
            on_file_hashed: Optional[Callable[[str, bytes], None]] = None,
            on_outcome: Optional[Callable[[RemovalOutcome], None]] = None,
            stopped_flag: Optional[Callable[[], bool]] = None
    ) -> RemovalReport:
        """
        Execute duplicate removal with given parameters.

        Args:
            params: Validated removal parameters
            on_file_hashed: (path, digest) -> None, called for every hashed file
            on_outcome: (outcome) -> None, called for every planned file
            stopped_flag: () -> bool (returns True if hashing should stop)

        Returns:
            RemovalReport of the applied (or simulated) plan

        Raises:
            CollectionError: If any referent or source directory cannot be enumerated
        """
        referent_files: List[str] = self._collector.collect(params.referents)
        source_files: List[str] = self._collector.collect(params.sources)
        logger.debug(f"Collected {len(referent_files)} referent and {len(source_files)} source files")

        engine = HashEngine(params.threads, HasherImpl(get_algorithm(params.hash_algorithm)))

        referent_buckets = engine.hash_files(referent_files, on_file_hashed, stopped_flag)
        self.referent_stats = engine.stats
        referent_index = ReferentIndex.from_buckets(referent_buckets)

        source_buckets: HashBuckets = engine.hash_files(source_files, on_file_hashed, stopped_flag)
        self.source_stats = engine.stats

        # Incomplete buckets must never drive deletions
        if stopped_flag and stopped_flag():
            logger.debug("Hashing interrupted, nothing will be removed")
            self.plan = RemovalPlan()
            return RemovalReport(dry_run=params.dry_run)

        self.plan = self._resolver.resolve(source_buckets, referent_index, params.remove_by)
        return self._executor.apply(self.plan, dry_run=params.dry_run, on_outcome=on_outcome)
