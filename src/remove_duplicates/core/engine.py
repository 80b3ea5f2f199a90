"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/engine.py
Concurrent content hashing: turns a list of paths into digest-keyed buckets.

CONCURRENCY MODEL
-----------------
- All paths are put on a queue before any worker starts; nothing is added later
- Exactly `workers` threads drain the queue, one file at a time, to completion
- Results are merged into a single dict under one lock (the only shared mutable state)
- The caller is blocked until every worker has been joined
- Order of paths inside a bucket is the order in which hashing finished, so it varies between runs

ERRORS
------
A file that cannot be opened or read is logged, counted and left out of every bucket.
The rest of the batch carries on; failed files are not retried.
An exception raised by `on_file_hashed` stops the pool and is re-raised to the caller once
every worker has been joined.
"""

import logging
import queue
import threading
import time
from collections import defaultdict
from typing import Callable, List, Optional, Sequence

from remove_duplicates.core.hasher import HasherImpl
from remove_duplicates.core.interfaces import Hasher
from remove_duplicates.core.models import HashBuckets, HashStats

logger = logging.getLogger(__name__)


class HashEngine:
    """
    Fixed-size worker pool computing whole-file digests.
    `stats` describes the most recent `hash_files` call.
    """

    def __init__(self, workers: int = 1, hasher: Hasher = None):
        if workers < 1:
            raise ValueError("Worker count must be at least 1")
        self.workers = workers
        self.hasher = hasher or HasherImpl()
        self.stats = HashStats()

    def hash_files(
            self,
            paths: Sequence[str],
            on_file_hashed: Optional[Callable[[str, bytes], None]] = None,
            stopped_flag: Optional[Callable[[], bool]] = None
    ) -> HashBuckets:
        """
        Hash every path and group them by digest.

        Args:
            paths: Files to hash.
            on_file_hashed: Called as (path, digest) after each successful hash,
                            from the worker thread, in completion order.
            stopped_flag: Function that returns True if workers should stop taking new files.

        Returns:
            Dict of digest -> paths with that digest.

        Raises:
            Exception: The first error raised by `on_file_hashed`, after all workers stopped.
        """
        stats = HashStats(files_total=len(paths))
        self.stats = stats
        if not paths:
            return {}

        work: "queue.Queue[str]" = queue.Queue()
        for path in paths:
            work.put(path)

        buckets = defaultdict(list)
        callback_errors: List[Exception] = []
        lock = threading.Lock()
        start_time = time.time()

        def worker() -> None:
            while True:
                if callback_errors or (stopped_flag and stopped_flag()):
                    return
                try:
                    path = work.get_nowait()
                except queue.Empty:
                    return

                try:
                    digest = self.hasher.compute_full_hash(path)
                except OSError as e:
                    logger.warning(f"Error hashing file {path}: {e}")
                    with lock:
                        stats.files_failed += 1
                    continue

                with lock:
                    buckets[digest].append(path)
                    stats.files_hashed += 1

                if on_file_hashed:
                    try:
                        on_file_hashed(path, digest)
                    except Exception as e:
                        logger.error(f"Progress callback failed for {path}: {e}")
                        with lock:
                            callback_errors.append(e)
                        return

        threads: List[threading.Thread] = [
            threading.Thread(target=worker, name=f"hash-worker-{i}", daemon=True)
            for i in range(self.workers)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        if callback_errors:
            raise callback_errors[0]

        stats.buckets = len(buckets)
        stats.total_time = time.time() - start_time
        logger.debug(stats.print_summary())
        return dict(buckets)
