"""
Tests for HashEngine: the fixed-size worker pool grouping files by digest.
Covers worker-count independence, error isolation, callbacks and cancellation.
"""
import threading

import pytest

from remove_duplicates.core.engine import HashEngine
from remove_duplicates.core.hasher import HasherImpl


def as_sets(buckets):
    """Bucket order is a race outcome; compare contents only."""
    return {digest: set(paths) for digest, paths in buckets.items()}


class TestHashEngineGrouping:

    def test_empty_input_returns_empty_mapping(self):
        engine = HashEngine(workers=4)
        assert engine.hash_files([]) == {}
        assert engine.stats.files_total == 0

    def test_groups_identical_content(self, temp_dir, make_file):
        """Three files "A", "A", "B" produce two buckets of sizes 2 and 1."""
        a1 = make_file(temp_dir / "f1", b"A")
        a2 = make_file(temp_dir / "f2", b"A")
        b1 = make_file(temp_dir / "f3", b"B")

        buckets = HashEngine(workers=1).hash_files([str(a1), str(a2), str(b1)])

        assert len(buckets) == 2
        sizes = sorted(len(paths) for paths in buckets.values())
        assert sizes == [1, 2]
        digest_a = HasherImpl().compute_full_hash(str(a1))
        assert set(buckets[digest_a]) == {str(a1), str(a2)}

    @pytest.mark.parametrize("workers", [2, 3, 8, 50])
    def test_worker_count_does_not_change_buckets(self, temp_dir, make_file, workers):
        """
        CRITICAL: concurrency must not change which files end up in which bucket.
        """
        paths = []
        for i in range(40):
            content = f"content-{i % 7}".encode()
            paths.append(str(make_file(temp_dir / f"file{i:02d}", content)))

        single = HashEngine(workers=1).hash_files(paths)
        parallel = HashEngine(workers=workers).hash_files(paths)

        assert as_sets(single) == as_sets(parallel)
        assert sum(len(p) for p in parallel.values()) == 40

    def test_every_path_in_bucket_hashes_to_its_digest(self, test_files):
        paths = [str(p) for p in test_files.values()]
        hasher = HasherImpl()

        buckets = HashEngine(workers=3, hasher=hasher).hash_files(paths)

        for digest, bucket in buckets.items():
            for path in bucket:
                assert hasher.compute_full_hash(path) == digest

    def test_stats_are_recorded(self, test_files):
        paths = [str(p) for p in test_files.values()]
        engine = HashEngine(workers=2)

        buckets = engine.hash_files(paths)

        assert engine.stats.files_total == len(paths)
        assert engine.stats.files_hashed == len(paths)
        assert engine.stats.files_failed == 0
        assert engine.stats.buckets == len(buckets)


class TestHashEngineErrors:

    def test_invalid_worker_count_rejected(self):
        with pytest.raises(ValueError, match="at least 1"):
            HashEngine(workers=0)

    def test_unreadable_file_is_excluded_not_fatal(self, temp_dir, make_file, caplog):
        """A missing file is logged and skipped; the rest of the batch is still hashed."""
        good1 = make_file(temp_dir / "good1", b"same")
        good2 = make_file(temp_dir / "good2", b"same")
        missing = temp_dir / "missing"

        engine = HashEngine(workers=2)
        with caplog.at_level("WARNING"):
            buckets = engine.hash_files([str(good1), str(missing), str(good2)])

        all_paths = {p for bucket in buckets.values() for p in bucket}
        assert all_paths == {str(good1), str(good2)}
        assert engine.stats.files_failed == 1
        assert engine.stats.files_hashed == 2
        assert "Error hashing file" in caplog.text
        assert str(missing) in caplog.text

    def test_directory_path_is_a_hash_error(self, temp_dir, make_file):
        """Opening a directory raises OSError inside the worker and is skipped."""
        subdir = temp_dir / "adir"
        subdir.mkdir()
        good = make_file(temp_dir / "good", b"x")

        engine = HashEngine(workers=1)
        buckets = engine.hash_files([str(subdir), str(good)])

        assert [p for b in buckets.values() for p in b] == [str(good)]
        assert engine.stats.files_failed == 1


class TestHashEngineCallbacks:

    def test_on_file_hashed_reports_every_success(self, test_files):
        paths = [str(p) for p in test_files.values()]
        reported = []
        lock = threading.Lock()

        def on_file_hashed(path, digest):
            with lock:
                reported.append((path, digest))

        buckets = HashEngine(workers=4).hash_files(paths, on_file_hashed=on_file_hashed)

        assert {p for p, _ in reported} == set(paths)
        for path, digest in reported:
            assert path in buckets[digest]

    def test_stopped_flag_prevents_any_hashing(self, test_files):
        paths = [str(p) for p in test_files.values()]
        engine = HashEngine(workers=2)

        buckets = engine.hash_files(paths, stopped_flag=lambda: True)

        assert buckets == {}
        assert engine.stats.files_hashed == 0

    def test_stopped_flag_midway_stops_taking_files(self, temp_dir, make_file):
        """With one worker, a flag raised after the first file leaves the rest unhashed."""
        paths = [str(make_file(temp_dir / f"f{i}", b"data")) for i in range(5)]
        hashed = []

        def on_file_hashed(path, digest):
            hashed.append(path)

        engine = HashEngine(workers=1)
        buckets = engine.hash_files(paths, on_file_hashed=on_file_hashed,
                                    stopped_flag=lambda: len(hashed) >= 1)

        assert len(hashed) == 1
        assert sum(len(b) for b in buckets.values()) == 1

    def test_exactly_n_worker_threads_are_used(self, temp_dir, make_file):
        paths = [str(make_file(temp_dir / f"f{i}", str(i).encode())) for i in range(20)]
        thread_names = set()
        lock = threading.Lock()

        def on_file_hashed(path, digest):
            with lock:
                thread_names.add(threading.current_thread().name)

        HashEngine(workers=3).hash_files(paths, on_file_hashed=on_file_hashed)

        assert thread_names <= {"hash-worker-0", "hash-worker-1", "hash-worker-2"}

    @pytest.mark.parametrize("workers", [1, 4])
    def test_failing_callback_is_raised_to_caller(self, temp_dir, make_file, workers):
        """A callback error must not be lost with its worker thread."""
        paths = [str(make_file(temp_dir / f"f{i}", str(i).encode())) for i in range(10)]

        def on_file_hashed(path, digest):
            raise ValueError("display broke")

        with pytest.raises(ValueError, match="display broke"):
            HashEngine(workers=workers).hash_files(paths, on_file_hashed=on_file_hashed)

        assert not any(t.name.startswith("hash-worker-") for t in threading.enumerate())

    def test_failing_callback_stops_remaining_work(self, temp_dir, make_file):
        paths = [str(make_file(temp_dir / f"f{i}", str(i).encode())) for i in range(5)]
        calls = []

        def on_file_hashed(path, digest):
            calls.append(path)
            raise RuntimeError("stop")

        with pytest.raises(RuntimeError):
            HashEngine(workers=1).hash_files(paths, on_file_hashed=on_file_hashed)

        assert len(calls) == 1
