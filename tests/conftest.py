"""
Shared fixtures for duplicate removal tests.
Creates isolated temporary directories with controlled test files and modification times.
"""
import os
import pytest
import tempfile
from pathlib import Path
from typing import Dict, Callable


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """
    Factory writing a file with given content and (optionally) a fixed mtime.
    Parent directories are created as needed.
    """
    def _make(path: Path, content: bytes, mtime: float = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path
    return _make


@pytest.fixture
def test_files(temp_dir, make_file) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 3 identical files (one in a subdirectory), with increasing mtimes
    - 2 identical files of different content
    - 1 unique file
    - 1 empty file (empty files are hashed like any other)
    """
    files = {}
    content_a = b"A" * 1024
    content_b = b"B" * 2048

    files["a_old"] = make_file(temp_dir / "a_old.txt", content_a, mtime=1_000_000)
    files["a_mid"] = make_file(temp_dir / "a_mid.txt", content_a, mtime=2_000_000)
    files["a_new"] = make_file(temp_dir / "subdir" / "a_new.txt", content_a, mtime=3_000_000)

    files["b_1"] = make_file(temp_dir / "b_1.bin", content_b, mtime=1_500_000)
    files["b_2"] = make_file(temp_dir / "b_2.bin", content_b, mtime=2_500_000)

    files["unique"] = make_file(temp_dir / "unique.txt", b"C" * 1500)
    files["empty"] = make_file(temp_dir / "empty.txt", b"")

    return files
