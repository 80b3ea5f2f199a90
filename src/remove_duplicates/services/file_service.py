"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File operations used by the removal stage.
Deletion is permanent: there is no trash and no undo.
"""
import os
from pathlib import Path


class FileService:
    """
    Thin wrapper around the file system with uniform error reporting.
    """

    @staticmethod
    def file_size(file_path: str) -> int:
        """Returns the size of a file in bytes, or 0 if it cannot be read."""
        try:
            return os.path.getsize(file_path)
        except OSError:
            return 0

    @staticmethod
    def remove_file(file_path: str) -> None:
        """Permanently deletes a single file."""
        path = Path(file_path)

        if not path.exists() and not path.is_symlink():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            os.remove(path)
        except OSError as e:
            raise RuntimeError(f"Failed to remove file: {e}") from e

