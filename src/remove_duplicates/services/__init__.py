"""File operations and removal plan execution services."""

from .file_service import FileService
from .removal_service import RemovalExecutor

__all__ = ["FileService", "RemovalExecutor"]
