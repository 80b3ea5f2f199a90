"""
Applies a RemovalPlan to the file system, or reports it in dry-run mode.
Only paths listed in the plan are ever touched.
"""
import logging
from typing import Callable, Optional

from remove_duplicates.core.models import (
    RemovalOutcome, RemovalPlan, RemovalReport, RemovalStatus)
from remove_duplicates.services.file_service import FileService

logger = logging.getLogger(__name__)


class RemovalExecutor:
    """
    Executes removal plans with error resilience: a file that cannot be removed
    is logged and recorded, and the remaining files are still processed.
    Deletions are not rolled back.
    """

    def __init__(self, file_service: type = FileService):
        self.file_service = file_service

    def apply(
            self,
            plan: RemovalPlan,
            dry_run: bool = False,
            on_outcome: Optional[Callable[[RemovalOutcome], None]] = None
    ) -> RemovalReport:
        """
        Args:
            plan: Files to remove, grouped by digest.
            dry_run: Report what would be removed without touching the file system.
            on_outcome: Called after every file with its outcome.

        Returns:
            RemovalReport with one outcome per planned path.
        """
        report = RemovalReport(dry_run=dry_run)

        for digest, entry in plan.items():
            for path in entry.paths:
                if dry_run:
                    outcome = RemovalOutcome(path, digest, entry.reason, RemovalStatus.WOULD_REMOVE)
                else:
                    outcome = self._remove(path, digest, entry.reason, report)

                report.outcomes.append(outcome)
                if on_outcome:
                    on_outcome(outcome)

        return report

    def _remove(self, path, digest, reason, report: RemovalReport) -> RemovalOutcome:
        size = self.file_service.file_size(path)
        try:
            self.file_service.remove_file(path)
        except (FileNotFoundError, RuntimeError) as e:
            logger.warning(f"Failed to remove {path}: {e}")
            return RemovalOutcome(path, digest, reason, RemovalStatus.FAILED, error=str(e))

        report.bytes_freed += size
        return RemovalOutcome(path, digest, reason, RemovalStatus.REMOVED)
