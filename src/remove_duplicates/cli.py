#!/usr/bin/env python3
"""
remove-duplicates CLI — Command line interface for content-based duplicate removal.
Hashes every file under the source directories, then removes redundant copies
(or everything that already exists under a referent directory).
Deletion is permanent; use --dry-run to preview.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
import threading
import time
from pathlib import Path
from typing import List, NoReturn

logging.basicConfig(
    level=logging.DEBUG if os.environ.get("DEBUG") else logging.WARNING,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from remove_duplicates.aliases import (
    REMOVE_BY_ALIASES, REMOVE_BY_CHOICES, REMOVE_BY_HELP_TEXT, HASH_ALIASES, HASH_CHOICES, EPILOG_TEXT
)
from remove_duplicates.commands import RemoveDuplicatesCommand
from remove_duplicates.core.collector import CollectionError
from remove_duplicates.core.models import (
    HashAlgorithmName, RemovalMethod, RemovalOutcome, RemovalParams, RemovalReason, RemovalReport, RemovalStatus
)
from remove_duplicates.core.selector import ConsoleSelector
from remove_duplicates.utils.convert_utils import ConvertUtils


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self._print_lock = threading.Lock()

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="remove-duplicates",
            description="Remove duplicate files by content hash",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "sources",
            nargs="+",
            metavar="SOURCE",
            help="Directories to search for duplicates"
        )

        parser.add_argument(
            "--referent", "-r",
            action="append",
            default=[],
            type=str,
            dest="referents",
            metavar="DIRS",
            help="Referent directories (comma-separated, repeatable).\n"
                 "Source files matching any referent file are removed."
        )
        parser.add_argument(
            "--threads", "-t",
            default=1,
            type=int,
            help="Number of threads to use for hashing. Default: 1"
        )
        parser.add_argument(
            "--remove-by", "-m",
            choices=REMOVE_BY_CHOICES,
            default="newest",
            type=str,
            dest="remove_by",
            help=REMOVE_BY_HELP_TEXT
        )
        parser.add_argument(
            "--hash",
            choices=HASH_CHOICES,
            default="blake3",
            type=str,
            dest="hash_algorithm",
            help="Content hash algorithm. Default: blake3"
        )

        # Actions
        parser.add_argument(
            "--dry-run", "-d",
            action="store_true",
            dest="dry_run",
            help="Dry run, do not delete any files"
        )

        # Output options
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show every hashed file and run statistics"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.threads < 1:
            self.error_exit("--threads must be at least 1")

        for source in args.sources:
            source_path = Path(source)
            if not source_path.exists():
                self.error_exit(f"Directory not found: {source}")
            if not source_path.is_dir():
                self.error_exit(f"Path is not a directory: {source}")

        # Interactive selection needs someone to answer the prompts
        if REMOVE_BY_ALIASES.get(args.remove_by) == RemovalMethod.INTERACTIVE and not sys.stdin.isatty():
            self.error_exit(
                "Cannot use interactive removal in a non-interactive session.\n"
                "Use --remove-by newest or --remove-by oldest when piping input or running in scripts."
            )

    def create_params(self, args: argparse.Namespace) -> RemovalParams:
        """Create RemovalParams from CLI arguments."""
        try:
            remove_by = REMOVE_BY_ALIASES.get(args.remove_by, RemovalMethod.NEWEST)
            hash_algorithm = HASH_ALIASES.get(args.hash_algorithm, HashAlgorithmName.BLAKE3)

            return RemovalParams.from_cli_values(
                sources=args.sources,
                referents_str=args.referents,
                threads=args.threads,
                remove_by=remove_by,
                dry_run=args.dry_run,
                verbose=args.verbose,
                hash_algorithm=hash_algorithm,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def report_hashed(self, path: str, digest: bytes) -> None:
        """Verbose per-file progress. Called from hashing threads."""
        with self._print_lock:
            print(f"Hashing file: {path}, Hash: {digest.hex()}")

    @staticmethod
    def report_outcome(outcome: RemovalOutcome) -> None:
        """Print one line per planned file as the plan is applied."""
        suffix = " (due to referent match)" if outcome.reason == RemovalReason.REFERENT_MATCH else ""
        if outcome.status == RemovalStatus.WOULD_REMOVE:
            print(f"Would remove{suffix}: {outcome.path}")
        elif outcome.status == RemovalStatus.REMOVED:
            print(f"Removing{suffix}: {outcome.path}")
        else:
            print(f"⚠️  Failed to remove{suffix}: {outcome.path} ({outcome.error})", file=sys.stderr)

    def output_summary(self, report: RemovalReport, command: RemoveDuplicatesCommand) -> None:
        """Print totals after the plan was applied."""
        if self.verbose:
            print()
            print(command.referent_stats.print_summary("Referents"))
            print(command.source_stats.print_summary("Sources"))

        if not report.outcomes:
            print("No duplicate files to remove.")
            return

        print()
        if report.dry_run:
            print(f"Dry run: {report.would_remove} file(s) would be removed.")
            return

        failed = report.failed
        if failed:
            print(f"⚠️  Partial success: {report.removed}/{len(report.outcomes)} files removed.")
            print(f"Failed to remove {len(failed)} file(s):")
            for outcome in failed[:5]:
                print(f"  • {os.path.basename(outcome.path)}: {outcome.error}")
            if len(failed) > 5:
                print(f"  ...and {len(failed) - 5} more files")
        else:
            print(f"✅ Removed {report.removed} file(s).")
        print(f"Total space freed: {ConvertUtils.bytes_to_human(report.bytes_freed)}")

    @staticmethod
    def stopped_flag() -> bool:
        """
        Cancellation hook passed to the hashing pool.
        The shipped CLI never cancels (Ctrl+C ends the process instead); tests override it
        to check that an interrupted run removes nothing.
        """
        return False

    @staticmethod
    def warning(message: str) -> None:
        """Print a warning message to stderr."""
        print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: List[str] = None) -> RemovalReport:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose

        self.validate_args(args)
        params = self.create_params(args)

        selector = ConsoleSelector() if params.remove_by == RemovalMethod.INTERACTIVE else None
        command = RemoveDuplicatesCommand(selector=selector)

        if params.dry_run:
            self.warning("Dry run: no files will be deleted")

        try:
            report = command.execute(
                params,
                on_file_hashed=self.report_hashed if params.verbose else None,
                on_outcome=self.report_outcome,
                stopped_flag=self.stopped_flag
            )
        except CollectionError as e:
            self.error_exit(f"Error gathering files: {e}")

        self.output_summary(report, command)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")
        return report


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
