"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/selector.py
Interactive choice of files to remove from a duplicate bucket.

Paths are shown sorted by path, not in hashing completion order, so the numbering a user
sees is the same on every run.
"""
import logging
from typing import Callable, List, Optional, Sequence

from remove_duplicates.core.interfaces import Selector
from remove_duplicates.core.models import FileRecord
from remove_duplicates.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)

ALL_TOKENS = ("a", "all")

PROMPT_TEXT = (
    "Select the file(s) to remove by entering the corresponding numbers "
    "(comma-separated, or 'a' for all except the first):"
)


def parse_selection(text: str, count: int) -> List[int]:
    """
    Parse a comma-separated list of zero-based indices.
    Tokens that are not integers or fall outside [0, count) are dropped; repeats are collapsed.
    """
    indices = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            index = int(token)
        except ValueError:
            continue
        if 0 <= index < count and index not in indices:
            indices.append(index)
    return indices


class ConsoleSelector(Selector):
    """
    Prompts on the console for every bucket.
    `input_func` and `output_func` are injectable so tests can script the conversation.
    """

    def __init__(self,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None):
        self.input_func = input_func or input
        self.output_func = output_func or print

    def select(self, digest: bytes, paths: Sequence[str]) -> List[str]:
        ordered = sorted(paths)

        self.output_func(f"Duplicates found for hash {digest.hex()}:")
        for i, path in enumerate(ordered):
            self.output_func(f"[{i}] {path} (Modified: {self._modified_text(path)})")

        self.output_func(PROMPT_TEXT)
        try:
            answer = self.input_func("> ")
        except EOFError:
            logger.debug("No input available, keeping all files")
            return []

        answer = answer.strip()
        if answer.lower() in ALL_TOKENS:
            return ordered[1:]

        return [ordered[i] for i in parse_selection(answer, len(ordered))]

    @staticmethod
    def _modified_text(path: str) -> str:
        try:
            record = FileRecord.from_path(path)
        except OSError as e:
            logger.warning(f"Error getting file info for {path}: {e}")
            return "unavailable"
        return ConvertUtils.timestamp_to_human(record.modified_at.timestamp())
