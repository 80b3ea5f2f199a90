"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/resolver.py
Turns digest buckets into a removal plan.

RULES (per digest, first match wins)
------------------------------------
1. Referent match: every source path with that digest is removed, even a lone file.
   Referent files themselves are never planned.
2. One file or none: nothing to do.
3. Policy:
   • NEWEST      : keep the most recently modified file
   • OLDEST      : keep the least recently modified file
   • INTERACTIVE : remove whatever the selector returns

Buckets are visited in digest order, so the plan and the sequence of prompts do not depend
on how the hashing threads happened to finish.
"""
import logging
from typing import Optional

from remove_duplicates.core.interfaces import Selector
from remove_duplicates.core.models import (
    HashBuckets, ReferentIndex, RemovalMethod, RemovalPlan, RemovalReason)
from remove_duplicates.core.sorter import Sorter

logger = logging.getLogger(__name__)


class DuplicateResolver:
    """
    Decides, per bucket, which files survive.
    The selector is only required for RemovalMethod.INTERACTIVE.
    """

    def __init__(self, selector: Optional[Selector] = None):
        self.selector = selector

    def resolve(
            self,
            buckets: HashBuckets,
            referent_index: Optional[ReferentIndex] = None,
            remove_by: RemovalMethod = RemovalMethod.NEWEST
    ) -> RemovalPlan:
        if remove_by == RemovalMethod.INTERACTIVE and self.selector is None:
            raise ValueError("Interactive removal requires a selector")

        referent_index = referent_index or ReferentIndex()
        plan = RemovalPlan()

        for digest in sorted(buckets):
            # A path listed twice must not count as its own duplicate
            paths = list(dict.fromkeys(
                p for p in buckets[digest] if not referent_index.is_referent_path(p)))

            if digest in referent_index:
                plan.add(digest, RemovalReason.REFERENT_MATCH, sorted(paths))
                continue

            if len(paths) <= 1:
                continue

            if remove_by == RemovalMethod.INTERACTIVE:
                chosen = self.selector.select(digest, list(paths))
                allowed = set(paths)
                plan.add(digest, RemovalReason.INTERACTIVE, [p for p in chosen if p in allowed])
                continue

            ordered, unreadable = Sorter.sort_by_modified_time(paths, remove_by)
            if unreadable:
                logger.warning(f"Skipped {len(unreadable)} file(s) with unreadable metadata "
                               f"for hash {digest.hex()}")
            if len(ordered) <= 1:
                continue
            plan.add(digest, RemovalReason.POLICY, ordered[1:])

        logger.debug(f"Resolved {len(buckets)} buckets into {plan!r}")
        return plan
