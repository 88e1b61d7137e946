"""Fold a status-record stream into an aggregation result."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from status.types import AggregationResult, StatusKind, StatusRecord

logger = logging.getLogger("wcr.aggregator")


def format_record(record: StatusRecord) -> str:
    """Render one record the way ``svn status -v`` lines read."""
    remote_marker = "*" if record.has_remote_changes else " "
    return (
        f"{record.content_status.code}{record.property_status.code}{remote_marker}"
        f" {record.revision:6d} {record.path}"
    )


class StatusAggregator:
    """Collects revision bounds and status kinds across a working copy."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def aggregate(self, records: Iterable[StatusRecord]) -> AggregationResult:
        """Consume every record once and return the immutable summary."""
        max_revision: int | None = None
        min_revision: int | None = None
        kinds: set[StatusKind] = set()
        remote_changes = False

        for record in records:
            kinds.add(record.content_status)
            kinds.add(record.property_status)
            revision = record.revision
            if revision >= 0:
                max_revision = revision if max_revision is None else max(max_revision, revision)
            # Added-but-uncommitted (0) must not pose as the lowest revision.
            if revision > 0:
                min_revision = revision if min_revision is None else min(min_revision, revision)
            remote_changes = remote_changes or record.has_remote_changes
            if self.verbose:
                logger.info(format_record(record))

        return AggregationResult(
            max_revision=max_revision,
            min_revision=min_revision,
            status_kinds=frozenset(kinds),
            remote_changes=remote_changes,
        )


def aggregate(records: Iterable[StatusRecord], verbose: bool = False) -> AggregationResult:
    """Convenience wrapper around :class:`StatusAggregator`."""
    return StatusAggregator(verbose=verbose).aggregate(records)
