"""Render aggregation results into revision tokens."""

from __future__ import annotations

import logging

from status.alphabet import Alphabet
from status.config import RevisionConfig
from status.types import QUIET_KINDS, AggregationResult, StatusKind

logger = logging.getLogger("wcr.encoder")

# (kind, name of the config flag gating it) in rendering order.
STATUS_PRIORITY: tuple[tuple[StatusKind, str | None], ...] = (
    (StatusKind.MODIFIED, None),
    (StatusKind.ADDED, None),
    (StatusKind.DELETED, None),
    (StatusKind.UNVERSIONED, "report_unversioned"),
    (StatusKind.MISSING, None),
    (StatusKind.REPLACED, None),
    (StatusKind.CONFLICTED, None),
    (StatusKind.OBSTRUCTED, None),
    (StatusKind.IGNORED, "report_ignored"),
    (StatusKind.INCOMPLETE, None),
    (StatusKind.EXTERNAL, None),
)


class StatusEncoder:
    """Builds the token for one alphabet under a fixed reporting policy."""

    def __init__(self, config: RevisionConfig) -> None:
        self.config = config

    def revision_segment(self, result: AggregationResult) -> str:
        if result.max_revision is None:
            return ""
        segment = f"r{result.max_revision}"
        if result.is_mixed and self.config.report_mixed_revisions:
            segment += f"-r{result.min_revision}"
        return segment

    def encode(self, result: AggregationResult, alphabet: Alphabet) -> str:
        """Return the token for ``result`` rendered with ``alphabet``."""
        out = [self.revision_segment(result)]
        if not self.config.report_status:
            return "".join(out)

        remaining = set(result.status_kinds) - QUIET_KINDS
        if remaining:
            out.append(alphabet.separator)
        for kind, gate in STATUS_PRIORITY:
            if kind not in remaining:
                continue
            remaining.discard(kind)
            if gate is None or getattr(self.config, gate):
                out.append(alphabet.char_for(kind))
        if remaining:
            logger.warning(
                "unprocessed svn statuses: %s",
                ", ".join(sorted(kind.value for kind in remaining)),
            )

        if result.remote_changes and self.config.report_out_of_date:
            out.append(alphabet.out_of_date)
        return "".join(out)


def encode(result: AggregationResult, config: RevisionConfig, alphabet: Alphabet) -> str:
    """Render ``result`` under ``config`` using ``alphabet``."""
    return StatusEncoder(config).encode(result, alphabet)
