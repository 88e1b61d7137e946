"""Status record and aggregation models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class StatusKind(str, Enum):
    """Condition of a path relative to its version-control baseline.

    Values are the ``item``/``props`` names used by ``svn status --xml``.
    """

    NONE = "none"
    NORMAL = "normal"
    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"
    UNVERSIONED = "unversioned"
    MISSING = "missing"
    REPLACED = "replaced"
    CONFLICTED = "conflicted"
    OBSTRUCTED = "obstructed"
    IGNORED = "ignored"
    INCOMPLETE = "incomplete"
    EXTERNAL = "external"
    MERGED = "merged"

    @property
    def code(self) -> str:
        """Canonical single-character status code."""
        return _STATUS_CODES[self]


_STATUS_CODES: dict[StatusKind, str] = {
    StatusKind.NONE: " ",
    StatusKind.NORMAL: " ",
    StatusKind.MODIFIED: "M",
    StatusKind.ADDED: "A",
    StatusKind.DELETED: "D",
    StatusKind.UNVERSIONED: "?",
    StatusKind.MISSING: "!",
    StatusKind.REPLACED: "R",
    StatusKind.CONFLICTED: "C",
    StatusKind.OBSTRUCTED: "~",
    StatusKind.IGNORED: "I",
    StatusKind.INCOMPLETE: ":",
    StatusKind.EXTERNAL: "X",
    StatusKind.MERGED: "G",
}

QUIET_KINDS = frozenset({StatusKind.NONE, StatusKind.NORMAL})


class StatusRecord(BaseModel):
    """One visited working-copy entry as reported by the backend.

    ``revision`` keeps the backend convention: -1 means no meaningful
    revision, 0 means added but not yet committed.
    """

    path: str
    revision: int = -1
    content_status: StatusKind = StatusKind.NONE
    property_status: StatusKind = StatusKind.NONE
    remote_content_status: StatusKind = StatusKind.NONE
    remote_property_status: StatusKind = StatusKind.NONE

    @property
    def has_remote_changes(self) -> bool:
        return (
            self.remote_content_status is not StatusKind.NONE
            or self.remote_property_status is not StatusKind.NONE
        )


class AggregationResult(BaseModel):
    """Summary of a whole status stream."""

    model_config = ConfigDict(frozen=True)

    max_revision: int | None = None
    min_revision: int | None = None
    status_kinds: frozenset[StatusKind] = frozenset()
    remote_changes: bool = False

    @model_validator(mode="after")
    def _check_bounds(self) -> AggregationResult:
        if (
            self.max_revision is not None
            and self.min_revision is not None
            and self.min_revision > self.max_revision
        ):
            raise ValueError("min_revision must not exceed max_revision.")
        return self

    @property
    def reportable_kinds(self) -> frozenset[StatusKind]:
        """Kinds that may appear in a rendered token."""
        return self.status_kinds - QUIET_KINDS

    @property
    def is_mixed(self) -> bool:
        return (
            self.max_revision is not None
            and self.min_revision is not None
            and self.min_revision != self.max_revision
        )
