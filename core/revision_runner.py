"""Resolve a directory's working-copy state into revision tokens."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from core.policy_runtime import DEFAULT_PROPERTY_PREFIX
from status.aggregator import StatusAggregator
from status.alphabet import FILE_NAME_SAFE, STANDARD
from status.config import RevisionConfig
from status.encoder import StatusEncoder
from vcs.base_backend import VcsBackend, VcsError

logger = logging.getLogger("wcr.runner")

UNVERSIONED = "unversioned"


class RevisionError(Exception):
    """Raised when the working-copy state cannot be determined."""


@dataclass(frozen=True)
class RevisionReport:
    """The four values produced for one directory."""

    repository: str
    path: str
    revision: str
    file_name_safe_revision: str

    def as_properties(self, prefix: str = DEFAULT_PROPERTY_PREFIX) -> dict[str, str]:
        """Return the values keyed by build-property name."""
        return {
            f"{prefix}.repository": self.repository,
            f"{prefix}.path": self.path,
            f"{prefix}.revision": self.revision,
            f"{prefix}.fileNameSafeRevision": self.file_name_safe_revision,
        }


UNVERSIONED_REPORT = RevisionReport(
    repository="",
    path="",
    revision=UNVERSIONED,
    file_name_safe_revision=UNVERSIONED,
)


class RevisionRunner:
    """Runs one aggregation pass and renders it with both alphabets."""

    def __init__(
        self,
        backend: VcsBackend,
        config: RevisionConfig,
        property_prefix: str = DEFAULT_PROPERTY_PREFIX,
    ) -> None:
        self.backend = backend
        self.config = config
        self.property_prefix = property_prefix

    def run(self, directory: Path) -> RevisionReport:
        config = self.config
        if config.verbose:
            logger.info("working copy directory: %s", directory)
            for name, value in config.model_dump().items():
                logger.info("%s: %s", name.replace("_", " "), value)
        try:
            report = self._resolve(directory)
        except VcsError as exc:
            raise RevisionError(str(exc)) from exc
        if config.verbose:
            for key, value in report.as_properties(self.property_prefix).items():
                logger.info('%s is set to "%s"', key, value)
        return report

    def _resolve(self, directory: Path) -> RevisionReport:
        if not self.backend.is_versioned_directory(directory):
            return UNVERSIONED_REPORT
        repository, path = self.backend.resolve_root_and_path(directory)
        records = self.backend.stream_status(
            directory,
            contact_remote=self.config.report_out_of_date,
            include_ignored=self.config.report_ignored,
        )
        result = StatusAggregator(verbose=self.config.verbose).aggregate(records)
        encoder = StatusEncoder(self.config)
        return RevisionReport(
            repository=repository,
            path=path,
            revision=encoder.encode(result, STANDARD),
            file_name_safe_revision=encoder.encode(result, FILE_NAME_SAFE),
        )
