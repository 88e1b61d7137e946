"""Base version-control backend interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from status.types import StatusRecord


class VcsError(Exception):
    """Raised when the version-control backend cannot answer a query."""


class VcsBackend(ABC):
    """Abstract source of working-copy status information."""

    @abstractmethod
    def is_versioned_directory(self, path: Path) -> bool:
        """Return True if ``path`` is a directory under version control."""

    @abstractmethod
    def resolve_root_and_path(self, path: Path) -> tuple[str, str]:
        """Return (repository root URL, path relative to that root)."""

    @abstractmethod
    def stream_status(
        self,
        path: Path,
        *,
        contact_remote: bool = False,
        include_ignored: bool = False,
    ) -> Iterator[StatusRecord]:
        """Yield one record per entry below ``path``, recursively."""
