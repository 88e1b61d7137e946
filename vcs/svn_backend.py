"""Subversion backend driven through the ``svn`` command line client."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterator
from pathlib import Path

from executor.command_executor import run_command
from status.types import StatusKind, StatusRecord
from vcs.base_backend import VcsBackend, VcsError

logger = logging.getLogger("wcr.vcs.svn")

CommandRunner = Callable[[list[str]], tuple[int, str, str]]

# SVN_ERR_WC_NOT_WORKING_COPY, and SVN_ERR_WC_PATH_NOT_FOUND for an unadded
# directory inside a checkout; `svn info` reports either as error or warning.
NOT_WORKING_COPY_CODES = ("E155007", "W155007", "E155010", "W155010")


class SvnBackend(VcsBackend):
    """Reads working-copy state with ``svn info`` and ``svn status --xml``."""

    def __init__(self, executable: str = "svn", runner: CommandRunner = run_command) -> None:
        self.executable = executable
        self.runner = runner

    def _command(self, *args: str) -> list[str]:
        return [self.executable, *args, "--non-interactive"]

    def _svn(self, *args: str) -> str:
        code, stdout, stderr = self.runner(self._command(*args))
        if code != 0:
            message = stderr.strip() or f"svn {args[0]} failed with exit code {code}"
            raise VcsError(message)
        return stdout

    def is_versioned_directory(self, path: Path) -> bool:
        if not path.is_dir():
            return False
        code, _, stderr = self.runner(self._command("info", "--xml", "--depth", "empty", str(path)))
        if code == 0:
            return True
        if any(marker in stderr for marker in NOT_WORKING_COPY_CODES):
            logger.debug("%s is not a working copy", path)
            return False
        raise VcsError(stderr.strip() or f"svn info failed with exit code {code}")

    def resolve_root_and_path(self, path: Path) -> tuple[str, str]:
        root = _parse_xml(self._svn("info", "--xml", "--depth", "empty", str(path)))
        entry = root.find("entry")
        if entry is None:
            raise VcsError(f"svn info returned no entry for {path}")
        url = entry.findtext("url")
        repository = entry.findtext("repository/root")
        if not url or not repository:
            raise VcsError(f"svn info returned no repository URL for {path}")
        relative = url[len(repository):] if url.startswith(repository) else url
        if relative.startswith("/"):
            relative = relative[1:]
        return repository, relative

    def stream_status(
        self,
        path: Path,
        *,
        contact_remote: bool = False,
        include_ignored: bool = False,
    ) -> Iterator[StatusRecord]:
        args = ["status", "--xml", "--verbose", "--depth", "infinity"]
        if contact_remote:
            args.append("--show-updates")
        if include_ignored:
            args.append("--no-ignore")
        args.append(str(path))
        root = _parse_xml(self._svn(*args))
        for entry in root.iter("entry"):
            yield _record_from_entry(entry)


def _parse_xml(payload: str) -> ET.Element:
    try:
        return ET.fromstring(payload)
    except ET.ParseError as exc:
        raise VcsError(f"Unreadable svn XML output: {exc}") from exc


def _record_from_entry(entry: ET.Element) -> StatusRecord:
    wc_status = entry.find("wc-status")
    repos_status = entry.find("repos-status")
    local = wc_status.attrib if wc_status is not None else {}
    remote = repos_status.attrib if repos_status is not None else {}
    return StatusRecord(
        path=entry.get("path", ""),
        revision=_revision(local.get("revision")),
        content_status=_kind(local.get("item")),
        property_status=_kind(local.get("props")),
        remote_content_status=_kind(remote.get("item")),
        remote_property_status=_kind(remote.get("props")),
    )


def _kind(value: str | None) -> StatusKind:
    if value is None:
        return StatusKind.NONE
    try:
        return StatusKind(value)
    except ValueError as exc:
        raise VcsError(f"Unknown svn status value: {value!r}") from exc


def _revision(value: str | None) -> int:
    if value is None:
        return -1
    try:
        return int(value)
    except ValueError as exc:
        raise VcsError(f"Invalid svn revision number: {value!r}") from exc
