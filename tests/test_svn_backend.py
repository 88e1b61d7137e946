"""Subversion backend tests using recorded command output."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from core.revision_runner import UNVERSIONED_REPORT, RevisionRunner
from status.config import RevisionConfig
from status.types import StatusKind
from vcs.base_backend import VcsError
from vcs.svn_backend import SvnBackend

INFO_XML = """<?xml version="1.0" encoding="UTF-8"?>
<info>
<entry kind="dir" path="." revision="42">
<url>https://svn.example.org/repos/project/trunk/module</url>
<relative-url>^/trunk/module</relative-url>
<repository>
<root>https://svn.example.org/repos/project</root>
<uuid>2a8b1c4e-0000-0000-0000-000000000000</uuid>
</repository>
</entry>
</info>
"""

STATUS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<status>
<target path=".">
<entry path=".">
<wc-status item="normal" props="none" revision="42">
<commit revision="40"><author>alice</author><date>2024-01-01T00:00:00.000000Z</date></commit>
</wc-status>
<repos-status item="none" props="modified"/>
</entry>
<entry path="src/main.c">
<wc-status item="modified" props="normal" revision="38">
<commit revision="38"><author>bob</author><date>2024-01-01T00:00:00.000000Z</date></commit>
</wc-status>
</entry>
<entry path="notes.txt">
<wc-status item="unversioned" props="none"/>
</entry>
<entry path="added.c">
<wc-status item="added" props="none" revision="0"/>
</entry>
</target>
</status>
"""

NOT_A_WC = "svn: warning: W155007: '/tmp/plain' is not a working copy\nsvn: E200009: Could not display info for all targets\n"

NODE_NOT_FOUND = (
    "svn: warning: W155010: The node '/wc/build' was not found.\n\n"
    "svn: E200009: Could not display info for all targets because some targets don't exist\n"
)


def _backend(*responses: tuple[int, str, str]) -> tuple[SvnBackend, MagicMock]:
    runner = MagicMock(side_effect=list(responses))
    return SvnBackend(executable="svn", runner=runner), runner


def test_versioned_directory_detected(tmp_path: Path) -> None:
    backend, runner = _backend((0, INFO_XML, ""))

    assert backend.is_versioned_directory(tmp_path) is True
    command = runner.call_args.args[0]
    assert command[:2] == ["svn", "info"]
    assert "--non-interactive" in command


def test_plain_directory_is_not_versioned(tmp_path: Path) -> None:
    backend, _ = _backend((1, "", NOT_A_WC))

    assert backend.is_versioned_directory(tmp_path) is False


@pytest.mark.parametrize(
    "stderr",
    [
        NOT_A_WC,
        NODE_NOT_FOUND,
        "svn: E155007: '/tmp/plain' is not a working copy\n",
    ],
)
def test_not_versioned_answers_from_svn(tmp_path: Path, stderr: str) -> None:
    backend, _ = _backend((1, "", stderr))

    assert backend.is_versioned_directory(tmp_path) is False


def test_unadded_directory_inside_checkout_reports_unversioned(tmp_path: Path) -> None:
    backend, runner = _backend((1, "", NODE_NOT_FOUND))

    report = RevisionRunner(backend, RevisionConfig(report_out_of_date=True)).run(tmp_path)

    assert report == UNVERSIONED_REPORT
    assert runner.call_count == 1


def test_missing_directory_is_not_versioned(tmp_path: Path) -> None:
    backend, runner = _backend()

    assert backend.is_versioned_directory(tmp_path / "nope") is False
    runner.assert_not_called()


def test_info_failure_other_than_not_a_working_copy_raises(tmp_path: Path) -> None:
    backend, _ = _backend((1, "", "svn: E155036: Please see the 'svn upgrade' command\n"))

    with pytest.raises(VcsError, match="E155036"):
        backend.is_versioned_directory(tmp_path)


def test_missing_executable_raises(tmp_path: Path) -> None:
    backend, _ = _backend((127, "", "[Errno 2] No such file or directory: 'svn'"))

    with pytest.raises(VcsError, match="No such file"):
        backend.is_versioned_directory(tmp_path)


def test_resolve_root_and_path(tmp_path: Path) -> None:
    backend, _ = _backend((0, INFO_XML, ""))

    assert backend.resolve_root_and_path(tmp_path) == (
        "https://svn.example.org/repos/project",
        "trunk/module",
    )


def test_resolve_root_at_repository_root(tmp_path: Path) -> None:
    root_xml = INFO_XML.replace("/project/trunk/module</url>", "/project</url>")
    backend, _ = _backend((0, root_xml, ""))

    assert backend.resolve_root_and_path(tmp_path) == ("https://svn.example.org/repos/project", "")


def test_stream_status_parses_entries(tmp_path: Path) -> None:
    backend, _ = _backend((0, STATUS_XML, ""))

    records = list(backend.stream_status(tmp_path))

    assert [record.path for record in records] == [".", "src/main.c", "notes.txt", "added.c"]
    assert [record.revision for record in records] == [42, 38, -1, 0]
    assert records[0].remote_property_status is StatusKind.MODIFIED
    assert records[0].has_remote_changes is True
    assert records[1].content_status is StatusKind.MODIFIED
    assert records[1].property_status is StatusKind.NORMAL
    assert records[1].has_remote_changes is False
    assert records[2].content_status is StatusKind.UNVERSIONED
    assert records[3].content_status is StatusKind.ADDED


def test_stream_status_flags(tmp_path: Path) -> None:
    backend, runner = _backend((0, STATUS_XML, ""), (0, STATUS_XML, ""))

    list(backend.stream_status(tmp_path))
    plain = runner.call_args.args[0]
    list(backend.stream_status(tmp_path, contact_remote=True, include_ignored=True))
    remote = runner.call_args.args[0]

    assert "--show-updates" not in plain and "--no-ignore" not in plain
    assert "--show-updates" in remote and "--no-ignore" in remote
    assert plain[plain.index("--depth") + 1] == "infinity"
    assert plain[-2:] == [str(tmp_path), "--non-interactive"]


def test_stream_status_failure_carries_svn_message(tmp_path: Path) -> None:
    backend, _ = _backend((1, "", "svn: E170013: Unable to connect to a repository\n"))

    with pytest.raises(VcsError, match="Unable to connect"):
        list(backend.stream_status(tmp_path, contact_remote=True))


def test_unreadable_xml_raises(tmp_path: Path) -> None:
    backend, _ = _backend((0, "<status><target>", ""))

    with pytest.raises(VcsError, match="Unreadable"):
        list(backend.stream_status(tmp_path))


def test_unknown_status_value_raises(tmp_path: Path) -> None:
    payload = '<status><target path="."><entry path="x"><wc-status item="bogus" props="none"/></entry></target></status>'
    backend, _ = _backend((0, payload, ""))

    with pytest.raises(VcsError, match="bogus"):
        list(backend.stream_status(tmp_path))
