"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.orchestrator import Orchestrator
from core.policy_runtime import (
    build_revision_config,
    load_effective_config,
    load_yaml,
    merge_dicts,
    output_settings,
)
from status.config import RevisionConfig

CORE_ROOT = Path(__file__).resolve().parents[1] / "core"


def test_defaults_file_matches_model_defaults() -> None:
    config = load_effective_config(CORE_ROOT)

    assert build_revision_config(config) == RevisionConfig()
    assert output_settings(config) == {"property_prefix": "workingCopyDirectory", "format": "text"}


def test_user_file_overrides_defaults(tmp_path: Path) -> None:
    user = tmp_path / "wc.yaml"
    user.write_text("revision:\n  report_ignored: true\noutput:\n  format: json\n", encoding="utf-8")

    config = load_effective_config(CORE_ROOT, user)
    revision = build_revision_config(config)

    assert revision.report_ignored is True
    assert revision.report_unversioned is True
    assert output_settings(config)["format"] == "json"
    assert config["backend"]["svn_executable"] == "svn"


def test_explicit_overrides_win_and_none_is_ignored() -> None:
    config = {"revision": {"report_status": False, "verbose": True}}

    revision = build_revision_config(config, {"report_status": True, "verbose": None})

    assert revision.report_status is True
    assert revision.verbose is True


def test_unknown_revision_key_is_rejected() -> None:
    with pytest.raises(ValidationError):
        build_revision_config({"revision": {"report_everything": True}})


def test_missing_user_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="not found"):
        load_effective_config(CORE_ROOT, tmp_path / "absent.yaml")


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        load_yaml(path)


def test_unsupported_output_format() -> None:
    with pytest.raises(ValueError, match="Unsupported output format"):
        output_settings({"output": {"format": "xml"}})


def test_merge_dicts_is_recursive() -> None:
    merged = merge_dicts({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}})

    assert merged == {"a": {"x": 1, "y": 3}, "b": 1}


def test_orchestrator_reads_defaults_shipped_with_core() -> None:
    orchestrator = Orchestrator()

    assert (orchestrator.root / "config" / "default.yaml").is_file()
    bundle = orchestrator.build()
    assert bundle.config["backend"]["svn_executable"] == "svn"
    assert bundle.output["property_prefix"] == "workingCopyDirectory"


def test_orchestrator_passes_prefix_to_runner(tmp_path: Path) -> None:
    user = tmp_path / "wc.yaml"
    user.write_text("output:\n  property_prefix: svn\n", encoding="utf-8")

    bundle = Orchestrator().build(user_config=user)

    assert bundle.runner.property_prefix == "svn"
