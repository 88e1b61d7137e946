"""Configuration loading and reporting-policy bootstrapping."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from status.config import RevisionConfig

DEFAULT_PROPERTY_PREFIX = "workingCopyDirectory"
OUTPUT_FORMATS = ("text", "properties", "json")


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(root: Path, user_config: Path | None = None) -> dict[str, Any]:
    """Merge built-in defaults with an optional user configuration file."""
    merged = load_yaml(root / "config" / "default.yaml")
    if user_config is not None:
        if not user_config.exists():
            raise ValueError(f"Config file not found: {user_config}")
        merged = merge_dicts(merged, load_yaml(user_config))
    return merged


def build_revision_config(
    config: dict[str, Any],
    overrides: dict[str, bool | None] | None = None,
) -> RevisionConfig:
    """Validate the ``revision`` section, applying explicitly set overrides."""
    section = config.get("revision") or {}
    if not isinstance(section, dict):
        raise ValueError("The 'revision' config section must be a mapping.")
    explicit = {key: value for key, value in (overrides or {}).items() if value is not None}
    return RevisionConfig(**{**section, **explicit})


def output_settings(config: dict[str, Any]) -> dict[str, str]:
    """Return output prefix and format with defaults filled in."""
    section = config.get("output") or {}
    output_format = str(section.get("format", "text"))
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unsupported output format '{output_format}'; expected one of {', '.join(OUTPUT_FORMATS)}."
        )
    return {
        "property_prefix": str(section.get("property_prefix", DEFAULT_PROPERTY_PREFIX)),
        "format": output_format,
    }
