"""Typer command handlers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import typer
import yaml

from core.orchestrator import Orchestrator, RuntimeBundle
from core.revision_runner import RevisionError, RevisionReport


def _runtime(
    user_config: Path | None = None,
    overrides: dict[str, Any] | None = None,
    root: Path | None = None,
) -> RuntimeBundle:
    try:
        return Orchestrator(root=root).build(user_config=user_config, overrides=overrides)
    except (ValueError, yaml.YAMLError) as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=2) from exc


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s | %(name)s | %(message)s",
        force=True,
    )


def show(
    directory: Path,
    user_config: Path | None = None,
    revision_overrides: dict[str, bool | None] | None = None,
    output_format: str | None = None,
) -> None:
    """Print the revision tokens for a working-copy directory."""
    bundle = _runtime(
        user_config=user_config,
        overrides={"revision": revision_overrides or {}, "format": output_format},
    )
    _configure_logging(bundle.revision_config.verbose)
    try:
        report = bundle.runner.run(directory.resolve())
    except RevisionError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    _emit(report, bundle.output)


def _emit(report: RevisionReport, output: dict[str, str]) -> None:
    properties = report.as_properties(output["property_prefix"])
    if output["format"] == "json":
        typer.echo(json.dumps(properties, indent=2))
    elif output["format"] == "properties":
        for key, value in properties.items():
            typer.echo(f"{key}={value}")
    else:
        typer.echo(report.revision)


def config_show(user_config: Path | None = None) -> None:
    """Show effective runtime config."""
    bundle = _runtime(user_config=user_config)
    payload = {
        **bundle.config,
        "revision": bundle.revision_config.model_dump(),
        "output": bundle.output,
    }
    typer.echo(json.dumps(payload, indent=2))
