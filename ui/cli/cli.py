"""CLI entrypoint for wc-revision."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ui.cli import commands

app = typer.Typer(help="Summarize a Subversion working copy into a revision token")
config_app = typer.Typer(help="Configuration commands")


@app.command("show")
def show_cmd(
    directory: Path = typer.Argument(Path("."), help="Working copy directory"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML configuration file"),
    report_mixed_revisions: Optional[bool] = typer.Option(
        None,
        "--report-mixed-revisions/--no-report-mixed-revisions",
        help="Append the lowest revision when the tree has mixed revisions",
    ),
    report_status: Optional[bool] = typer.Option(
        None, "--report-status/--no-report-status", help="Append local status characters"
    ),
    report_unversioned: Optional[bool] = typer.Option(
        None, "--report-unversioned/--no-report-unversioned", help="Report unversioned items"
    ),
    report_ignored: Optional[bool] = typer.Option(
        None, "--report-ignored/--no-report-ignored", help="Report ignored items"
    ),
    report_out_of_date: Optional[bool] = typer.Option(
        None,
        "--report-out-of-date/--no-report-out-of-date",
        help="Contact the repository and report out-of-date items",
    ),
    verbose: Optional[bool] = typer.Option(
        None, "--verbose/--quiet", help="Log every visited entry"
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", help="Output format: text, properties or json"
    ),
) -> None:
    """Print the revision token of a working copy."""
    commands.show(
        directory=directory,
        user_config=config,
        revision_overrides={
            "report_mixed_revisions": report_mixed_revisions,
            "report_status": report_status,
            "report_unversioned": report_unversioned,
            "report_ignored": report_ignored,
            "report_out_of_date": report_out_of_date,
            "verbose": verbose,
        },
        output_format=output_format,
    )


@config_app.command("show")
def config_show_cmd(
    config: Optional[Path] = typer.Option(None, "--config", help="YAML configuration file"),
) -> None:
    """Show effective configuration."""
    commands.config_show(user_config=config)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
