from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Final

import typer

from shellcheck_importer.config import ImporterConfig, load_config
from shellcheck_importer.errors import ConfigError
from shellcheck_importer.loaders.json_loader import JsonIssueSink
from shellcheck_importer.repositories.files import ProjectFileRegistry
from shellcheck_importer.services.sensor import ShellcheckIssuesSensor

DEFAULT_OUTPUT_NAME: Final[str] = "shellcheck-issues.json"

app = typer.Typer(
    name="shellcheck-importer",
    add_completion=False,
    no_args_is_help=True,
    help="Import ShellCheck diagnostics as code-quality issues.",
)


@app.callback()
def callback() -> None:
    """Import ShellCheck diagnostics as code-quality issues."""


def _build_config(config_file: Path | None, report: Path | None) -> ImporterConfig:
    """Load settings from a YAML file if given and apply CLI overrides.

    Args:
        config_file: Optional YAML settings file.
        report: Optional pre-generated report overriding the configured one.

    Returns:
        ImporterConfig: Settings for this run.
    """
    config = load_config(config_file) if config_file else ImporterConfig()
    if report is not None:
        config = config.model_copy(update={"report_path": report})
    return config


@app.command("import")
def import_report(
    project_root: Annotated[
        Path,
        typer.Argument(
            help="Root of the project whose scripts are analyzed.",
            exists=True,
            file_okay=False,
            dir_okay=True,
            readable=True,
            resolve_path=True,
        ),
    ],
    report: Annotated[
        Path | None,
        typer.Option(
            "--report",
            "-r",
            help="Pre-generated ShellCheck JSON report. ShellCheck runs when omitted.",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML settings file.",
            exists=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    output_path: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help=f"Issues JSON to write (default: PROJECT_ROOT/{DEFAULT_OUTPUT_NAME}).",
            dir_okay=False,
            writable=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Import ShellCheck findings for a project and write them as JSON.

    Args:
        project_root: Root of the analyzed project.
        report: Optional pre-generated report path.
        config_file: Optional YAML settings file.
        output_path: Destination of the issues JSON.
        verbose: Whether to log at DEBUG level.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _build_config(config_file, report)
    except ConfigError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    registry = ProjectFileRegistry.scan(project_root, config)
    sensor = ShellcheckIssuesSensor(config=config, project_root=project_root)
    sink = JsonIssueSink(output_path or project_root / DEFAULT_OUTPUT_NAME)
    if not sensor.should_execute(registry) and config.report_path is None:
        sink.save()
        typer.secho(
            f"No {config.language_key} files found in {project_root}, "
            f"wrote empty {sink.output_path}",
            fg=typer.colors.YELLOW,
        )
        return

    outcome = sensor.execute(registry, sink)
    if outcome is None:
        typer.secho("ShellCheck report could not be imported", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    sink.save()
    typer.secho(
        f"Imported {len(outcome.submitted)} issues "
        f"({len(outcome.skipped)} skipped) into {sink.output_path}",
        fg=typer.colors.GREEN,
    )


def main() -> None:
    """Entry point for executing the Typer application."""
    app()


if __name__ == "__main__":
    main()
