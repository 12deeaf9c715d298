"""Tree_Digest command line entry point."""

from pathlib import Path
from typing import List, Optional

import typer

from Tree_Digest import __version__
from Tree_Digest.cli.fingerprint import close_tracer, run_interactive, run_paths
from Tree_Digest.cli.settings import configure_logging, load_settings
from Tree_Digest.digest.engine import DigestEngine
from Tree_Digest.digest.primitives import get_primitive
from Tree_Digest.tracing.otel import build_tracer


app = typer.Typer(add_completion=False, help="Digest directory trees and trace the traversal.")


def _version_callback(value: bool) -> bool:
    if value:
        typer.echo(__version__)
        raise typer.Exit()
    return value


@app.command()
def main(
    paths: Optional[List[Path]] = typer.Argument(
        None,
        help="Files or directories to digest. Prompts on stdin when omitted.",
    ),
    algorithm: Optional[str] = typer.Option(
        None,
        "--algorithm",
        "-a",
        help="Digest algorithm: sha256 or checksum.",
    ),
    exporter: Optional[str] = typer.Option(
        None,
        "--exporter",
        help="Span exporter: none, console or memory.",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a settings JSON file.",
    ),
    project_root: Optional[Path] = typer.Option(
        None,
        "--project-root",
        help="Directory whose data/settings.json is loaded.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level, e.g. DEBUG or WARNING.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=_version_callback,
        is_eager=True,
        is_flag=True,
    ),
) -> None:
    """Print the digest of each requested path."""
    try:
        settings = load_settings(project_root=project_root, config_path=config)
    except (OSError, ValueError) as exc:
        typer.echo(f"Unable to load settings: {exc}", err=True)
        raise typer.Exit(code=2)

    if algorithm is not None:
        settings["digest"]["algorithm"] = algorithm
    if exporter is not None:
        settings["tracing"]["exporter"] = exporter
    if log_level is not None:
        settings["logging"]["level"] = log_level

    configure_logging(settings)

    try:
        primitive = get_primitive(settings["digest"]["algorithm"])
        tracer = build_tracer(settings)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)

    engine = DigestEngine(tracer, primitive)
    environment = settings["tracing"].get("environment")

    try:
        if paths:
            failures = run_paths(engine, paths, environment=environment)
        else:
            run_interactive(engine, environment=environment)
            failures = 0
    finally:
        close_tracer(tracer)

    if failures:
        raise typer.Exit(code=1)
