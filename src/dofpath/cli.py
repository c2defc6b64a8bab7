"""Command-line entry points for dofpath."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from dofpath.config import ConfigError, DofPathConfig, dump_example_config, load_config
from dofpath.resolver import ConfigPathResolver, global_config_file_name, sanitize_host_app_name
from dofpath.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Install folder and global config file lookup")


def _load(config: Optional[Path]) -> DofPathConfig:
    try:
        return load_config(config)
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc


def _setup(settings: DofPathConfig) -> logging.Logger:
    return configure_logging(
        log_path=settings.logging.log_path,
        level=getattr(logging, settings.logging.level),
        stream=sys.stderr,
    )


@app.command()
def install_folder(
    module: Optional[Path] = typer.Option(None, help="Module file to anchor the search (default: this package)"),
    config: Optional[Path] = typer.Option(None, help="Settings file (YAML/TOML/JSON)"),
) -> None:
    """Print the install folder and the detected layout."""

    settings = _load(config)
    _setup(settings)
    location = ConfigPathResolver(module, settings=settings).locate_install()
    if location is None:
        typer.echo("Install folder unknown; callers fall back to the working directory.", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{location.install_folder}\t{location.layout.value}")


@app.command()
def config_file(
    host_app: str = typer.Argument(..., help="Hosting application name"),
    module: Optional[Path] = typer.Option(None, help="Module file to anchor the search (default: this package)"),
    config: Optional[Path] = typer.Option(None, help="Settings file (YAML/TOML/JSON)"),
) -> None:
    """Print the global config file path for a hosting application."""

    settings = _load(config)
    logger = _setup(settings)
    resolved = ConfigPathResolver(module, settings=settings).resolve_global_config_file(host_app)
    if not resolved.exists():
        logger.info("Global config file %s does not exist yet", resolved)
    typer.echo(str(resolved))


@app.command()
def sanitize(
    host_app: str = typer.Argument(..., help="Hosting application name"),
    config: Optional[Path] = typer.Option(None, help="Settings file (YAML/TOML/JSON)"),
) -> None:
    """Print the sanitized host application suffix and the config file name."""

    settings = _load(config)
    _setup(settings)
    typer.echo(sanitize_host_app_name(host_app))
    typer.echo(global_config_file_name(host_app, settings))


@app.command()
def dump_config(dest: Path = typer.Argument(..., help="Destination file (.yaml or .json)")) -> None:
    """Write the default settings to a file."""

    logger = _setup(DofPathConfig())
    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    logger.info("Wrote default settings to %s", dest)
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
