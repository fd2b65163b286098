"""CLI entry point for Board Migrator."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from tqdm.contrib.logging import logging_redirect_tqdm

from boardmigrator import __version__
from boardmigrator.config import ConfigError, load_config
from boardmigrator.gateway import GhClient
from boardmigrator.logging import ROOT_LOGGER, get_logger, setup_logging
from boardmigrator.migration import ConfigurationError, MigrationError, MigrationParams, Migrator
from boardmigrator.schema import SchemaValidationError


@click.command()
@click.version_option(version=__version__, prog_name="board-migrator")
@click.option("-p", "--project", "project", default="", help="Project Number (eg 301)")
@click.option("-t", "--type", "board_type", default="", help="Type (team, sig, wg)")
@click.option(
    "-n",
    "--name",
    "name",
    default="",
    help="Team, SIG or WG, or its leading words (eg Rocket for 'Rocket Team')",
)
@click.option("-a", "--area", "area", default="", help="Area, or its leading words (eg KaaS)")
@click.option(
    "-f",
    "--function",
    "function",
    default="",
    help="Function, or its leading words (eg Product for 'Product Strategy')",
)
@click.option(
    "-d",
    "--dry-run",
    is_flag=True,
    help="Add items to the roadmap but leave the source items unarchived",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to board-migrator.yaml (auto-detected if not specified)",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for log files (default: ./logs)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every gh command and its output")
def main(
    project: str,
    board_type: str,
    name: str,
    area: str,
    function: str,
    dry_run: bool,
    config_path: Path | None,
    log_dir: Path | None,
    verbose: bool,
) -> None:
    """Migrate the items of a project board onto the roadmap board.

    Every issue on the project is added to the roadmap with its Status, Kind,
    Workstream and dates, labelled with the given team, SIG or working group,
    and archived on the project unless --dry-run is given. Draft items are
    skipped.

    Names given with --name, --area and --function may be shortened, but only
    to whole words: "Rocket" selects "Rocket Team", while "Rock" or "Prod"
    select nothing.
    """
    setup_logging(log_dir=log_dir, level="DEBUG" if verbose else None)

    try:
        params = MigrationParams(
            source_project=project,
            board_type=board_type,
            name=name,
            area=area,
            function=function,
            dry_run=dry_run,
        )
        config = load_config(config_path)
    except (ConfigurationError, ConfigError) as e:
        click.echo(f"Configuration error: {e}. Exiting", err=True)
        sys.exit(1)

    gateway = GhClient(
        owner=config.owner,
        limit=config.gh.limit,
        executable=config.gh.executable,
        timeout=config.gh.timeout,
        verbose=verbose,
    )
    migrator = Migrator(gateway, config, show_progress=not verbose)

    try:
        with logging_redirect_tqdm(loggers=[get_logger(ROOT_LOGGER)]):
            report = migrator.run(params)
    except SchemaValidationError as e:
        click.echo("Validation failed:", err=True)
        for message in e.messages:
            click.echo(f"  - {message}", err=True)
        sys.exit(1)
    except MigrationError as e:
        click.echo(f"Migration failed: {e}", err=True)
        sys.exit(1)

    click.echo(f"Done: {report.summary()}")
    if report.has_errors:
        click.echo("Some items had errors, see the log for details.", err=True)


if __name__ == "__main__":
    main()
