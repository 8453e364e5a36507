"""CLI entry point for IssueSync.

Loads configuration from the environment (and an optional .env file),
runs one reconciliation pass and maps the outcome to the exit code:
0 on success, 1 on any failure.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from issuesync import __version__
from issuesync.config import SyncConfig
from issuesync.logging import get_logger, sanitize_for_log, setup_logging
from issuesync.reconciler import Reconciler, SyncResult
from issuesync.sheets import RowReader, SheetsClient, SheetWriter
from issuesync.tracker import GitHubIssueClient

logger = get_logger("cli")


def run(config: SyncConfig) -> SyncResult:
    """Build the clients for ``config`` and run one pass.

    Args:
        config: Settings for the run.

    Returns:
        SyncResult of the pass.
    """
    sheets = SheetsClient.from_credentials(config.spreadsheet_id, config.sheets_credentials)
    reader = RowReader(sheets, config.sheet_name)
    writer = SheetWriter(sheets, config.sheet_name)

    with GitHubIssueClient(
        repo=config.repo,
        token=config.github_token,
        base_url=config.github_api_url,
    ) as tracker:
        reconciler = Reconciler(tracker, default_assignee=config.default_assignee)
        return reconciler.sync(reader, writer)


@click.command()
@click.version_option(version=__version__, prog_name="issuesync")
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path(".env"),
    show_default=True,
    help="Dotenv file loaded before reading the environment (skipped if missing)",
)
@click.option(
    "--sheet-name",
    default=None,
    help="Sheet tab to sync (overrides SHEET_NAME)",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for log files (default: logs/ or ISSUESYNC_LOG_DIR)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
def main(env_file: Path, sheet_name: str | None, log_dir: Path | None, verbose: bool) -> None:
    """Sync Google Sheets rows with GitHub issues."""
    setup_logging(log_dir=log_dir, level="DEBUG" if verbose else None)

    try:
        if env_file.is_file():
            load_dotenv(env_file, override=False)
            logger.debug("Loaded environment from %s", env_file)

        config = SyncConfig.from_env()
        if sheet_name:
            config.sheet_name = sheet_name

        logger.info(
            "Syncing %s (%s) with %s", config.spreadsheet_id, config.sheet_name, config.repo
        )
        result = run(config)
    except Exception as e:
        logger.error("Sync failed: %s", sanitize_for_log(str(e)), exc_info=True)
        click.echo(f"Error: {sanitize_for_log(str(e))}", err=True)
        sys.exit(1)

    logger.info("Sync process completed successfully.")
    click.echo(f"Sync complete: created {len(result.created)}, updated {len(result.updated)}")


if __name__ == "__main__":
    main()
