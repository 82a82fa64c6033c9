"""envreload CLI for forcing a directory-hook cache reload.

Running ``envreload`` with no arguments forces the reload of the configured
project directory. The other commands inspect state and manage the config.
"""

import logging
import sys
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from envreload_library.config import ReloadSettings
from envreload_library.config import get_config_path
from envreload_library.config import load_config
from envreload_library.config import write_config
from envreload_library.coordinator import ReloadCoordinator
from envreload_library.errors import MissingDirectoryError
from envreload_library.errors import RebuildFailedError
from envreload_library.errors import ReloadError
from envreload_library.status import ReloadStatusService
from envreload_library.storage.paths import get_log_dir

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: ReloadSettings, verbose: bool = False) -> None:
    """Configure root logging from settings.

    Args:
        settings: Loaded settings (log_level, log_to_file)
        verbose: Force DEBUG level
    """
    level_name = "DEBUG" if verbose else settings.log_level.upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT)

    if settings.log_to_file:
        log_file = get_log_dir() / "envreload.log"
        root = logging.getLogger()
        if not any(isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_file for h in root.handlers):
            handler = logging.FileHandler(log_file, encoding="utf-8")
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(handler)


def get_settings(ctx: click.Context) -> ReloadSettings:
    """Load settings once per invocation and configure logging."""
    obj = ctx.ensure_object(dict)
    if "settings" not in obj:
        try:
            settings = load_config(obj.get("config_path"))
        except ValidationError as e:
            raise click.ClickException(f"Invalid configuration: {e}") from e
        configure_logging(settings, obj.get("verbose", False))
        obj["settings"] = settings
    return obj["settings"]


def get_coordinator(ctx: click.Context) -> ReloadCoordinator:
    settings = get_settings(ctx)
    try:
        return ReloadCoordinator.from_settings(settings)
    except ValueError as e:
        raise click.UsageError(
            f"{e}. Run 'envreload config init --target DIR' or set ENVRELOAD_TARGET_DIRECTORY."
        ) from e


def manual_reload_hint(settings: ReloadSettings) -> str:
    """Name the command a user runs to reload by hand."""
    tool = Path(settings.executor_command[0]).name
    return f'{tool} reload'


def exit_status(returncode: int) -> int:
    """Map a subprocess return code onto a process exit status."""
    if returncode < 0:
        # Killed by signal N, report like a shell does
        return 128 + (-returncode)
    if returncode == 0 or returncode > 255:
        return 1
    return returncode


@click.group(invoke_without_command=True)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: $ENVRELOAD_HOME/config/envreload.yaml)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool):
    """envreload - Force a directory-hook cache reload.

    Without a command, forces the reload of the configured directory.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose

    if ctx.invoked_subcommand is None:
        ctx.invoke(reload)


@cli.command()
@click.pass_context
def reload(ctx: click.Context):
    """Force the hook to rebuild its cache for the configured directory."""
    settings = get_settings(ctx)
    coordinator = get_coordinator(ctx)

    try:
        result = coordinator.force_reload()
    except MissingDirectoryError as e:
        click.echo(f'Cannot find source directory "{e.directory}"; did you move it?', err=True)
        click.echo(
            f'Cannot force reload with this tool - use "{manual_reload_hint(settings)}" manually and then try again',
            err=True,
        )
        sys.exit(1)
    except RebuildFailedError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(exit_status(e.returncode))
    except ReloadError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except OSError as e:
        # Executor already ran; marker or artifacts could not be re-stamped
        logger.error(f"Timestamp update failed for {coordinator.target.directory}: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.info(f"Reload complete for {result.directory}")


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print status as JSON")
@click.pass_context
def status(ctx: click.Context, as_json: bool):
    """Show whether the hook cache is up to date."""
    coordinator = get_coordinator(ctx)
    report = ReloadStatusService(coordinator.target).get_status()

    if as_json:
        click.echo(report.model_dump_json(by_alias=True, indent=2))
    else:
        click.echo(f"Directory: {report.directory}")
        click.echo(f"Status:    {report.status}")
        if report.marker_modified:
            click.echo(f"Marker:    {coordinator.target.config_marker} ({report.marker_modified.isoformat()})")
        if report.reason:
            click.echo(f"Reason:    {report.reason}")
        for artifact in report.artifacts:
            modified = artifact.modified.isoformat() if artifact.modified else "-"
            click.echo(f"  {artifact.status:<7} {artifact.path} ({modified})")

    if report.status != "fresh":
        sys.exit(1)


@cli.group()
def config():
    """Manage the envreload config file."""
    pass


@config.command("init")
@click.option(
    "--target",
    required=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project directory to reload",
)
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
def config_init(ctx: click.Context, target: Path, force: bool):
    """Write a config file that pins the target directory."""
    try:
        path = write_config(target, config_path=ctx.obj.get("config_path"), force=force)
    except FileExistsError as e:
        raise click.ClickException(f"{e} (use --force to overwrite)") from e
    click.echo(f"Wrote {path}")


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context):
    """Print the effective configuration."""
    settings = get_settings(ctx)
    click.echo(yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=False).rstrip())


@config.command("path")
@click.pass_context
def config_path_command(ctx: click.Context):
    """Print the config file location."""
    click.echo(str(ctx.obj.get("config_path") or get_config_path()))


def main():
    """Entry point for envreload CLI.

    Runs click outside standalone mode so Ctrl-C exits 130 instead of
    click's generic "Aborted!" with status 1.
    """
    try:
        cli(standalone_mode=False)
    except (click.Abort, KeyboardInterrupt):
        click.echo("\nInterrupted", err=True)
        sys.exit(130)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
