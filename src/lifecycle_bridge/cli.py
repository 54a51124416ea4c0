"""CLI entry point for the lifecycle bridge."""

from pathlib import Path

import click
from loguru import logger

from .config import BridgeConfig
from .errors import InvalidVolumeSpecError
from .status import map_status_code, rewrite_status_error
from .volumes import container_config, parse_volume

log = logger.bind(stage="cli")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=True),
    default=None,
    help="Path to .env file.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_file: str | None) -> None:
    """Explain buildpacks lifecycle failures and compile volume mounts."""
    config_kwargs: dict[str, bool | str | Path] = {"verbose": verbose}
    if verbose:
        config_kwargs["log_level"] = "DEBUG"
    # Replaces the default .env in cwd; env vars still take precedence
    if config_file:
        config_kwargs["_env_file"] = Path(config_file)

    config = BridgeConfig(**config_kwargs)  # type: ignore[arg-type]
    config.setup_logging()
    if config_file:
        log.debug(f"Loaded env from {config_file}")
    ctx.obj = config


@main.command()
@click.argument("code", type=int, required=False)
@click.option(
    "-e",
    "--error",
    "error_text",
    default=None,
    help="Error message to scan for an embedded status code.",
)
def explain(code: int | None, error_text: str | None) -> None:
    """Print the message for a lifecycle exit CODE or error text."""
    if code is None and error_text is None:
        raise click.UsageError("Give a status CODE or --error TEXT.")
    if code is not None and error_text is not None:
        raise click.UsageError("CODE and --error are mutually exclusive.")

    if code is not None:
        click.echo(map_status_code(code))
        return

    click.echo(str(rewrite_status_error(Exception(error_text))))


@main.command()
@click.argument("specs", nargs=-1)
@click.pass_obj
def volumes(config: BridgeConfig, specs: tuple[str, ...]) -> None:
    """Compile host:target[:options] SPECS into container volume strings.

    Uses the VOLUMES setting when no SPECS are given.
    """
    try:
        if specs:
            declared = [parse_volume(spec) for spec in specs]
        else:
            declared = list(config.volumes)
            log.debug(f"Using {len(declared)} volume(s) from config")
        result = container_config(declared)
    except InvalidVolumeSpecError as e:
        raise click.ClickException(str(e)) from e

    for volume in result.volumes:
        click.echo(volume)
