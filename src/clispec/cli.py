"""CLI entry point for clispec.

Hosts the hidden documentation generators so a project can export the
spec and docs of clispec itself, and serves as the reference for wiring
them into another Click application.

Commands:
    clispec generate-spec     # Write docs/spec.json
    clispec generate-docs     # Write one markdown page per command
    clispec validate-docs     # Check the generated markdown pages
"""

import logging

import click

from clispec import __version__
from clispec.click_group import SpecGroup
from clispec.commands import register_generate_commands
from clispec.config import ConfigManager
from clispec.errors import ConfigError
from clispec.models import STABILITY_ANNOTATION


@click.group(
    name="clispec",
    cls=SpecGroup,
    invoke_without_command=True,
    annotations={STABILITY_ANNOTATION: "experimental"},
    context_settings={"help_option_names": ["--help", "-h"]},
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Path to a clispec.toml config file",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Verbose output")
@click.version_option(version=__version__)
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """clispec - export CLI specs and markdown docs from Click commands.

    \b
    CONFIGURATION:
        Config file: ./clispec.toml ([clispec] table)
        Settings: output_dir, spec_filename, title, license, link_prefix
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(message)s")

    try:
        config = ConfigManager.get_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj = {"config": config}

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


register_generate_commands(main, __version__)


if __name__ == "__main__":
    main()
