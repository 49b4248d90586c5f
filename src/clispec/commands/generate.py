"""Hidden documentation generator commands.

This module provides the ``generate-spec``, ``generate-docs`` and
``validate-docs`` commands. They document whatever command tree they are
registered on, starting from the root of the invoked context.
"""

import logging

import click

from clispec.config import ConfigManager, ExportConfig
from clispec.docs_writer import write_docs
from clispec.errors import ClispecError
from clispec.sources import ClickCommandSource
from clispec.spec_writer import write_spec
from clispec.validator import DocsValidator

logger = logging.getLogger(__name__)


def _export_config(ctx: click.Context) -> ExportConfig:
    """Config stored on the root context by the host, else loaded from disk."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and isinstance(obj.get("config"), ExportConfig):
        return obj["config"]
    return ConfigManager.get_config()


def _program_name(root_ctx: click.Context) -> str | None:
    """Root command name, independent of how the program was launched."""
    return root_ctx.command.name or root_ctx.info_name


def create_generate_spec_command(version: str) -> click.Command:
    """Create the ``generate-spec`` command for a program version."""

    @click.command(
        name="generate-spec",
        hidden=True,
        short_help="Generate API spec based on click commands",
    )
    @click.pass_context
    def generate_spec(ctx: click.Context) -> None:
        """Generate API spec docs based on click commands."""
        click.echo("Generating specification")
        try:
            config = _export_config(ctx)
            root_ctx = ctx.find_root()
            root = ClickCommandSource(root_ctx.command, info_name=_program_name(root_ctx))
            write_spec(root, version, config)
        except ClispecError as e:
            raise click.ClickException(str(e)) from e

    return generate_spec


@click.command(
    name="generate-docs",
    hidden=True,
    short_help="Generate markdown docs based on click commands",
)
@click.pass_context
def generate_docs(ctx: click.Context) -> None:
    """Generate markdown docs based on click commands."""
    click.echo("Generating documentation")
    try:
        root_ctx = ctx.find_root()
        write_docs(root_ctx.command, _export_config(ctx), info_name=_program_name(root_ctx))
    except (ClispecError, OSError) as e:
        raise click.ClickException(str(e)) from e


@click.command(name="validate-docs", hidden=True)
@click.pass_context
def validate_docs(ctx: click.Context) -> None:
    """Validate generated markdown docs."""
    click.echo("Validating documentation")
    try:
        config = _export_config(ctx)
    except ClispecError as e:
        raise click.ClickException(str(e)) from e

    results = DocsValidator().validate_directory(config.output_dir)
    failed = [r for r in results if not r.is_valid]

    for result in results:
        for warning in result.warnings:
            logger.warning(f"{result.file_path}: {warning}")
        for error in result.errors:
            click.echo(f"✗ {result.file_path}: {error}", err=True)

    if not results:
        raise click.ClickException(f"No markdown files found in {config.output_dir}")
    if failed:
        raise click.ClickException(f"{len(failed)} of {len(results)} files failed validation")


def register_generate_commands(main: click.Group, version: str) -> None:
    """Register the hidden generator commands with a CLI group.

    Args:
        main: The root CLI group to register commands with
        version: Program version embedded in the spec
    """
    main.add_command(create_generate_spec_command(version))
    main.add_command(generate_docs)
    main.add_command(validate_docs)


__all__ = [
    "create_generate_spec_command",
    "generate_docs",
    "register_generate_commands",
    "validate_docs",
]
