"""Click command and group classes carrying export metadata.

Click has no notion of command aliases or free-form annotations. These
classes add both so the spec export can pick them up:

- ``aliases``: alternative names, resolvable on the command line
- ``annotations``: string-keyed metadata (e.g. ``x-qlik-stability``)

The group also displays contextual help when syntax errors occur.
"""

from typing import Any

import click


class SpecCommand(click.Command):
    """Click command with aliases and annotations."""

    def __init__(
        self,
        *args: Any,
        aliases: list[str] | tuple[str, ...] | None = None,
        annotations: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.aliases = list(aliases or [])
        self.annotations = dict(annotations or {})


class SpecGroup(click.Group):
    """Click group with aliases, annotations and auto-help on errors."""

    command_class = SpecCommand

    def __init__(
        self,
        *args: Any,
        aliases: list[str] | tuple[str, ...] | None = None,
        annotations: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.aliases = list(aliases or [])
        self.annotations = dict(annotations or {})

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Look up a command by name, falling back to declared aliases."""
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command

        for name in self.list_commands(ctx):
            candidate = super().get_command(ctx, name)
            if candidate is not None and cmd_name in getattr(candidate, "aliases", ()):
                return candidate
        return None

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        """Resolve aliases to the canonical name and show help when not found."""
        try:
            _, command, remaining = super().resolve_command(ctx, args)
        except click.UsageError as e:
            # Let parameter errors propagate with their own messages
            if isinstance(e, click.exceptions.MissingParameter | click.exceptions.BadParameter):
                raise
            click.echo(f"Error: {e.format_message()}", err=True)
            click.echo("")
            click.echo(ctx.get_help())
            ctx.exit(2)
            return None, None, []  # Explicit return for code clarity (never reached)

        # Report the canonical name so ctx.invoked_subcommand is stable
        return (command.name if command else None), command, remaining


# Subgroups created with @group.group() also use SpecGroup
SpecGroup.group_class = type


__all__ = ["SpecCommand", "SpecGroup"]
