"""Command tree extraction.

This module walks a command tree depth first and maps every command onto a
``CommandNode`` record, and every locally defined flag onto a ``FlagSpec``.
It works against the ``CommandSource`` interface, so any framework with an
adapter can be exported; ``extract_click_command`` is the Click entry point.

Philosophy:
- Runtime inspection of the live command tree
- Pure transformation, no side effects
- Self-contained and regeneratable
"""

import logging

import click

from .models import STABILITY_ANNOTATION, CommandNode, FlagSpec
from .sources import ClickCommandSource, CommandSource

logger = logging.getLogger(__name__)


def canonical_name(usage: str) -> str:
    """Return the first whitespace-delimited token of a usage string.

    An empty usage string yields an empty name.

    Example:
        >>> canonical_name("add <id>")
        'add'
    """
    tokens = usage.split()
    return tokens[0] if tokens else ""


def first_alias(aliases: list[str]) -> str:
    """Return the first declared alias; further aliases are not exported."""
    return aliases[0] if aliases else ""


def stability(annotations: dict[str, str]) -> str:
    """Return the stability annotation, or an empty string."""
    return annotations.get(STABILITY_ANNOTATION, "")


class CLIExtractor:
    """Extracts command metadata from a command tree."""

    def extract_command(self, source: CommandSource) -> CommandNode:
        """Extract one command and, recursively, all of its children.

        Args:
            source: Command to extract

        Returns:
            CommandNode for the command

        Example:
            >>> extractor = CLIExtractor()
            >>> node = extractor.extract_command(ClickCommandSource(main))
            >>> sorted(node.commands)
            ['build', 'deploy']
        """
        name = canonical_name(source.usage)
        if not name:
            logger.warning("Command with empty usage string exported under an empty key")

        return CommandNode(
            name=name,
            alias=first_alias(source.aliases),
            description=source.long,
            deprecated=source.deprecated,
            stability=stability(source.annotations),
            flags=self.extract_flags(source),
            commands=self.extract_children(source),
        )

    def extract_children(self, source: CommandSource) -> dict[str, CommandNode]:
        """Extract the direct children of a command, keyed by canonical name.

        Hidden commands are included. On a key collision the later child wins.
        """
        commands: dict[str, CommandNode] = {}

        for child in source.children():
            node = self.extract_command(child)
            if node.name in commands:
                logger.warning(f"Duplicate command name '{node.name}', keeping the last one")
            commands[node.name] = node

        return commands

    def extract_flags(self, source: CommandSource) -> dict[str, FlagSpec]:
        """Extract the locally defined flags of a command, keyed by flag name."""
        flags: dict[str, FlagSpec] = {}

        for flag in source.local_flags():
            flags[flag.name] = FlagSpec(
                shorthand=flag.shorthand,
                usage=flag.usage,
                default=flag.default_value,
                deprecated=flag.deprecated,
            )

        logger.debug(f"Extracted {len(flags)} flags from '{canonical_name(source.usage)}'")
        return flags


def extract_click_command(command: click.Command) -> CommandNode:
    """Extract a Click command tree into a ``CommandNode``."""
    return CLIExtractor().extract_command(ClickCommandSource(command))


__all__ = [
    "CLIExtractor",
    "canonical_name",
    "extract_click_command",
    "first_alias",
    "stability",
]
