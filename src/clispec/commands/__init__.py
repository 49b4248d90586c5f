"""Commands for clispec CLI."""

from clispec.commands.generate import register_generate_commands

__all__ = ["register_generate_commands"]
