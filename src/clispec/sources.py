"""Framework-neutral view of a command tree.

The extractor only needs a handful of capabilities from a command: its
usage string, descriptions, aliases, annotations, children and local
flags. ``CommandSource`` and ``FlagSource`` name that capability set;
``ClickCommandSource`` and ``ClickFlagSource`` adapt Click objects to it.
"""

import inspect
from collections.abc import Sequence
from typing import Any, Protocol

import click

# Newer Click releases mark "no default" with a sentinel instead of None
_UNSET = getattr(click.core, "UNSET", None)


class FlagSource(Protocol):
    """A locally defined flag."""

    @property
    def name(self) -> str: ...

    @property
    def shorthand(self) -> str: ...

    @property
    def usage(self) -> str: ...

    @property
    def default_value(self) -> str: ...

    @property
    def deprecated(self) -> str: ...


class CommandSource(Protocol):
    """A command in a CLI command tree."""

    @property
    def usage(self) -> str: ...

    @property
    def short(self) -> str: ...

    @property
    def long(self) -> str: ...

    @property
    def aliases(self) -> list[str]: ...

    @property
    def deprecated(self) -> str: ...

    @property
    def annotations(self) -> dict[str, str]: ...

    def children(self) -> Sequence["CommandSource"]: ...

    def local_flags(self) -> Sequence[FlagSource]: ...


def deprecation_text(value: Any) -> str:
    """Normalize Click's ``deprecated`` (bool or message) to a message."""
    if isinstance(value, str):
        return value
    return "deprecated" if value else ""


def help_text(command: click.Command) -> str:
    """Long help of a command as Click renders it.

    Indentation is removed, text after a ``\\f`` marker is dropped and so
    are the ``\\b`` lines Click uses to stop rewrapping.
    """
    text = inspect.cleandoc((command.help or "").split("\f", 1)[0])
    return "\n".join(line for line in text.splitlines() if line.strip() != "\b")


def default_text(param: click.Option) -> str:
    """Render an option default the way it is shown to users."""
    if isinstance(param.show_default, str):
        return param.show_default

    value = param.default
    if value is None or value is _UNSET or callable(value):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list | tuple):
        return "[" + ",".join(str(item) for item in value) + "]"
    return str(value)


class ClickFlagSource:
    """Adapts a ``click.Option`` to ``FlagSource``."""

    def __init__(self, option: click.Option):
        self.option = option

    @property
    def name(self) -> str:
        if not self.option.opts:
            return self.option.name or ""
        return max(self.option.opts, key=len).lstrip("-")

    @property
    def shorthand(self) -> str:
        primary = max(self.option.opts, key=len) if self.option.opts else ""
        for opt in self.option.opts:
            if opt != primary and len(opt) == 2 and opt.startswith("-"):
                return opt[1:]
        return ""

    @property
    def usage(self) -> str:
        return self.option.help or ""

    @property
    def default_value(self) -> str:
        return default_text(self.option)

    @property
    def deprecated(self) -> str:
        return deprecation_text(getattr(self.option, "deprecated", False))


class ClickCommandSource:
    """Adapts a ``click.Command`` (or group) to ``CommandSource``.

    Args:
        command: Click command to wrap
        parent: Context of the parent command, used to build command paths
        info_name: Name the command was invoked as (defaults to its own name)
    """

    def __init__(
        self,
        command: click.Command,
        parent: click.Context | None = None,
        info_name: str | None = None,
    ):
        self.command = command
        self.ctx = click.Context(command, info_name=info_name or command.name, parent=parent)

    @property
    def usage(self) -> str:
        pieces = self.command.collect_usage_pieces(self.ctx)
        return " ".join([self.ctx.info_name or "", *pieces]).strip()

    @property
    def short(self) -> str:
        return self.command.get_short_help_str()

    @property
    def long(self) -> str:
        return help_text(self.command)

    @property
    def aliases(self) -> list[str]:
        return list(getattr(self.command, "aliases", None) or [])

    @property
    def deprecated(self) -> str:
        return deprecation_text(self.command.deprecated)

    @property
    def annotations(self) -> dict[str, str]:
        return dict(getattr(self.command, "annotations", None) or {})

    def children(self) -> list["ClickCommandSource"]:
        if not isinstance(self.command, click.Group):
            return []

        children = []
        for name in self.command.list_commands(self.ctx):
            child = self.command.get_command(self.ctx, name)
            if child is not None:
                children.append(ClickCommandSource(child, parent=self.ctx))
        return children

    def local_flags(self) -> list[ClickFlagSource]:
        # Click options are never inherited, so every option is local
        return [
            ClickFlagSource(param)
            for param in self.command.params
            if isinstance(param, click.Option)
        ]


__all__ = [
    "ClickCommandSource",
    "ClickFlagSource",
    "CommandSource",
    "FlagSource",
    "default_text",
    "deprecation_text",
    "help_text",
]
