"""Markdown documentation tree generator for Click commands.

Renders one markdown page per available command (depth first) into an
output directory. Page names follow the command path with spaces replaced
by underscores (``clispec generate-spec`` -> ``clispec_generate-spec.md``).

Two callbacks customize the output:
- file prepender: receives the output filename, returns text placed
  before the page (front matter)
- link handler: receives a page name (``clispec.md``), returns the link
  target used in the SEE ALSO section

Philosophy:
- Simple string formatting (no Jinja2)
- Option lines come from Click's own help formatter
- Self-contained and regeneratable
"""

import logging
from collections.abc import Callable
from datetime import date
from pathlib import Path

import click

from .sources import help_text

logger = logging.getLogger(__name__)

FilePrepender = Callable[[str], str]
LinkHandler = Callable[[str], str]

HELP_COMMAND = "help"


def page_name(command_path: str) -> str:
    """Return the markdown filename for a command path."""
    return command_path.replace(" ", "_") + ".md"


def is_available(command: click.Command) -> bool:
    """Whether a command gets its own page and SEE ALSO entry."""
    return not (command.hidden or command.deprecated or command.name == HELP_COMMAND)


class DocGenerator:
    """Generates markdown documentation for a Click command tree."""

    def __init__(
        self,
        file_prepender: FilePrepender | None = None,
        link_handler: LinkHandler | None = None,
        auto_gen_tag: bool = True,
        today: date | None = None,
    ):
        self.file_prepender = file_prepender or (lambda filename: "")
        self.link_handler = link_handler or (lambda name: name)
        self.auto_gen_tag = auto_gen_tag
        self.today = today

    def generate_tree(
        self,
        command: click.Command,
        output_dir: str | Path,
        parent: click.Context | None = None,
        info_name: str | None = None,
    ) -> list[Path]:
        """Write pages for a command and all available descendants.

        The output directory must exist. Write errors propagate unchanged.

        Args:
            command: Root of the (sub)tree to document
            output_dir: Directory receiving the markdown files
            parent: Context of the parent command
            info_name: Name used for the command in paths (defaults to its name)

        Returns:
            Paths of the written files, children before their parent
        """
        ctx = click.Context(command, info_name=info_name or command.name, parent=parent)
        written: list[Path] = []

        for child in self._available_children(ctx):
            written.extend(self.generate_tree(child, output_dir, parent=ctx))

        path = Path(output_dir) / page_name(ctx.command_path)
        content = self.file_prepender(str(path)) + self.generate(ctx)
        path.write_text(content, encoding="utf-8")
        logger.debug(f"Wrote {path}")

        written.append(path)
        return written

    def generate(self, ctx: click.Context) -> str:
        """Render the markdown page for the command of a context."""
        command = ctx.command
        sections = [f"## {ctx.command_path}\n"]

        short_help = command.get_short_help_str()
        if short_help:
            sections.append(f"{short_help}\n")

        long_help = help_text(command)
        if long_help:
            sections.append("### Synopsis\n")
            sections.append(f"{long_help}\n")

        sections.append(self._generate_usage(ctx))

        options = self._generate_options(ctx)
        if options:
            sections.append(options)

        see_also = self._generate_see_also(ctx)
        if see_also:
            sections.append(see_also)

        if self.auto_gen_tag:
            today = self.today or date.today()
            sections.append(f"###### Auto generated by clispec on {today.day}-{today:%b-%Y}\n")

        return "\n".join(sections)

    def _available_children(self, ctx: click.Context) -> list[click.Command]:
        command = ctx.command
        if not isinstance(command, click.Group):
            return []

        children = []
        for name in sorted(command.list_commands(ctx)):
            child = command.get_command(ctx, name)
            if child is not None and is_available(child):
                children.append(child)
        return children

    def _generate_usage(self, ctx: click.Context) -> str:
        """Generate the fenced usage line."""
        pieces = ctx.command.collect_usage_pieces(ctx)
        usage_line = " ".join([ctx.command_path, *pieces])
        return f"```\n{usage_line}\n```\n"

    def _generate_options(self, ctx: click.Context) -> str:
        """Generate the options section using Click's help formatter."""
        records = []
        for param in ctx.command.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is not None:
                records.append(record)

        if not records:
            return ""

        formatter = ctx.make_formatter()
        formatter.write_dl(records)
        return f"### Options\n\n```\n{formatter.getvalue()}```\n"

    def _generate_see_also(self, ctx: click.Context) -> str:
        """Generate links to the parent and the available children."""
        lines = []

        if ctx.parent is not None:
            parent_path = ctx.parent.command_path
            link = self.link_handler(page_name(parent_path))
            lines.append(f"* [{parent_path}]({link})\t - {ctx.parent.command.get_short_help_str()}")

        for child in self._available_children(ctx):
            child_path = f"{ctx.command_path} {child.name}"
            link = self.link_handler(page_name(child_path))
            lines.append(f"* [{child_path}]({link})\t - {child.get_short_help_str()}")

        if not lines:
            return ""
        return "### SEE ALSO\n\n" + "\n".join(lines) + "\n"


__all__ = ["DocGenerator", "FilePrepender", "LinkHandler", "is_available", "page_name"]
