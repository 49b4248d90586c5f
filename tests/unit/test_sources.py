"""Unit tests for the Click adapters behind the command source interface."""

import click
import pytest

from clispec.sources import (
    ClickCommandSource,
    ClickFlagSource,
    default_text,
    deprecation_text,
    help_text,
)

MULTI_PARAGRAPH_HELP = """Root summary.

    \b
    DETAILS:
        indented block
    """


class TestDeprecationText:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (False, ""),
            (None, ""),
            (True, "deprecated"),
            ("use 'new' instead", "use 'new' instead"),
        ],
    )
    def test_normalizes_bool_and_message(self, value, expected):
        assert deprecation_text(value) == expected


class TestDefaultText:
    def test_string_default_passes_through(self):
        assert default_text(click.Option(["--out"], default=".")) == "."

    def test_integer_default_is_stringified(self):
        assert default_text(click.Option(["--count"], default=3)) == "3"

    def test_boolean_defaults_render_lowercase(self):
        assert default_text(click.Option(["--force"], is_flag=True, default=False)) == "false"
        assert default_text(click.Option(["--color"], is_flag=True, default=True)) == "true"

    def test_sequence_default_renders_bracketed(self):
        option = click.Option(["--tag"], multiple=True, default=("a", "b"))

        assert default_text(option) == "[a,b]"

    def test_callable_default_renders_empty(self):
        option = click.Option(["--when"], default=lambda: "now")

        assert default_text(option) == ""

    def test_missing_default_renders_empty(self):
        assert default_text(click.Option(["--name"])) == ""

    def test_show_default_string_wins(self):
        option = click.Option(["--dir"], default=lambda: "/tmp", show_default="current dir")

        assert default_text(option) == "current dir"


class TestClickFlagSource:
    def test_long_name_and_shorthand(self):
        flag = ClickFlagSource(click.Option(["--out", "-o"], default=".", help="Output dir"))

        assert flag.name == "out"
        assert flag.shorthand == "o"
        assert flag.usage == "Output dir"
        assert flag.default_value == "."
        assert flag.deprecated == ""

    def test_dashed_long_name_is_kept(self):
        flag = ClickFlagSource(click.Option(["--dry-run"], is_flag=True))

        assert flag.name == "dry-run"
        assert flag.shorthand == ""

    def test_short_only_option(self):
        flag = ClickFlagSource(click.Option(["-q"], is_flag=True))

        assert flag.name == "q"
        assert flag.shorthand == ""

    def test_missing_help_is_empty(self):
        assert ClickFlagSource(click.Option(["--x"])).usage == ""


class TestClickCommandSource:
    def test_usage_starts_with_command_name(self):
        command = click.Command("add", params=[click.Argument(["name"])])

        source = ClickCommandSource(command)

        assert source.usage == "add [OPTIONS] NAME"
        assert source.usage.split()[0] == "add"

    def test_info_name_overrides_command_name(self):
        source = ClickCommandSource(click.Command("main"), info_name="mycli")

        assert source.usage.split()[0] == "mycli"

    def test_descriptions(self):
        command = click.Command("add", help="Add an item.\n\nLonger text.")

        source = ClickCommandSource(command)

        assert source.long == "Add an item.\n\nLonger text."
        assert source.short == "Add an item."

    def test_plain_click_command_has_no_aliases_or_annotations(self):
        source = ClickCommandSource(click.Command("plain"))

        assert source.aliases == []
        assert source.annotations == {}
        assert source.long == ""
        assert source.deprecated == ""

    def test_deprecated_command(self):
        source = ClickCommandSource(click.Command("old", deprecated=True))

        assert source.deprecated == "deprecated"

    def test_spec_group_metadata(self, sample_cli):
        items = sample_cli.commands["items"]

        source = ClickCommandSource(items)

        assert source.aliases == ["ls", "list"]
        assert source.annotations == {"x-qlik-stability": "experimental"}

    def test_children_include_hidden_commands(self, sample_cli):
        items = ClickCommandSource(sample_cli).children()[1]

        names = [child.usage.split()[0] for child in items.children()]

        assert names == ["add", "purge"]

    def test_leaf_command_has_no_children(self):
        assert ClickCommandSource(click.Command("leaf")).children() == []

    def test_local_flags_exclude_arguments_and_help(self, sample_cli):
        add = sample_cli.commands["items"].commands["add"]

        flags = ClickCommandSource(add).local_flags()

        assert [flag.name for flag in flags] == ["force"]


class TestHelpText:
    def test_dedents_and_drops_no_rewrap_markers(self):
        command = click.Command("root", help=MULTI_PARAGRAPH_HELP)

        text = help_text(command)

        assert text == "Root summary.\n\nDETAILS:\n    indented block"
        assert "\b" not in text

    def test_truncates_at_form_feed(self):
        command = click.Command("root", help="Shown text.\n\f\n:param x: hidden")

        assert help_text(command) == "Shown text."

    def test_missing_help_is_empty(self):
        assert help_text(click.Command("root")) == ""

    def test_long_description_is_normalized(self):
        @click.group(name="root")
        def root():
            """Root summary.

            \b
            DETAILS:
                indented block
            """

        source = ClickCommandSource(root)

        assert source.long == "Root summary.\n\nDETAILS:\n    indented block"
