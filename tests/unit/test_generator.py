"""Unit tests for the markdown tree generator."""

from datetime import date

import click

from clispec.generator import DocGenerator, is_available, page_name


def _context(command, *names):
    """Build the context chain root -> names for a command tree."""
    ctx = click.Context(command, info_name=command.name)
    for name in names:
        command = command.commands[name]
        ctx = click.Context(command, info_name=name, parent=ctx)
    return ctx


class TestHelpers:
    def test_page_name(self):
        assert page_name("root items add") == "root_items_add.md"
        assert page_name("root") == "root.md"

    def test_availability(self, sample_cli):
        items = sample_cli.commands["items"]

        assert is_available(items)
        assert not is_available(items.commands["purge"])
        assert not is_available(click.Command("help"))
        assert not is_available(click.Command("secret", hidden=True))


class TestGenerate:
    def test_page_sections(self, sample_cli):
        ctx = _context(sample_cli, "items", "add")

        page = DocGenerator(auto_gen_tag=False).generate(ctx)

        assert page.startswith("## root items add\n\nAdd an item.\n\n### Synopsis\n\nAdd an item.\n")
        assert "```\nroot items add [OPTIONS] NAME\n```\n" in page
        assert "### Options\n\n```\n" in page
        assert "--force" in page
        assert "Overwrite an existing item" in page
        assert "Auto generated" not in page

    def test_see_also_parent_and_children(self, sample_cli):
        ctx = _context(sample_cli, "items")

        page = DocGenerator(auto_gen_tag=False).generate(ctx)

        assert "### SEE ALSO\n\n" in page
        assert "* [root](root.md)\t - Root command for testing." in page
        assert "* [root items add](root_items_add.md)\t - Add an item." in page
        assert "purge" not in page

    def test_link_handler_is_applied(self, sample_cli):
        ctx = _context(sample_cli)
        generator = DocGenerator(link_handler=lambda name: f"/x/{name}", auto_gen_tag=False)

        page = generator.generate(ctx)

        assert "* [root build](/x/root_build.md)" in page
        assert "* [root items](/x/root_items.md)" in page

    def test_auto_gen_footer(self, minimal_cli):
        generator = DocGenerator(today=date(2026, 3, 5))

        page = generator.generate(_context(minimal_cli))

        assert page.endswith("###### Auto generated by clispec on 5-Mar-2026\n")

    def test_command_without_help_has_no_synopsis(self, minimal_cli):
        page = DocGenerator(auto_gen_tag=False).generate(_context(minimal_cli, "build"))

        assert "### Synopsis" not in page
        assert "-o, --out" in page


    def test_synopsis_is_dedented_without_markers(self):
        command = click.Command(
            "root",
            help="Root summary.\n\n    \b\n    DETAILS:\n        indented block\n    ",
        )

        page = DocGenerator(auto_gen_tag=False).generate(click.Context(command, info_name="root"))

        assert "### Synopsis\n\nRoot summary.\n\nDETAILS:\n    indented block\n" in page
        assert "\b" not in page


class TestGenerateTree:
    def test_children_written_before_parent(self, sample_cli, tmp_path):
        written = DocGenerator(auto_gen_tag=False).generate_tree(sample_cli, tmp_path)

        assert [path.name for path in written] == [
            "root_build.md",
            "root_items_add.md",
            "root_items.md",
            "root.md",
        ]

    def test_prepender_receives_output_filename(self, minimal_cli, tmp_path):
        seen = []

        def prepender(filename):
            seen.append(filename)
            return "PREFIX\n"

        DocGenerator(file_prepender=prepender, auto_gen_tag=False).generate_tree(
            minimal_cli, tmp_path
        )

        assert seen == [str(tmp_path / "root_build.md"), str(tmp_path / "root.md")]
        assert (tmp_path / "root.md").read_text(encoding="utf-8").startswith("PREFIX\n## root\n")
