"""
Shared test fixtures for clispec tests.

This module provides common fixtures used across all test types:
- An isolated working directory (exports default to ./docs)
- Sample Click command trees
- Framework-neutral fake commands for the extractor
"""

from dataclasses import dataclass, field

import click
import pytest

from clispec.click_group import SpecGroup
from clispec.config import ExportConfig
from clispec.models import STABILITY_ANNOTATION

# ============================================================================
# DIRECTORY FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test inside tmp_path.

    Exporters write to ./docs by default; this keeps the repository clean.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def export_config(tmp_path):
    """Export config writing into tmp_path/docs without the dated footer."""
    return ExportConfig(output_dir=str(tmp_path / "docs"), auto_gen_tag=False)


# ============================================================================
# CLICK COMMAND TREES
# ============================================================================


def build_sample_cli() -> click.Group:
    """Build a small command tree.

    \b
    root            (stable, --verbose/-v)
    ├── build       (--out/-o, default ".")
    └── items       (aliases ls, list; experimental)
        ├── add     (NAME argument, --force)
        └── purge   (hidden, deprecated)
    """

    @click.group(name="root", cls=SpecGroup, annotations={STABILITY_ANNOTATION: "stable"})
    @click.option("--verbose", "-v", is_flag=True, default=False, help="Verbose output")
    def root(verbose):
        """Root command for testing."""

    @root.command(name="build")
    @click.option("--out", "-o", default=".")
    def build(out):
        pass

    @root.group(
        name="items",
        aliases=["ls", "list"],
        annotations={STABILITY_ANNOTATION: "experimental"},
    )
    def items():
        """Manage items."""

    @items.command(name="add")
    @click.argument("name")
    @click.option("--force", is_flag=True, default=False, help="Overwrite an existing item")
    def add(name, force):
        """Add an item."""
        click.echo(f"added {name}")

    @items.command(name="purge", hidden=True, deprecated=True)
    def purge():
        """Remove every item."""

    return root


def build_minimal_cli() -> click.Group:
    """Root command with one child "build" owning one flag --out/-o."""

    @click.group(name="root")
    def root():
        pass

    @root.command(name="build")
    @click.option("--out", "-o", default=".")
    def build(out):
        pass

    return root


@pytest.fixture
def sample_cli():
    """Fresh sample command tree (5 commands)."""
    return build_sample_cli()


@pytest.fixture
def minimal_cli():
    """Fresh minimal command tree (2 commands)."""
    return build_minimal_cli()


# ============================================================================
# FRAMEWORK-NEUTRAL FAKES
# ============================================================================


@dataclass
class FakeFlag:
    name: str
    shorthand: str = ""
    usage: str = ""
    default_value: str = ""
    deprecated: str = ""


@dataclass
class FakeCommand:
    """Minimal CommandSource implementation independent of Click."""

    usage: str
    short: str = ""
    long: str = ""
    aliases: list[str] = field(default_factory=list)
    deprecated: str = ""
    annotations: dict[str, str] = field(default_factory=dict)
    subcommands: list["FakeCommand"] = field(default_factory=list)
    flags: list[FakeFlag] = field(default_factory=list)

    def children(self):
        return self.subcommands

    def local_flags(self):
        return self.flags
