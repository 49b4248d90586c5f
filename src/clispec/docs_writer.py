"""Markdown documentation export.

Supplies the front matter and link callbacks to ``DocGenerator`` and
writes the markdown tree into the configured output directory.
"""

import logging
import os
from pathlib import Path

import click

from .config import ExportConfig
from .errors import DocsExportError
from .generator import DocGenerator

logger = logging.getLogger(__name__)

FRONT_MATTER_TEMPLATE = """---
title: "{title}"
description: "{description}"
categories: {categories}
type: {doc_type}
tags: {tags}
products: {products}
---
"""


def _stem(name: str) -> str:
    return os.path.splitext(os.path.basename(name))[0]


def title_for(filename: str) -> str:
    """Human readable title of a page (``my_command.md`` -> ``my command``)."""
    return _stem(filename).replace("_", " ")


def front_matter(filename: str, config: ExportConfig | None = None) -> str:
    """Render the YAML front matter placed at the top of a page."""
    config = config or ExportConfig()
    title = title_for(filename)
    return FRONT_MATTER_TEMPLATE.format(
        title=title,
        description=title,
        categories=config.categories,
        doc_type=config.doc_type,
        tags=config.tags,
        products=config.products,
    )


def link_for(name: str, config: ExportConfig | None = None) -> str:
    """Site-relative URL of a page (``my_command.md`` -> ``/libraries-and-tools/my-command``)."""
    config = config or ExportConfig()
    base = os.path.splitext(name)[0]
    return config.link_prefix + base.replace("_", "-").lower()


def write_docs(
    root: click.Command,
    config: ExportConfig | None = None,
    info_name: str | None = None,
) -> list[Path]:
    """Write one markdown page per command of the tree.

    Errors raised while rendering or writing pages are not wrapped.

    Args:
        root: Root command of the tree
        config: Export settings (output directory, front matter fields)
        info_name: Program name used in page names (defaults to the root name)

    Returns:
        Paths of the written pages

    Raises:
        DocsExportError: If the output directory cannot be created
    """
    config = config or ExportConfig()
    output_dir = config.output_path

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DocsExportError(f"Failed to create docs directory {output_dir}: {e}") from e

    generator = DocGenerator(
        file_prepender=lambda filename: front_matter(filename, config),
        link_handler=lambda name: link_for(name, config),
        auto_gen_tag=config.auto_gen_tag,
    )
    written = generator.generate_tree(root, output_dir, info_name=info_name)

    logger.info(f"Wrote {len(written)} markdown pages to {output_dir}")
    return written


__all__ = ["FRONT_MATTER_TEMPLATE", "front_matter", "link_for", "title_for", "write_docs"]
