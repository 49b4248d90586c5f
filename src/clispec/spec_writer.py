"""JSON spec generation.

Builds the ``SpecEnvelope`` for a root command and writes it as indented
JSON (``docs/spec.json`` by default).

Serialization and write failures raise ``SpecExportError``; nothing is
written when serialization fails.
"""

import json
import logging
import os
from pathlib import Path

from .config import ExportConfig
from .errors import SpecExportError
from .extractor import CLIExtractor, canonical_name, stability
from .models import CLISPEC_VERSION, SpecEnvelope, SpecInfo
from .sources import CommandSource

logger = logging.getLogger(__name__)

SPEC_FILE_MODE = 0o644

# Written as \uXXXX escapes so the file is safe to embed in HTML
HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def normalize_version(version: str) -> str:
    """Strip a single leading "v" (``v1.2.3`` -> ``1.2.3``)."""
    return version[1:] if version.startswith("v") else version


def build_spec(
    root: CommandSource, version: str, config: ExportConfig | None = None
) -> SpecEnvelope:
    """Build the spec envelope for a root command.

    Args:
        root: Root of the command tree
        version: Program version, with or without a leading "v"
        config: Export settings (title and license)

    Returns:
        SpecEnvelope with the root's flags and children flattened in
    """
    config = config or ExportConfig()
    extractor = CLIExtractor()
    name = canonical_name(root.usage)

    return SpecEnvelope(
        name=name,
        info=SpecInfo(
            title=config.title_for(name),
            description=root.long,
            version=normalize_version(version),
            license=config.license,
        ),
        clispec=CLISPEC_VERSION,
        stability=stability(root.annotations),
        flags=extractor.extract_flags(root),
        commands=extractor.extract_children(root),
    )


def render_spec(envelope: SpecEnvelope) -> str:
    """Serialize a spec envelope to 2-space indented JSON.

    ``<``, ``>``, ``&`` and the line/paragraph separators are written as
    ``\\u`` escapes.

    Raises:
        SpecExportError: If the envelope cannot be serialized
    """
    try:
        content = json.dumps(envelope.to_dict(), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SpecExportError(f"Failed to serialize spec: {e}") from e

    for char, escape in HTML_ESCAPES.items():
        content = content.replace(char, escape)
    return content


def write_spec(
    root: CommandSource, version: str, config: ExportConfig | None = None
) -> Path:
    """Generate the spec for a command tree and write it to disk.

    The target file is overwritten.

    Args:
        root: Root of the command tree
        version: Program version
        config: Export settings (output directory and filename)

    Returns:
        Path of the written file

    Raises:
        SpecExportError: If serialization or the write fails
    """
    config = config or ExportConfig()
    envelope = build_spec(root, version, config)
    content = render_spec(envelope)

    spec_path = config.spec_path
    try:
        spec_path.parent.mkdir(parents=True, exist_ok=True)
        spec_path.write_text(content, encoding="utf-8")
        os.chmod(spec_path, SPEC_FILE_MODE)
    except OSError as e:
        raise SpecExportError(f"Failed to write spec to {spec_path}: {e}") from e

    logger.info(f"Wrote spec for {len(envelope.commands)} top-level commands to {spec_path}")
    return spec_path


__all__ = [
    "HTML_ESCAPES",
    "SPEC_FILE_MODE",
    "build_spec",
    "normalize_version",
    "render_spec",
    "write_spec",
]
