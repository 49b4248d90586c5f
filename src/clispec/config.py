"""Configuration management module.

Export settings (output locations, spec metadata and the markdown front
matter fields) are read from a TOML file. Without a file every setting
falls back to its default, which reproduces the stock output layout:
``./docs/spec.json`` plus one markdown page per command under ``./docs``.

Lookup order:
- explicit ``--config`` path (must exist)
- ``clispec.toml`` in the current working directory
- built-in defaults
"""

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

try:
    import tomli  # type: ignore[import]
except ImportError:
    # Python 3.11+ ships the same parser as tomllib
    import tomllib as tomli  # type: ignore[import,no-redef]

from clispec.errors import ConfigError

logger = logging.getLogger(__name__)

BOOL_FIELDS = {"auto_gen_tag"}


@dataclass
class ExportConfig:
    """Settings shared by the spec and docs exporters."""

    output_dir: str = "docs"
    spec_filename: str = "spec.json"
    title: str | None = None  # defaults to "Specification for <program>"
    license: str = "MIT"
    link_prefix: str = "/libraries-and-tools/"
    categories: str = "Libraries & Tools"
    doc_type: str = "Commands"
    tags: str = "qlik-cli"
    products: str = "Qlik Cloud, QSEoK"
    auto_gen_tag: bool = True

    @property
    def output_path(self) -> Path:
        """Directory both exporters write into."""
        return Path(self.output_dir)

    @property
    def spec_path(self) -> Path:
        """Full path of the JSON spec file."""
        return self.output_path / self.spec_filename

    def title_for(self, program_name: str) -> str:
        """Spec title, derived from the program name unless configured."""
        return self.title or f"Specification for {program_name}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExportConfig":
        """Create from dictionary, ignoring unknown keys.

        Raises:
            ConfigError: If a known key holds a value of the wrong type
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

        values = {k: v for k, v in data.items() if k in known}
        for key, value in values.items():
            expected = bool if key in BOOL_FIELDS else str
            if not isinstance(value, expected):
                raise ConfigError(
                    f"Invalid value for {key}: expected {expected.__name__}, "
                    f"got {type(value).__name__} ({value!r})"
                )
        return cls(**values)


class ConfigManager:
    """Locate and load the clispec configuration file."""

    DEFAULT_CONFIG_FILE = "clispec.toml"
    SECTION = "clispec"

    @classmethod
    def get_config_path(cls, custom_path: str | None = None) -> Path:
        """Get configuration file path.

        Args:
            custom_path: Custom config file path (optional)

        Returns:
            Path to config file

        Raises:
            ConfigError: If a custom path is given but does not exist
        """
        if custom_path:
            path = Path(custom_path).expanduser().resolve()
            if not path.exists():
                raise ConfigError(f"Config file not found: {path}")
            return path

        return Path.cwd() / cls.DEFAULT_CONFIG_FILE

    @classmethod
    def get_config(cls, custom_path: str | None = None) -> ExportConfig:
        """Get configuration (alias for load_config)."""
        return cls.load_config(custom_path)

    @classmethod
    def load_config(cls, custom_path: str | None = None) -> ExportConfig:
        """Load configuration from file.

        A ``[clispec]`` table is used when present, otherwise the top level
        of the document.

        Args:
            custom_path: Custom config file path (optional)

        Returns:
            ExportConfig object

        Raises:
            ConfigError: If loading fails
        """
        config_path = cls.get_config_path(custom_path)

        if not config_path.exists():
            logger.debug("Config file not found, using defaults")
            return ExportConfig()

        try:
            with open(config_path, "rb") as f:
                data = tomli.load(f)

            section = data.get(cls.SECTION, data)
            if not isinstance(section, dict):
                raise ConfigError(f"[{cls.SECTION}] must be a table")

            logger.debug(f"Loaded config from: {config_path}")
            return ExportConfig.from_dict(section)

        except ConfigError:
            raise
        except Exception as e:
            raise ConfigError(f"Failed to load config: {e}") from e


__all__ = ["ConfigManager", "ExportConfig"]
