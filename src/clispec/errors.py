"""Exception types for clispec."""


class ClispecError(Exception):
    """Base exception for clispec errors."""

    exit_code = 1


class ConfigError(ClispecError):
    """Raised when configuration loading fails."""

    pass


class SpecExportError(ClispecError):
    """Raised when the JSON spec cannot be serialized or written."""

    pass


class DocsExportError(ClispecError):
    """Raised when the markdown documentation tree cannot be written."""

    pass


__all__ = ["ClispecError", "ConfigError", "DocsExportError", "SpecExportError"]
