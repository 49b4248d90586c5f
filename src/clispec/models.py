"""Data models for the CLI spec export.

This module defines the records produced by walking a command tree and
the envelope written to ``spec.json``. Every ``to_dict`` follows
omit-if-empty semantics: empty strings and empty maps are left out of the
serialized form.

Philosophy:
- Ruthlessly simple dataclasses
- Standard library only
- Built once per export, never mutated afterwards
"""

from dataclasses import dataclass, field
from typing import Any

STABILITY_ANNOTATION = "x-qlik-stability"
CLISPEC_VERSION = "0.1.0"


def _compact(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    """Build a dict from ordered pairs, dropping empty values."""
    return {key: value for key, value in pairs if value}


@dataclass
class FlagSpec:
    """One locally defined flag of a command.

    Attributes:
        shorthand: Single character short form (e.g. "o" for "-o")
        usage: Help text of the flag
        default: Default value as display text (e.g. ".", "false", "[]")
        deprecated: Deprecation notice
    """

    shorthand: str = ""
    usage: str = ""
    default: str = ""
    deprecated: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            [
                ("alias", self.shorthand),
                ("description", self.usage),
                ("default", self.default),
                ("deprecated", self.deprecated),
            ]
        )


@dataclass
class CommandNode:
    """One command of the tree and, recursively, its children.

    Attributes:
        name: Canonical name (first token of the usage string)
        alias: First declared alias only
        description: Long description
        deprecated: Deprecation notice
        stability: Value of the stability annotation
        flags: Flag name -> FlagSpec for locally defined flags
        commands: Child canonical name -> CommandNode
    """

    name: str
    alias: str = ""
    description: str = ""
    deprecated: str = ""
    stability: str = ""
    flags: dict[str, FlagSpec] = field(default_factory=dict)
    commands: dict[str, "CommandNode"] = field(default_factory=dict)

    def count(self) -> int:
        """Return the number of commands in this subtree, including self."""
        return 1 + sum(child.count() for child in self.commands.values())

    def to_dict(self) -> dict[str, Any]:
        # The name is the key in the parent's map, not a field.
        return _compact(
            [
                ("alias", self.alias),
                ("description", self.description),
                (STABILITY_ANNOTATION, self.stability),
                ("deprecated", self.deprecated),
                ("flags", flags_to_dict(self.flags)),
                ("commands", commands_to_dict(self.commands)),
            ]
        )


@dataclass
class SpecInfo:
    """The ``info`` block of the spec document."""

    version: str
    title: str = ""
    description: str = ""
    license: str = ""

    def to_dict(self) -> dict[str, Any]:
        data = _compact([("title", self.title), ("description", self.description)])
        # version is always emitted, even when empty
        data["version"] = self.version
        if self.license:
            data["license"] = self.license
        return data


@dataclass
class SpecEnvelope:
    """Root of the spec document.

    The root command's fields are flattened into the envelope rather than
    nested under a key of their own.
    """

    name: str
    info: SpecInfo
    clispec: str = CLISPEC_VERSION
    stability: str = ""
    flags: dict[str, FlagSpec] = field(default_factory=dict)
    commands: dict[str, CommandNode] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.name:
            data["name"] = self.name
        data["info"] = self.info.to_dict()
        data.update(
            _compact(
                [
                    ("clispec", self.clispec),
                    (STABILITY_ANNOTATION, self.stability),
                    ("flags", flags_to_dict(self.flags)),
                    ("commands", commands_to_dict(self.commands)),
                ]
            )
        )
        return data


def flags_to_dict(flags: dict[str, FlagSpec]) -> dict[str, Any]:
    """Serialize a flag map with keys in sorted order."""
    return {name: flags[name].to_dict() for name in sorted(flags)}


def commands_to_dict(commands: dict[str, CommandNode]) -> dict[str, Any]:
    """Serialize a command map with keys in sorted order."""
    return {name: commands[name].to_dict() for name in sorted(commands)}


@dataclass
class ValidationResult:
    """Result of validating one generated markdown file.

    Attributes:
        is_valid: Whether validation passed
        file_path: Path to validated file
        errors: List of error messages
        warnings: List of warning messages
    """

    is_valid: bool
    file_path: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


__all__ = [
    "CLISPEC_VERSION",
    "STABILITY_ANNOTATION",
    "CommandNode",
    "FlagSpec",
    "SpecEnvelope",
    "SpecInfo",
    "ValidationResult",
    "commands_to_dict",
    "flags_to_dict",
]
