"""Validation of generated markdown documentation.

Checks each page for the pieces the documentation site relies on: a YAML
front matter block with a title and description, a command heading, and
well-formed links and code fences.

Philosophy:
- Regex-based validation (fast)
- PyYAML for the front matter, the same parser the site generator uses
- Self-contained and regeneratable
"""

import re
from pathlib import Path

import yaml

from .models import ValidationResult

FRONT_MATTER_PATTERN = re.compile(r"\A---\n(.*?\n)---\n", re.DOTALL)


class DocsValidator:
    """Validates generated CLI documentation pages."""

    REQUIRED_FRONT_MATTER_KEYS = ["title", "description"]

    # Required sections for a complete page
    REQUIRED_SECTIONS = [
        "## ",  # Command heading
    ]

    def validate_file(self, file_path: str) -> ValidationResult:
        """Validate a single documentation file.

        Args:
            file_path: Path to markdown file to validate

        Returns:
            ValidationResult with errors and warnings

        Example:
            >>> validator = DocsValidator()
            >>> result = validator.validate_file("docs/clispec.md")
            >>> if not result.is_valid:
            ...     print(result.errors)
        """
        path = Path(file_path)
        errors: list[str] = []
        warnings: list[str] = []

        if not path.exists():
            errors.append(f"File does not exist: {file_path}")
            return ValidationResult(is_valid=False, file_path=file_path, errors=errors)

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            errors.append(f"Failed to read file: {e}")
            return ValidationResult(is_valid=False, file_path=file_path, errors=errors)

        body = content
        match = FRONT_MATTER_PATTERN.match(content)
        if match is None:
            errors.append("Missing front matter block")
        else:
            errors.extend(self._check_front_matter(match.group(1)))
            body = content[match.end() :]

        errors.extend(self._check_required_sections(body))
        warnings.extend(self._check_formatting(body))

        return ValidationResult(
            is_valid=not errors,
            file_path=file_path,
            errors=errors,
            warnings=warnings,
        )

    def validate_directory(self, dir_path: str) -> list[ValidationResult]:
        """Validate all markdown files in a directory.

        Args:
            dir_path: Path to directory containing markdown files

        Returns:
            List of ValidationResult objects, one per file
        """
        directory = Path(dir_path)

        if not directory.exists():
            return []

        return [self.validate_file(str(md_file)) for md_file in sorted(directory.glob("**/*.md"))]

    def _check_front_matter(self, text: str) -> list[str]:
        """Check that the front matter is a YAML mapping with the required keys."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            return [f"Front matter is not valid YAML: {e}"]

        if not isinstance(data, dict):
            return ["Front matter must be a mapping"]

        return [
            f"Front matter missing '{key}'"
            for key in self.REQUIRED_FRONT_MATTER_KEYS
            if not data.get(key)
        ]

    def _check_required_sections(self, content: str) -> list[str]:
        """Check that all required sections are present."""
        return [
            f"Missing required section: {section.strip()}"
            for section in self.REQUIRED_SECTIONS
            if not any(line.startswith(section) for line in content.splitlines())
        ]

    def _check_formatting(self, content: str) -> list[str]:
        """Check for formatting issues."""
        warnings = []

        broken_links = re.findall(r"\[([^\]]+)\]\(\)", content)
        if broken_links:
            warnings.append(f"Found broken links: {broken_links[:3]}")

        if content.count("```") % 2 != 0:
            warnings.append("Unclosed code block detected")

        return warnings


__all__ = ["DocsValidator"]
