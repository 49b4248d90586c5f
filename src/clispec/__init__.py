"""clispec - CLI spec and markdown documentation export for Click applications.

Walks a live Click command tree and writes two artifacts:
- a JSON "spec" document (commands, flags, metadata)
- a tree of markdown pages with YAML front matter

Host applications attach the hidden ``generate-spec`` and ``generate-docs``
commands with :func:`clispec.commands.register_generate_commands`.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
