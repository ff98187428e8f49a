"""Exceptions raised while synthesizing a build graph.

Two families are kept apart so callers can tell "unsupported file type"
from "bad input data":

- UnsupportedExtensionError: a source file no compile tool or code
  generator knows how to handle
- ConfigurationError: malformed or inconsistent project description,
  including outputs claimed by more than one edge
"""


class GraphError(Exception):
    """Base exception for build graph synthesis."""

    pass


class UnsupportedExtensionError(GraphError):
    """Raised when a source file extension has no compile tool."""

    def __init__(self, path: str, extension: str):
        self.path = path
        self.extension = extension
        super().__init__(f"Unknown extension '{extension or '(none)'}' for source file: {path}")


class ConfigurationError(GraphError):
    """Raised for malformed or inconsistent build configuration."""

    pass


class DuplicateOutputError(ConfigurationError):
    """Raised when two edges claim the same output path."""

    def __init__(self, path: str, rule: str):
        self.path = path
        self.rule = rule
        super().__init__(f"Output '{path}' of rule '{rule}' is already produced by another edge")
