"""Maps source file extensions to compile tools."""

from enum import Enum
from pathlib import PurePosixPath
from typing import Dict

from .errors import UnsupportedExtensionError


class CompileTool(Enum):
    """Closed set of compile tools; the value is the ninja rule name."""

    C = "cc"
    CXX = "cxx"

    @property
    def rule(self) -> str:
        return self.value


EXTENSION_TABLE: Dict[str, CompileTool] = {
    ".c": CompileTool.C,
    ".cpp": CompileTool.CXX,
    ".cc": CompileTool.CXX,
}


def extension_of(path: str) -> str:
    """Return the final extension of a path, e.g. '.cc' for 'a/b.pb.cc'."""
    return PurePosixPath(path).suffix


def dispatch(path: str) -> CompileTool:
    """
    Select the compile tool for a source file.

    Matching is exact and case-sensitive ('.C' is not '.c').

    Args:
        path: Source file path

    Returns:
        CompileTool for the file

    Raises:
        UnsupportedExtensionError: If the extension is not in EXTENSION_TABLE
    """
    extension = extension_of(path)
    try:
        return EXTENSION_TABLE[extension]
    except KeyError:
        raise UnsupportedExtensionError(path, extension) from None
