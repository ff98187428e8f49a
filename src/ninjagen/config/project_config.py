"""
Project description parser.

A project is described in an INI file listing components, embedded blobs,
nested graphs and link targets:

    [variables]
    CC = @CC@

    [component:libbase]
    dir = system/core/base
    sources =
        file.cpp
        logging.cpp
    cflags = -fPIC -Isystem/core/base/include

    [blob:font]
    input = res/font.bin
    symbol = font_data
    output = gen/font.h

    [subninja:zlib]
    dir = external/zlib/
    artifacts = libz.a

    [library:libbase.so]
    components = libbase

    [executable:tool]
    components = libbase
    subninjas = zlib
    ldflags = -lpthread

Interpolation is disabled: rule-level `$var` references and `@PLACEHOLDER@`
tokens pass through untouched. Keys keep their case.
"""

import configparser
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..build.component_compiler import CompileOptions, Component
from ..build.errors import ConfigurationError
from ..build.link_aggregator import LinkKind

BUILTIN_DIR = Path(__file__).parent.parent / "configs"


class ProjectConfigError(ConfigurationError):
    """Exception raised for project description errors."""

    pass


@dataclass(frozen=True)
class BlobSpec:
    """Binary file embedded into a generated header."""

    name: str
    input: str
    symbol: str
    output: Optional[str] = None


@dataclass(frozen=True)
class SubninjaSpec:
    """Nested build graph and the artifacts it provides."""

    name: str
    directory: str
    artifacts: Tuple[str, ...]


@dataclass(frozen=True)
class LinkSpec:
    """Link target described by the names of what it consumes."""

    output: str
    kind: LinkKind
    components: Tuple[str, ...] = ()
    subninjas: Tuple[str, ...] = ()
    objects: Tuple[str, ...] = ()
    ldflags: str = ""


@dataclass
class ProjectConfig:
    """
    Parsed project description.

    Usage:
        project = ProjectConfig.from_file(Path("project.ini"))
        project = ProjectConfig.builtin("dexdump")
    """

    source: str = "<memory>"
    description: str = ""
    variables: Dict[str, str] = field(default_factory=dict)
    components: List[Component] = field(default_factory=list)
    blobs: List[BlobSpec] = field(default_factory=list)
    subninjas: List[SubninjaSpec] = field(default_factory=list)
    link_targets: List[LinkSpec] = field(default_factory=list)

    SECTION_KINDS = ("component", "blob", "subninja", "library", "executable")

    @classmethod
    def from_file(cls, path: Path) -> "ProjectConfig":
        """
        Load a project description from an INI file.

        Raises:
            ProjectConfigError: If the file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ProjectConfigError(f"Project file not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ProjectConfigError(f"Failed to read project file {path}: {e}") from e
        return cls.from_string(text, str(path))

    @classmethod
    def from_string(cls, text: str, source: str = "<memory>") -> "ProjectConfig":
        """
        Parse a project description from INI text.

        Raises:
            ProjectConfigError: If the text cannot be parsed or is incomplete
        """
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str  # type: ignore[assignment]
        try:
            parser.read_string(text, source=source)
        except configparser.Error as e:
            raise ProjectConfigError(f"Failed to parse {source}: {e}") from e

        project = cls(source=source)
        for section in parser.sections():
            project._add_section(section, parser[section])

        logging.debug(
            f"Loaded {source}: {len(project.components)} components, "
            + f"{len(project.link_targets)} link targets"
        )
        return project

    @classmethod
    def builtin_names(cls) -> List[str]:
        """Names of the project descriptions shipped with the package."""
        return sorted(p.stem for p in BUILTIN_DIR.glob("*.ini"))

    @classmethod
    def builtin(cls, name: str) -> "ProjectConfig":
        """
        Load a project description shipped with the package.

        Raises:
            ProjectConfigError: If no such description exists
        """
        path = BUILTIN_DIR / f"{name}.ini"
        if not path.exists():
            available = ", ".join(cls.builtin_names())
            raise ProjectConfigError(
                f"Unknown configuration '{name}'. " + f"Available configurations: {available or 'none'}"
            )
        return cls.from_file(path)

    def _add_section(self, section: str, values: configparser.SectionProxy) -> None:
        if section == "ninjagen":
            self.description = values.get("description", "").strip()
            return
        if section == "variables":
            for key in values:
                self.variables[key] = values[key].strip()
            return

        kind, _, name = section.partition(":")
        name = name.strip()
        if kind not in self.SECTION_KINDS or not name:
            raise ProjectConfigError(f"{self.source}: unknown section [{section}]")

        if kind == "component":
            self.components.append(self._parse_component(name, values))
        elif kind == "blob":
            self.blobs.append(
                BlobSpec(
                    name=name,
                    input=self._require(section, values, "input"),
                    symbol=self._require(section, values, "symbol"),
                    output=values.get("output", "").strip() or None,
                )
            )
        elif kind == "subninja":
            artifacts = _split_list(self._require(section, values, "artifacts"))
            self.subninjas.append(
                SubninjaSpec(name=name, directory=self._require(section, values, "dir"), artifacts=artifacts)
            )
        else:
            self.link_targets.append(
                LinkSpec(
                    output=name,
                    kind=LinkKind.SHARED_LIBRARY if kind == "library" else LinkKind.EXECUTABLE,
                    components=_split_list(values.get("components", "")),
                    subninjas=_split_list(values.get("subninjas", "")),
                    objects=_split_list(values.get("objects", "")),
                    ldflags=values.get("ldflags", "").strip(),
                )
            )

    def _parse_component(self, name: str, values: configparser.SectionProxy) -> Component:
        files = _split_list(values.get("sources", ""))
        if not files:
            raise ProjectConfigError(f"{self.source}: component '{name}' has no sources")

        order_deps = None
        if "order_deps" in values:
            order_deps = _split_list(values["order_deps"])

        options = CompileOptions(cflags=values.get("cflags", "").strip(), order_deps=order_deps)
        directory = values.get("dir", "").strip()
        if directory:
            return Component.from_directory(name, directory, files, options)
        return Component(name=name, sources=files, options=options)

    def _require(self, section: str, values: configparser.SectionProxy, key: str) -> str:
        value = values.get(key, "").strip()
        if not value:
            raise ProjectConfigError(f"{self.source}: [{section}] is missing required field '{key}'")
        return value


def _split_list(value: str) -> Tuple[str, ...]:
    """Split a newline/whitespace separated list, dropping empty entries."""
    return tuple(item for item in value.split() if item)
