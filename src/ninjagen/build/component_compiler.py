"""
Component compilation.

A Component is a named group of sources sharing compile flags. Compiling it
emits one compile edge per plain C/C++ source, or a generate + compile chain
for generator inputs (.proto, .yy, .ll), and yields the object file paths in
source order.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .code_generators import generator_for
from .errors import ConfigurationError
from .extension_dispatcher import dispatch
from .graph import BuildGraph, join_path


@dataclass(frozen=True)
class CompileOptions:
    """Options shared by every source of a component.

    order_deps is None when not configured and () when configured empty;
    either way no '||' section is rendered.
    """

    cflags: str = ""
    order_deps: Optional[Tuple[str, ...]] = None

    @property
    def order_only(self) -> Tuple[str, ...]:
        return self.order_deps or ()


@dataclass(frozen=True)
class Component:
    """Named group of sources compiled with the same options."""

    name: str
    sources: Tuple[str, ...]
    options: CompileOptions = field(default_factory=CompileOptions)

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigurationError("Component name must not be empty")
        if not self.sources:
            raise ConfigurationError(f"Component '{self.name}' has no sources")

    @classmethod
    def from_directory(
        cls,
        name: str,
        directory: str,
        files: Iterable[str],
        options: Optional[CompileOptions] = None,
    ) -> "Component":
        """Create a component whose sources are `files` relative to `directory`."""
        return cls(
            name=name,
            sources=tuple(join_path(directory, f) for f in files),
            options=options or CompileOptions(),
        )


def compile_source(graph: BuildGraph, source: str, options: CompileOptions) -> str:
    """
    Emit the edge(s) for one source file.

    Returns:
        Path of the resulting object file

    Raises:
        UnsupportedExtensionError: If neither a generator nor a compile tool
            handles the source
    """
    generator = generator_for(source)
    if generator is not None:
        result = generator(graph, source, options.cflags, options.order_only)
        return result.object_file

    tool = dispatch(source)
    output = source + ".o"
    graph.build(
        tool.rule,
        [output],
        [source],
        order_only=options.order_only,
        variables={"cflags": options.cflags},
    )
    return output


def compile_component(graph: BuildGraph, component: Component) -> List[str]:
    """
    Compile every source of a component.

    Args:
        graph: Graph to emit into
        component: Component to compile

    Returns:
        Object file paths, one per source, in source order
    """
    objects = [compile_source(graph, source, component.options) for source in component.sources]
    logging.info(f"Component {component.name}: {len(objects)} object files")
    return objects
