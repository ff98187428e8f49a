"""Aggregation of object files into shared libraries and executables."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from .graph import BuildEdge, BuildGraph


class LinkKind(Enum):
    """Kind of linked artifact; the value is the ninja rule name."""

    SHARED_LIBRARY = "lib"
    EXECUTABLE = "link"


@dataclass(frozen=True)
class LinkTarget:
    """Artifact linked from an ordered list of object files."""

    output: str
    objects: Tuple[str, ...]
    ldflags: str = ""
    kind: LinkKind = LinkKind.SHARED_LIBRARY


def aggregate(graph: BuildGraph, target: LinkTarget) -> BuildEdge:
    """
    Emit the link edge for a target.

    Objects are passed through in order. Duplicates are not removed; a
    duplicated object is a configuration mistake of the caller.
    """
    edge = graph.build(
        target.kind.value,
        [target.output],
        target.objects,
        variables={"ldflags": target.ldflags},
    )
    logging.info(f"{target.kind.name.lower()} {target.output}: {len(target.objects)} inputs")
    return edge


def shared_library(graph: BuildGraph, output: str, objects: Iterable[str], ldflags: str = "") -> BuildEdge:
    """Link objects into a shared library."""
    return aggregate(graph, LinkTarget(output, tuple(objects), ldflags, LinkKind.SHARED_LIBRARY))


def executable(graph: BuildGraph, output: str, objects: Iterable[str], ldflags: str = "") -> BuildEdge:
    """Link objects into an executable."""
    return aggregate(graph, LinkTarget(output, tuple(objects), ldflags, LinkKind.EXECUTABLE))
