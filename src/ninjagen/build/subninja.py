"""Inclusion of nested build graphs."""

import logging
from typing import Iterable, List

from .graph import BuildGraph, join_path

NESTED_GRAPH_FILE = "build.ninja"


def link_subninja(graph: BuildGraph, directory: str, artifacts: Iterable[str]) -> List[str]:
    """
    Include the build graph located in `directory`.

    The nested graph is not read; its artifacts are trusted to be produced
    there and are returned with `directory` prepended, ready to be used as
    link inputs. They are claimed so no local edge can produce them too.

    Args:
        graph: Graph to emit into
        directory: Directory holding the nested build.ninja
        artifacts: Artifact paths relative to `directory`

    Returns:
        Artifact paths relative to the top-level graph

    Raises:
        ConfigurationError: If the directory is already included or an
            artifact path is absolute
    """
    rewritten = [join_path(directory, artifact) for artifact in artifacts]
    graph.subninja(join_path(directory, NESTED_GRAPH_FILE))
    graph.claim(rewritten, "subninja")
    logging.info(f"Included {directory}: {len(rewritten)} artifacts")
    return rewritten
