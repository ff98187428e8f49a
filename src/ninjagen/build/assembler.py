"""
Top-level graph assembly.

Turns a ProjectConfig into a complete BuildGraph:
1. Declare placeholder variables and the shared rule templates
2. Include nested graphs (subninja)
3. Emit blob-embedding edges
4. Compile every component
5. Link libraries and executables

Assembly either completes or raises; text is produced only from a finished
graph, so a failed run never yields a partial graph.
"""

import logging
from typing import Dict, List, Optional

from ..config.project_config import LinkSpec, ProjectConfig
from .code_generators import genheader
from .component_compiler import compile_component
from .errors import ConfigurationError
from .graph import BuildGraph
from .link_aggregator import LinkTarget, aggregate
from .ninja_writer import render
from .rules import DEFAULT_RULES, DEFAULT_VARIABLES
from .subninja import link_subninja


class GraphAssembler:
    """
    Builds the graph for one project description.

    Example usage:
        assembler = GraphAssembler(ProjectConfig.builtin("base"))
        print(assembler.render(), end="")
    """

    def __init__(self, project: ProjectConfig):
        self.project = project
        self._objects: Dict[str, List[str]] = {}
        self._artifacts: Dict[str, List[str]] = {}
        self._graph: Optional[BuildGraph] = None

    def assemble(self) -> BuildGraph:
        """
        Build the graph. Repeated calls return the same graph.

        Raises:
            UnsupportedExtensionError: If a source has an unknown extension
            ConfigurationError: On invalid references or duplicate outputs
        """
        if self._graph is not None:
            return self._graph

        graph = BuildGraph(variables={**DEFAULT_VARIABLES, **self.project.variables})
        for template in DEFAULT_RULES:
            graph.rule(template)

        for spec in self.project.subninjas:
            if spec.name in self._artifacts:
                raise ConfigurationError(f"Subninja '{spec.name}' is defined twice")
            self._artifacts[spec.name] = link_subninja(graph, spec.directory, spec.artifacts)

        for blob in self.project.blobs:
            genheader(graph, blob.input, blob.symbol, blob.output)

        for component in self.project.components:
            if component.name in self._objects:
                raise ConfigurationError(f"Component '{component.name}' is defined twice")
            self._objects[component.name] = compile_component(graph, component)

        for spec in self.project.link_targets:
            aggregate(graph, self._resolve(spec))

        logging.info(f"Assembled {len(graph.edges)} edges from {self.project.source}")
        self._graph = graph
        return graph

    def render(self) -> str:
        """Assemble (if needed) and serialize the graph."""
        return render(self.assemble())

    def _resolve(self, spec: LinkSpec) -> LinkTarget:
        objects: List[str] = []
        for name in spec.components:
            if name not in self._objects:
                raise ConfigurationError(f"Link target '{spec.output}' references unknown component '{name}'")
            objects.extend(self._objects[name])
        for name in spec.subninjas:
            if name not in self._artifacts:
                raise ConfigurationError(f"Link target '{spec.output}' references unknown subninja '{name}'")
            objects.extend(self._artifacts[name])
        objects.extend(spec.objects)

        seen = set()
        for obj in objects:
            if obj in seen:
                raise ConfigurationError(f"Link target '{spec.output}' lists {obj} more than once")
            seen.add(obj)
        return LinkTarget(output=spec.output, objects=tuple(objects), ldflags=spec.ldflags, kind=spec.kind)


def generate(project: ProjectConfig) -> str:
    """Assemble and render the graph for a project description."""
    return GraphAssembler(project).render()
