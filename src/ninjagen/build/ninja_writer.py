"""
Serialization of a BuildGraph into ninja syntax.

Output layout:

    # <header comment>

    CC = @CC@
    ...

    rule cc
      command = ...

    subninja external/foo/build.ninja
    build m.c.o: cc m.c || gen.h
        cflags = -O2

Paths are escaped; command templates and variable values are written as-is
so that $in, $out and $VARIABLE references keep working.
"""

import io
from typing import Iterable, Mapping, Optional, TextIO

from .graph import BuildEdge, BuildGraph, RuleTemplate, Subninja
from .rules import HEADER_COMMENT


def escape_path(path: str) -> str:
    """Escape a path for use in a build line."""
    return path.replace("$", "$$").replace(" ", "$ ").replace(":", "$:")


def _paths(paths: Iterable[str]) -> str:
    return " ".join(escape_path(p) for p in paths)


class NinjaWriter:
    """Writes ninja statements to a text stream."""

    RULE_INDENT = "  "
    EDGE_INDENT = "    "

    def __init__(self, output: TextIO):
        self.output = output

    def comment(self, text: str) -> None:
        self.output.write(f"# {text}\n")

    def newline(self) -> None:
        self.output.write("\n")

    def variable(self, name: str, value: str, indent: str = "") -> None:
        self.output.write(f"{indent}{name} = {value}\n")

    def variables(self, values: Mapping[str, str]) -> None:
        for name, value in values.items():
            self.variable(name, value)

    def rule(self, template: RuleTemplate) -> None:
        self.output.write(f"rule {template.name}\n")
        self.variable("command", template.command, self.RULE_INDENT)
        if template.description:
            self.variable("description", template.description, self.RULE_INDENT)

    def subninja(self, statement: Subninja) -> None:
        self.output.write(f"subninja {escape_path(statement.path)}\n")

    def build(self, edge: BuildEdge) -> None:
        line = f"build {_paths(edge.outputs)}: {edge.rule} {_paths(edge.inputs)}"
        if edge.order_only:
            line += f" || {_paths(edge.order_only)}"
        self.output.write(line + "\n")
        for name, value in edge.variables:
            self.variable(name, value, self.EDGE_INDENT)

    def graph(self, graph: BuildGraph, header: Optional[str] = HEADER_COMMENT) -> None:
        """Write a complete graph: header, variables, rules, statements."""
        if header:
            self.comment(header)
            self.newline()
        if graph.variables:
            self.variables(graph.variables)
            self.newline()
        for template in graph.rules.values():
            self.rule(template)
            self.newline()
        for statement in graph.statements:
            if isinstance(statement, Subninja):
                self.subninja(statement)
            else:
                self.build(statement)


def render(graph: BuildGraph, header: Optional[str] = HEADER_COMMENT) -> str:
    """Serialize a graph to ninja text."""
    buffer = io.StringIO()
    NinjaWriter(buffer).graph(graph, header)
    return buffer.getvalue()
