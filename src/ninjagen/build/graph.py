"""
Structured build graph.

BuildGraph accumulates rule declarations, build edges and subninja includes
for one assembly run. Nothing is written until the graph is handed to
NinjaWriter, so a failed run never leaves a truncated graph behind.

Every edge-producing call goes through BuildGraph.build(), which keeps a
registry of claimed output paths and rejects a second claim on the same path.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple, Union

from .errors import ConfigurationError, DuplicateOutputError, GraphError


@dataclass(frozen=True)
class RuleTemplate:
    """Named, reusable command pattern referenced by build edges."""

    name: str
    command: str
    description: Optional[str] = None


@dataclass(frozen=True)
class BuildEdge:
    """One rule application: inputs -> outputs with bound variables."""

    rule: str
    outputs: Tuple[str, ...]
    inputs: Tuple[str, ...]
    order_only: Tuple[str, ...] = ()
    variables: Tuple[Tuple[str, str], ...] = ()

    def variable(self, name: str) -> Optional[str]:
        """Return the value bound to a variable, or None if unbound."""
        for key, value in self.variables:
            if key == name:
                return value
        return None


@dataclass(frozen=True)
class Subninja:
    """Inclusion of a nested build graph file."""

    path: str


Statement = Union[BuildEdge, Subninja]


def join_path(directory: str, name: str) -> str:
    """
    Prefix `name` with `directory`; a trailing slash on `directory` is optional.

    Raises:
        ConfigurationError: If `name` is absolute
    """
    if name.startswith("/"):
        raise ConfigurationError(f"Path {name} must be relative to {directory}")
    if not directory:
        return name
    return f"{directory.rstrip('/')}/{name}"


@dataclass
class BuildGraph:
    """
    Accumulator for the rules and statements of one build graph.

    Example:
        graph = BuildGraph()
        graph.rule(RuleTemplate("cc", "$CC -c $in -o $out"))
        graph.build("cc", ["m.c.o"], ["m.c"], variables={"cflags": "-O2"})
    """

    variables: Dict[str, str] = field(default_factory=dict)
    rules: Dict[str, RuleTemplate] = field(default_factory=dict)
    statements: List[Statement] = field(default_factory=list)
    _claimed: Set[str] = field(default_factory=set, repr=False)
    _included: Set[str] = field(default_factory=set, repr=False)

    @property
    def edges(self) -> List[BuildEdge]:
        return [s for s in self.statements if isinstance(s, BuildEdge)]

    @property
    def subninjas(self) -> List[Subninja]:
        return [s for s in self.statements if isinstance(s, Subninja)]

    @property
    def claimed_outputs(self) -> Set[str]:
        """Copy of every output path claimed so far."""
        return set(self._claimed)

    def rule(self, template: RuleTemplate) -> RuleTemplate:
        """
        Declare a rule template.

        Raises:
            GraphError: If a rule with the same name is already declared
        """
        if template.name in self.rules:
            raise GraphError(f"Rule '{template.name}' is already declared")
        self.rules[template.name] = template
        logging.debug(f"Declared rule {template.name}")
        return template

    def subninja(self, path: str) -> Subninja:
        """
        Record an include of a nested build graph file.

        Raises:
            ConfigurationError: If the file is already included
        """
        if path in self._included:
            raise ConfigurationError(f"Nested graph {path} is included twice")
        self._included.add(path)
        statement = Subninja(path)
        self.statements.append(statement)
        return statement

    def claim(self, paths: Iterable[str], rule: str) -> None:
        """
        Register output paths in the uniqueness registry.

        Raises:
            DuplicateOutputError: If a path is already claimed, or listed twice
        """
        pending: Set[str] = set()
        for path in paths:
            if path in self._claimed or path in pending:
                raise DuplicateOutputError(path, rule)
            pending.add(path)
        self._claimed.update(pending)

    def build(
        self,
        rule: str,
        outputs: Iterable[str],
        inputs: Iterable[str],
        order_only: Iterable[str] = (),
        variables: Optional[Mapping[str, str]] = None,
        side_outputs: Iterable[str] = (),
    ) -> BuildEdge:
        """
        Validate and record one build edge.

        Args:
            rule: Name of a declared rule
            outputs: Output paths (non-empty)
            inputs: Explicit input paths (non-empty)
            order_only: Order-only prerequisites, rendered after '||'
            variables: Variables bound for this edge, in insertion order
            side_outputs: Files the command also produces but which are only
                named through a variable; claimed, not rendered

        Returns:
            The recorded BuildEdge

        Raises:
            ConfigurationError: On empty outputs/inputs or an input that is
                also order-only
            GraphError: If the rule is not declared
            DuplicateOutputError: If an output is already claimed
        """
        outputs = tuple(outputs)
        inputs = tuple(inputs)
        order_only = tuple(order_only)
        side_outputs = tuple(side_outputs)

        if not outputs:
            raise ConfigurationError(f"Edge for rule '{rule}' has no outputs")
        if not inputs:
            raise ConfigurationError(f"Edge for rule '{rule}' producing {outputs[0]} has no inputs")
        if rule not in self.rules:
            raise GraphError(f"Edge producing {outputs[0]} references undeclared rule '{rule}'")

        overlap = sorted(set(inputs) & set(order_only))
        if overlap:
            raise ConfigurationError(
                f"Edge producing {outputs[0]} lists {', '.join(overlap)} "
                + "both as input and as order-only prerequisite"
            )

        self.claim(outputs + side_outputs, rule)

        edge = BuildEdge(
            rule=rule,
            outputs=outputs,
            inputs=inputs,
            order_only=order_only,
            variables=tuple((variables or {}).items()),
        )
        self.statements.append(edge)
        logging.debug(f"Edge {rule}: {' '.join(outputs)}")
        return edge
