"""
Build graph synthesis for ninjagen.

This package provides:
- Extension dispatch (source suffix -> compile tool)
- The structured build graph and its edge emitter
- Code generator adapters (protoc, yacc, lex, genheader)
- Component compilation and library/executable linking
- Subninja inclusion and ninja serialization

The top-level assembler lives in ninjagen.build.assembler.
"""

from .code_generators import GeneratedSource, genheader, lex, protoc, yacc
from .component_compiler import CompileOptions, Component, compile_component
from .errors import ConfigurationError, DuplicateOutputError, GraphError, UnsupportedExtensionError
from .extension_dispatcher import CompileTool, dispatch
from .graph import BuildEdge, BuildGraph, RuleTemplate, Subninja
from .link_aggregator import LinkKind, LinkTarget, aggregate, executable, shared_library
from .ninja_writer import NinjaWriter, render
from .subninja import link_subninja

__all__ = [
    "BuildEdge",
    "BuildGraph",
    "CompileOptions",
    "CompileTool",
    "Component",
    "ConfigurationError",
    "DuplicateOutputError",
    "GeneratedSource",
    "GraphError",
    "LinkKind",
    "LinkTarget",
    "NinjaWriter",
    "RuleTemplate",
    "Subninja",
    "UnsupportedExtensionError",
    "aggregate",
    "compile_component",
    "dispatch",
    "executable",
    "genheader",
    "lex",
    "link_subninja",
    "protoc",
    "render",
    "shared_library",
    "yacc",
]
