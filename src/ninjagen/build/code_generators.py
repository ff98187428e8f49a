"""
Code generator adapters.

Each adapter derives generated file names from a single input path and emits
a generate edge, followed (except for genheader) by a compile edge for the
generated source:

- protoc:    a/b.proto -> a/b.pb.cc, a/b.pb.h -> a/b.pb.cc.o
- yacc:      x/y.yy    -> x/y.cpp (+ x/y.h via $header) -> x/y.cpp.o
- lex:       x/y.ll    -> x/y.cpp -> x/y.cpp.o
- genheader: any file  -> C header exposing the bytes as `unsigned char $var[]`

Derived names depend only on the input path. The directory part is kept
exactly as given.

Order-only prerequisites are attached to the compile edge only.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from .errors import ConfigurationError
from .extension_dispatcher import CompileTool, extension_of
from .graph import BuildGraph

INCLUDE_FLAG = "-I."


@dataclass(frozen=True)
class GeneratedSource:
    """Files produced for one generator input."""

    generated: Tuple[str, ...]
    header: Optional[str] = None
    source: Optional[str] = None
    object_file: Optional[str] = None


def strip_extension(path: str, suffix: str) -> str:
    """Remove `suffix` from the end of `path`, keeping the directory verbatim."""
    if not path.endswith(suffix) or path == suffix:
        raise ConfigurationError(f"Expected a '{suffix}' file, got: {path}")
    return path[: -len(suffix)]


def _join_flags(*flags: str) -> str:
    return " ".join(f for f in flags if f)


def _compile_generated(graph: BuildGraph, source: str, cflags: str, order_deps: Iterable[str]) -> str:
    object_file = source + ".o"
    graph.build(
        CompileTool.CXX.rule,
        [object_file],
        [source],
        order_only=order_deps,
        variables={"cflags": cflags},
    )
    return object_file


def protoc(graph: BuildGraph, source: str, cflags: str = "", order_deps: Iterable[str] = ()) -> GeneratedSource:
    """
    Generate C++ from a .proto file and compile it.

    The compile edge always uses the fixed include flag; `cflags` is accepted
    for a uniform adapter signature but not applied.
    """
    base = strip_extension(source, ".proto")
    cfile = base + ".pb.cc"
    hfile = base + ".pb.h"
    graph.build("protoc", [cfile, hfile], [source])
    ofile = _compile_generated(graph, cfile, INCLUDE_FLAG, order_deps)
    return GeneratedSource(generated=(cfile, hfile), header=hfile, source=cfile, object_file=ofile)


def yacc(graph: BuildGraph, source: str, cflags: str = "", order_deps: Iterable[str] = ()) -> GeneratedSource:
    """Generate a parser from a .yy grammar and compile it.

    The header is a side output of the generator, passed via $header.
    """
    base = strip_extension(source, ".yy")
    cfile = base + ".cpp"
    hfile = base + ".h"
    graph.build("yacc", [cfile], [source], variables={"header": hfile}, side_outputs=[hfile])
    ofile = _compile_generated(graph, cfile, _join_flags(INCLUDE_FLAG, cflags), order_deps)
    return GeneratedSource(generated=(cfile, hfile), header=hfile, source=cfile, object_file=ofile)


def lex(graph: BuildGraph, source: str, cflags: str = "", order_deps: Iterable[str] = ()) -> GeneratedSource:
    """Generate a scanner from a .ll file and compile it."""
    base = strip_extension(source, ".ll")
    cfile = base + ".cpp"
    graph.build("lex", [cfile], [source])
    ofile = _compile_generated(graph, cfile, _join_flags(INCLUDE_FLAG, cflags), order_deps)
    return GeneratedSource(generated=(cfile,), source=cfile, object_file=ofile)


def genheader(graph: BuildGraph, source: str, symbol: str, output: Optional[str] = None) -> GeneratedSource:
    """
    Embed a binary file into a C header as a byte array.

    Args:
        graph: Graph to emit into
        source: Binary input file
        symbol: Name of the array in the generated header, bound as $var
        output: Header path (defaults to '<source>.h')

    Returns:
        GeneratedSource whose header is the generated file
    """
    if not symbol:
        raise ConfigurationError(f"No symbol name given for embedded blob: {source}")
    header = output or source + ".h"
    graph.build("genheader", [header], [source], variables={"var": symbol})
    return GeneratedSource(generated=(header,), header=header)


CompilingGenerator = Callable[[BuildGraph, str, str, Iterable[str]], GeneratedSource]

CODE_GENERATORS: Dict[str, CompilingGenerator] = {
    ".proto": protoc,
    ".yy": yacc,
    ".ll": lex,
}


def generator_for(path: str) -> Optional[CompilingGenerator]:
    """Return the compiling generator for a source path, if any."""
    return CODE_GENERATORS.get(extension_of(path))
