"""Top level package for the HDL interface extraction library.

This package reads Verilog modules and VHDL entities as plain text and
reports their name, ports and generics.  From that information it
generates an instantiation template, a stimulus testbench and an SVG
block diagram.

Key concepts:

* **Model classes** describe ports, generics and whole design units.
  See :mod:`hdllang.model`.
* **Parsers** implement one contract per dialect.  See
  :mod:`hdllang.parsers`.
* **Factory** picks the parser for a dialect tag.  See
  :mod:`hdllang.factory`.
* **Renderers** produce complete documents (SVG, Markdown).  See
  :mod:`hdllang.renderers`.
* **Registry** enables decorator-based plugin registration.  See
  :mod:`hdllang.registry`.

Example usage::

    from hdllang import create_parser, generate

    parser = create_parser("vhdl", text)
    print(parser.generate_testbench())
    svg = generate(parser.get_ports(), dark_mode=True)
"""

from .model import (
    UNKNOWN_MODULE,
    Direction,
    Port,
    GenericParameter,
    ModuleDescriptor,
    RequiredLibraries,
)
from .dialect import Dialect, UnsupportedDialectError
from .registry import Registry
from .parsers import HDLParser, VerilogParser, VHDLParser, parser_registry
from .factory import create_parser
from .renderers import (
    DocumentRenderer,
    SvgDiagramRenderer,
    MarkdownDocRenderer,
    renderer_registry,
    generate,
)

__all__ = [
    "UNKNOWN_MODULE",
    "Direction",
    "Port",
    "GenericParameter",
    "ModuleDescriptor",
    "RequiredLibraries",
    "Dialect",
    "UnsupportedDialectError",
    "Registry",
    "HDLParser",
    "VerilogParser",
    "VHDLParser",
    "parser_registry",
    "create_parser",
    "DocumentRenderer",
    "SvgDiagramRenderer",
    "MarkdownDocRenderer",
    "renderer_registry",
    "generate",
]
