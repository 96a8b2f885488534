"""Dialect parsers.

Importing this package registers every parser with
:data:`parser_registry`.
"""

from .base import HDLParser, parser_registry
from .verilog import VerilogParser
from .vhdl import VHDLParser

__all__ = [
    "HDLParser",
    "parser_registry",
    "VerilogParser",
    "VHDLParser",
]
